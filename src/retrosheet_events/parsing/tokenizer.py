import csv
import logging
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

_LINE_TERMINATORS = "\r\n"
_STRAY_BREAKS = str.maketrans({"\r": " ", "\n": " "})


def _split_fields(text: str) -> list[str]:
    try:
        return next(csv.reader([text], strict=False), [])
    except csv.Error as e:
        # Oversized fields exceed csv's field limit; quoting is lost on this path.
        logger.debug("csv could not split line (%s); splitting on commas", e)
        return text.split(",")


def tokenize(line: str) -> tuple[str, list[str]] | None:
    """Split one event-file line into its record type and fields.

    Quoted segments may contain commas and come back as a single field with the
    quotes removed. Blank lines return None. A line without a comma yields an
    empty field list. Line breaks left inside the line become spaces.
    """
    text = line.rstrip(_LINE_TERMINATORS).translate(_STRAY_BREAKS)
    if not text.strip():
        return None
    parts = _split_fields(text)
    if not parts:
        return None
    return parts[0], parts[1:]


def tokenize_lines(lines: Iterable[str]) -> Iterator[tuple[int, str, list[str]]]:
    """Yield ``(line_number, record_type, fields)`` for each non-blank line.

    Line numbers are 1-based positions in the input, so blank lines still
    advance the count.
    """
    for line_number, line in enumerate(lines, start=1):
        token = tokenize(line)
        if token is None:
            continue
        record_type, fields = token
        yield line_number, record_type, fields
