from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

from retrosheet_events.domain.records import DecodeIssue, ParsedEventFile, ParsedRecord, RawRecord
from retrosheet_events.parsing.boundary import assign_game_ids, find_orphan_ranges
from retrosheet_events.parsing.decoders import decode_checked
from retrosheet_events.parsing.tokenizer import tokenize_lines

if TYPE_CHECKING:
    from collections.abc import Iterable

    from retrosheet_events.domain.event_type import EventType

logger = logging.getLogger(__name__)


def read_raw_records(
    lines: Iterable[str],
    *,
    source_year: int | None = None,
    source_type: EventType | None = None,
    source_file: str | None = None,
) -> list[RawRecord]:
    return [
        RawRecord(
            line_number=line_number,
            record_type=record_type,
            fields=tuple(fields),
            source_year=source_year,
            source_type=source_type,
            source_file=source_file,
        )
        for line_number, record_type, fields in tokenize_lines(lines)
    ]


def parse_event_file(
    lines: Iterable[str],
    *,
    source_year: int | None = None,
    source_type: EventType | None = None,
    source_file: str | None = None,
) -> ParsedEventFile:
    """Parse the lines of one event file into raw and decoded records.

    A bad record never aborts the parse: decode problems and records without a
    preceding ``id`` record are collected on the result instead.
    """
    raw_records = assign_game_ids(
        read_raw_records(lines, source_year=source_year, source_type=source_type, source_file=source_file)
    )
    label = source_file or "<event lines>"

    boundary_issues = find_orphan_ranges(raw_records)
    for issue in boundary_issues:
        logger.warning(
            "%s: %d record(s) on lines %d-%d precede any game id record",
            label,
            issue.record_count,
            issue.first_line,
            issue.last_line,
        )

    parsed: list[ParsedRecord] = []
    decode_issues: list[DecodeIssue] = []
    for raw in raw_records:
        record, problems = decode_checked(raw.record_type, raw.fields)
        if problems:
            logger.debug("%s line %d: %s", label, raw.line_number, "; ".join(p.message for p in problems))
            decode_issues.append(
                DecodeIssue(line_number=raw.line_number, record_type=raw.record_type, problems=tuple(problems))
            )
        parsed.append(
            ParsedRecord(
                line_number=raw.line_number,
                record_type=raw.record_type,
                record=record,
                game_id=raw.game_id,
                source_year=raw.source_year,
                source_type=raw.source_type,
                source_file=raw.source_file,
            )
        )

    if decode_issues:
        logger.warning("%s: %d record(s) had undecodable fields", label, len(decode_issues))
    logger.debug("%s: parsed %d records", label, len(parsed))

    return ParsedEventFile(
        source_file=source_file,
        source_year=source_year,
        source_type=source_type,
        raw_records=tuple(raw_records),
        records=tuple(parsed),
        decode_issues=tuple(decode_issues),
        boundary_issues=tuple(boundary_issues),
    )


def parse_event_text(
    text: str,
    *,
    source_year: int | None = None,
    source_type: EventType | None = None,
    source_file: str | None = None,
) -> ParsedEventFile:
    r"""Parse a whole event file held in memory.

    Lines break only on ``\n``, ``\r\n`` and ``\r``; other Unicode line
    separators stay inside the record they appear in.
    """
    return parse_event_file(
        io.StringIO(text, newline=None), source_year=source_year, source_type=source_type, source_file=source_file
    )
