from __future__ import annotations

import io
import logging
import posixpath
import zipfile
from dataclasses import dataclass

from retrosheet_events.domain.errors import RetrievalError

logger = logging.getLogger(__name__)

EVENT_FILE_EXTENSIONS: tuple[str, ...] = (".eva", ".evn", ".eve")

# Retrosheet event files are plain ASCII with the odd Latin-1 name.
_ENCODING = "latin-1"


@dataclass(frozen=True)
class ArchiveMember:
    name: str
    text: str


def is_event_file(name: str) -> bool:
    return name.lower().endswith(EVENT_FILE_EXTENSIONS)


def extract_event_members(data: bytes) -> list[ArchiveMember]:
    """Return the event files inside a zip archive, sorted by member name.

    Roster, team and other members are skipped. An archive with no event files
    returns an empty list.
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            members = [
                ArchiveMember(name=posixpath.basename(name), text=zf.read(name).decode(_ENCODING))
                for name in sorted(zf.namelist())
                if is_event_file(name)
            ]
    except zipfile.BadZipFile as e:
        raise RetrievalError(f"Not a valid event archive: {e}") from e

    logger.debug("Extracted %d event file(s)", len(members))
    return members
