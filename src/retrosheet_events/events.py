from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from retrosheet_events.domain.errors import RetrievalError
from retrosheet_events.ingest.extract import extract_event_members
from retrosheet_events.parsing.event_file import parse_event_text
from retrosheet_events.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from retrosheet_events.cache.archive_cache import ArchiveCache
    from retrosheet_events.domain.event_type import EventType
    from retrosheet_events.domain.records import ParsedEventFile
    from retrosheet_events.ingest.catalog import EventArchive
    from retrosheet_events.ingest.extract import ArchiveMember
    from retrosheet_events.result import Result

logger = logging.getLogger(__name__)


@runtime_checkable
class ArchiveSource(Protocol):
    def fetch(self, archive: EventArchive) -> bytes: ...


def _parse_member(member: ArchiveMember, year: int, event_type: EventType) -> ParsedEventFile:
    return parse_event_text(member.text, source_year=year, source_type=event_type, source_file=member.name)


class EventLoader:
    """Fetches event archives (cache first) and parses every event file in them.

    Each archive's outcome is reported separately: ``Err`` when the archive
    could not be retrieved or unpacked, ``Ok([])`` when it was retrieved but
    held no event files.
    """

    def __init__(
        self,
        source: ArchiveSource,
        cache: ArchiveCache | None = None,
        *,
        use_cache: bool = True,
        max_workers: int | None = None,
        progress_callback: Callable[[EventArchive, Result[list[ParsedEventFile], RetrievalError]], None]
        | None = None,
    ) -> None:
        self._source = source
        self._cache = cache
        self._use_cache = use_cache and cache is not None
        self._max_workers = max_workers
        self._progress_callback = progress_callback

    def _archive_bytes(self, archive: EventArchive) -> bytes:
        if self._use_cache and self._cache is not None:
            cached = self._cache.read(archive.year, archive.event_type)
            if cached is not None:
                logger.info("Using cached %s", archive.filename)
                return cached
        data = self._source.fetch(archive)
        if self._use_cache and self._cache is not None:
            try:
                self._cache.write(archive.year, archive.event_type, data)
            except OSError as e:
                logger.warning("Could not cache %s: %s", archive.filename, e)
        return data

    def _parse_members(self, members: list[ArchiveMember], archive: EventArchive) -> list[ParsedEventFile]:
        if len(members) > 1 and self._max_workers != 1:
            with ProcessPoolExecutor(max_workers=self._max_workers) as pool:
                futures = [pool.submit(_parse_member, m, archive.year, archive.event_type) for m in members]
                return [future.result() for future in futures]
        return [_parse_member(m, archive.year, archive.event_type) for m in members]

    def load_archive(self, archive: EventArchive) -> Result[list[ParsedEventFile], RetrievalError]:
        try:
            members = extract_event_members(self._archive_bytes(archive))
        except RetrievalError as e:
            error = e
            if e.year is None:
                error = RetrievalError(e.message, year=archive.year, event_type=archive.event_type, url=archive.url)
            logger.warning("Failed to load %s: %s", archive.filename, e)
            return Err(error)

        if not members:
            logger.warning("No event files found in %s", archive.filename)
            return Ok([])

        files = self._parse_members(members, archive)
        logger.info(
            "Parsed %d record(s) from %d file(s) in %s",
            sum(len(f.records) for f in files),
            len(files),
            archive.filename,
        )
        return Ok(files)

    def load(
        self, archives: Iterable[EventArchive]
    ) -> dict[tuple[int, EventType], Result[list[ParsedEventFile], RetrievalError]]:
        results: dict[tuple[int, EventType], Result[list[ParsedEventFile], RetrievalError]] = {}
        for archive in archives:
            result = self.load_archive(archive)
            results[(archive.year, archive.event_type)] = result
            if self._progress_callback:
                self._progress_callback(archive, result)
        return results
