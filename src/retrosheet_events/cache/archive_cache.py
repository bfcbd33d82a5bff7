from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from retrosheet_events.domain.event_type import EventType
from retrosheet_events.ingest.catalog import archive_filename

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)

_YEAR_RE = re.compile(r"^(\d{4})")


@dataclass(frozen=True)
class CacheEntry:
    year: int | None
    event_type: EventType | None
    size_bytes: int
    modified: datetime.datetime
    path: Path


class ArchiveCache:
    """Stores downloaded event archives on disk under their Retrosheet names."""

    def __init__(self, cache_dir: Path) -> None:
        self._cache_dir = cache_dir

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    def path_for(self, year: int, event_type: EventType = EventType.REGULAR) -> Path:
        return self._cache_dir / archive_filename(year, event_type)

    def is_cached(self, year: int, event_type: EventType = EventType.REGULAR) -> bool:
        return self.path_for(year, event_type).is_file()

    def read(self, year: int, event_type: EventType = EventType.REGULAR) -> bytes | None:
        path = self.path_for(year, event_type)
        if not path.is_file():
            return None
        logger.debug("Cache hit for %s", path.name)
        return path.read_bytes()

    def write(self, year: int, event_type: EventType, data: bytes) -> Path:
        self._cache_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(year, event_type)
        tmp = path.with_suffix(".zip.part")
        try:
            tmp.write_bytes(data)
            tmp.replace(path)
        finally:
            tmp.unlink(missing_ok=True)
        logger.debug("Cached %s (%d bytes)", path.name, len(data))
        return path

    def _archives(self) -> list[Path]:
        if not self._cache_dir.is_dir():
            return []
        return sorted(self._cache_dir.glob("*.zip"))

    def status(self) -> list[CacheEntry]:
        """Describe every cached archive, newest year first, then by type."""
        entries: list[CacheEntry] = []
        for path in self._archives():
            stat = path.stat()
            year_match = _YEAR_RE.match(path.name)
            entries.append(
                CacheEntry(
                    year=int(year_match.group(1)) if year_match else None,
                    event_type=EventType.from_archive_name(path.name),
                    size_bytes=stat.st_size,
                    modified=datetime.datetime.fromtimestamp(stat.st_mtime),
                    path=path,
                )
            )
        return sorted(
            entries,
            key=lambda e: (-(e.year or 0), e.event_type.value if e.event_type else ""),
        )

    def clear(
        self,
        years: Iterable[int] | None = None,
        event_types: Iterable[EventType] | None = None,
    ) -> int:
        """Delete cached archives matching the filters. Returns the count removed."""
        year_filter = None if years is None else set(years)
        type_filter = None if event_types is None else set(event_types)
        removed = 0
        for entry in self.status():
            if year_filter is not None and entry.year not in year_filter:
                continue
            if type_filter is not None and entry.event_type not in type_filter:
                continue
            entry.path.unlink(missing_ok=True)
            removed += 1
        logger.info("Removed %d cached archive(s) from %s", removed, self._cache_dir)
        return removed
