"""Where Retrosheet event archives live and which seasons exist."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from retrosheet_events.domain.event_type import EventType

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.retrosheet.org"

_AVAILABLE_YEARS: dict[EventType, tuple[int, ...]] = {
    EventType.REGULAR: tuple(range(1911, 2025)),
    # No All-Star game in 1945 or 2020.
    EventType.ALLSTAR: (*range(1933, 1945), *range(1946, 2020), *range(2021, 2025)),
    # No World Series in 1904 or 1994.
    EventType.POST: (1903, *range(1905, 1994), *range(1995, 2025)),
}


@dataclass(frozen=True)
class EventArchive:
    year: int
    event_type: EventType
    url: str

    @property
    def filename(self) -> str:
        return archive_filename(self.year, self.event_type)


def archive_filename(year: int, event_type: EventType = EventType.REGULAR) -> str:
    return f"{year}{event_type.archive_suffix}.zip"


def event_url(year: int, event_type: EventType = EventType.REGULAR, base_url: str = DEFAULT_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/events/{archive_filename(year, event_type)}"


def available_years(event_type: EventType = EventType.REGULAR) -> tuple[int, ...]:
    """Seasons Retrosheet documents as published for *event_type*."""
    return _AVAILABLE_YEARS[event_type]


def url_exists(url: str, client: httpx.Client) -> bool:
    try:
        response = client.head(url)
    except httpx.HTTPError as e:
        logger.debug("HEAD %s failed: %s", url, e)
        return False
    return response.status_code == 200


def list_events(
    years: Iterable[int] | None = None,
    event_types: Iterable[EventType] = (EventType.REGULAR,),
    *,
    check_availability: bool = True,
    base_url: str = DEFAULT_BASE_URL,
    client: httpx.Client | None = None,
) -> list[EventArchive]:
    """Build the archives for every requested (year, type) pair.

    With *check_availability* each URL is checked with a HEAD request and only
    archives answering 200 are kept. Results are ordered newest year first,
    then by type.
    """
    requested = None if years is None else tuple(years)
    archives: list[EventArchive] = []
    for event_type in event_types:
        type_years = available_years(event_type) if requested is None else requested
        archives.extend(EventArchive(year, event_type, event_url(year, event_type, base_url)) for year in type_years)

    if check_availability and archives:
        if client is None:
            with httpx.Client(timeout=httpx.Timeout(10.0), follow_redirects=True) as http:
                available = [a for a in archives if url_exists(a.url, http)]
        else:
            available = [a for a in archives if url_exists(a.url, client)]
        missing = len(archives) - len(available)
        if not available:
            logger.warning("No event archives found for the requested years")
        elif missing:
            logger.info("Found %d available archive(s) (%d unavailable)", len(available), missing)
        archives = available

    return sorted(archives, key=lambda a: (-a.year, a.event_type.value))
