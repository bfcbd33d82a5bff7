from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from retrosheet_events.domain.event_type import EventType


class RetrosheetError(Exception):
    """Base error for retrosheet_events failures."""


class UnknownEventTypeError(RetrosheetError, ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown event type {value!r} (expected one of: regular, allstar, post)")
        self.value = value


class RetrievalError(RetrosheetError):
    """An event archive could not be downloaded, read or unpacked.

    Attributes:
        year: Season of the archive.
        event_type: Archive category.
        url: Location the archive was requested from, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        year: int | None = None,
        event_type: EventType | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.year = year
        self.event_type = event_type
        self.url = url
