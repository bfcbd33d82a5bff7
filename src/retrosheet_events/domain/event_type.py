from __future__ import annotations

from enum import Enum, IntEnum

from retrosheet_events.domain.errors import UnknownEventTypeError


class EventType(Enum):
    REGULAR = "regular"
    ALLSTAR = "allstar"
    POST = "post"

    @property
    def archive_suffix(self) -> str:
        return _ARCHIVE_SUFFIXES[self]

    @classmethod
    def parse(cls, value: str) -> EventType:
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnknownEventTypeError(value) from None

    @classmethod
    def from_archive_name(cls, name: str) -> EventType | None:
        """Classify an archive file name like ``2024eve.zip`` by its suffix."""
        lowered = name.lower()
        for event_type, suffix in _ARCHIVE_SUFFIXES.items():
            if lowered.endswith(f"{suffix}.zip"):
                return event_type
        return None


_ARCHIVE_SUFFIXES: dict[EventType, str] = {
    EventType.REGULAR: "eve",
    EventType.ALLSTAR: "as",
    EventType.POST: "post",
}


class TeamSide(IntEnum):
    VISITING = 0
    HOME = 1
