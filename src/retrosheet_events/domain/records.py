from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Literal

from retrosheet_events.domain.event_type import EventType, TeamSide


@dataclass(frozen=True)
class RawRecord:
    line_number: int
    record_type: str
    fields: tuple[str, ...] = ()
    game_id: str | None = None
    source_year: int | None = None
    source_type: EventType | None = None
    source_file: str | None = None


@dataclass(frozen=True)
class GameIdentityRecord:
    game_id: str | None
    home_team: str | None = None
    game_date: datetime.date | None = None
    game_number: int | None = None


@dataclass(frozen=True)
class VersionRecord:
    version: str | None


@dataclass(frozen=True)
class InfoRecord:
    info_type: str | None
    info_value: str | None = None


LineupKind = Literal["start", "sub"]


@dataclass(frozen=True)
class LineupRecord:
    kind: LineupKind
    player_id: str | None
    player_name: str | None = None
    team_side: TeamSide | None = None
    batting_order: int | None = None
    field_position: int | None = None


@dataclass(frozen=True)
class PlayRecord:
    inning: int | None
    team_side: TeamSide | None = None
    player_id: str | None = None
    count: str | None = None
    pitch_sequence: str | None = None
    event: str | None = None


@dataclass(frozen=True)
class CommentRecord:
    comment: str | None


@dataclass(frozen=True)
class DataRecord:
    data_type: str | None
    player_id: str | None = None
    numeric_value: int | None = None


@dataclass(frozen=True)
class OpaqueRecord:
    record_type: str
    value: str | None


StructuredRecord = (
    GameIdentityRecord
    | VersionRecord
    | InfoRecord
    | LineupRecord
    | PlayRecord
    | CommentRecord
    | DataRecord
    | OpaqueRecord
)


@dataclass(frozen=True)
class ParsedRecord:
    """A decoded line together with the file and game it came from."""

    line_number: int
    record_type: str
    record: StructuredRecord
    game_id: str | None = None
    source_year: int | None = None
    source_type: EventType | None = None
    source_file: str | None = None


@dataclass(frozen=True)
class FieldProblem:
    field: str
    index: int
    raw: str
    message: str


@dataclass(frozen=True)
class DecodeIssue:
    line_number: int
    record_type: str
    problems: tuple[FieldProblem, ...]


@dataclass(frozen=True)
class BoundaryIssue:
    first_line: int
    last_line: int
    record_count: int


@dataclass(frozen=True)
class ParsedEventFile:
    source_file: str | None
    source_year: int | None
    source_type: EventType | None
    raw_records: tuple[RawRecord, ...] = ()
    records: tuple[ParsedRecord, ...] = ()
    decode_issues: tuple[DecodeIssue, ...] = ()
    boundary_issues: tuple[BoundaryIssue, ...] = ()

    def game_ids(self) -> list[str]:
        """Distinct game ids in file order."""
        seen: dict[str, None] = {}
        for raw in self.raw_records:
            if raw.game_id is not None:
                seen.setdefault(raw.game_id, None)
        return list(seen)

    def records_of(self, record_type: str) -> list[ParsedRecord]:
        return [r for r in self.records if r.record_type == record_type]
