"""Decoders from raw event-file fields to typed records.

Each known record type has one decoder in ``DECODERS``. Decoders read fields by
position and tolerate short field lists: anything past the end is ``None``.
Integer fields that are present but not base-10 numbers come back as ``None``
and are reported as ``FieldProblem`` entries so callers can surface them.
"""

from __future__ import annotations

import datetime
import re
from typing import TYPE_CHECKING

from retrosheet_events.domain.event_type import TeamSide
from retrosheet_events.domain.records import (
    CommentRecord,
    DataRecord,
    FieldProblem,
    GameIdentityRecord,
    InfoRecord,
    LineupRecord,
    OpaqueRecord,
    PlayRecord,
    VersionRecord,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from retrosheet_events.domain.records import LineupKind, StructuredRecord

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_GAME_ID_RE = re.compile(r"^(?P<team>[A-Z0-9]{3})(?P<date>\d{8})(?P<number>\d)$")

BATTING_ORDER_RANGE = range(1, 10)
FIELD_POSITION_RANGE = range(1, 13)


class FieldReader:
    """Bounds-checked positional access over one record's fields."""

    def __init__(self, fields: Sequence[str]) -> None:
        self._fields = fields
        self.problems: list[FieldProblem] = []

    def __len__(self) -> int:
        return len(self._fields)

    def raw(self, index: int) -> str | None:
        if index >= len(self._fields):
            return None
        return self._fields[index]

    def text(self, index: int) -> str | None:
        value = self.raw(index)
        return value if value else None

    def integer(self, index: int, name: str) -> int | None:
        value = self.text(index)
        if value is None:
            return None
        stripped = value.strip()
        if not _INTEGER_RE.match(stripped):
            self.report(name, index, value, "not a base-10 integer")
            return None
        return int(stripped, 10)

    def bounded(self, index: int, name: str, allowed: range) -> int | None:
        value = self.integer(index, name)
        if value is None or value not in allowed:
            return None
        return value

    def team_side(self, index: int) -> TeamSide | None:
        value = self.integer(index, "team_side")
        if value is None:
            return None
        try:
            return TeamSide(value)
        except ValueError:
            self.report("team_side", index, self._fields[index], "expected 0 (visiting) or 1 (home)")
            return None

    def joined(self) -> str | None:
        if not self._fields:
            return None
        return ",".join(self._fields)

    def report(self, name: str, index: int, raw: str, message: str) -> None:
        self.problems.append(FieldProblem(field=name, index=index, raw=raw, message=message))


def _decode_game_id(reader: FieldReader) -> GameIdentityRecord:
    game_id = reader.text(0)
    if game_id is None:
        return GameIdentityRecord(game_id=None)
    match = _GAME_ID_RE.match(game_id)
    if match is None:
        reader.report("game_id", 0, game_id, "expected 3-char team, YYYYMMDD date and 1-digit game number")
        return GameIdentityRecord(game_id=game_id)
    try:
        game_date = datetime.datetime.strptime(match["date"], "%Y%m%d").date()
    except ValueError:
        reader.report("game_id", 0, game_id, "date component is not a calendar date")
        return GameIdentityRecord(game_id=game_id)
    return GameIdentityRecord(
        game_id=game_id,
        home_team=match["team"],
        game_date=game_date,
        game_number=int(match["number"]),
    )


def _decode_version(reader: FieldReader) -> VersionRecord:
    return VersionRecord(version=reader.text(0))


def _decode_info(reader: FieldReader) -> InfoRecord:
    return InfoRecord(info_type=reader.text(0), info_value=reader.text(1))


def _lineup_decoder(kind: LineupKind) -> Callable[[FieldReader], LineupRecord]:
    def _decode(reader: FieldReader) -> LineupRecord:
        return LineupRecord(
            kind=kind,
            player_id=reader.text(0),
            player_name=reader.text(1),
            team_side=reader.team_side(2),
            batting_order=reader.bounded(3, "batting_order", BATTING_ORDER_RANGE),
            field_position=reader.bounded(4, "field_position", FIELD_POSITION_RANGE),
        )

    return _decode


def _decode_play(reader: FieldReader) -> PlayRecord:
    inning = reader.integer(0, "inning")
    if inning is not None and inning < 1:
        reader.report("inning", 0, reader.raw(0) or "", "inning must be positive")
        inning = None
    return PlayRecord(
        inning=inning,
        team_side=reader.team_side(1),
        player_id=reader.text(2),
        count=reader.text(3),
        pitch_sequence=reader.text(4),
        event=reader.text(5),
    )


def _decode_comment(reader: FieldReader) -> CommentRecord:
    return CommentRecord(comment=reader.joined())


def _decode_data(reader: FieldReader) -> DataRecord:
    return DataRecord(
        data_type=reader.text(0),
        player_id=reader.text(1),
        numeric_value=reader.integer(2, "numeric_value"),
    )


DECODERS: dict[str, Callable[[FieldReader], StructuredRecord]] = {
    "id": _decode_game_id,
    "version": _decode_version,
    "info": _decode_info,
    "start": _lineup_decoder("start"),
    "play": _decode_play,
    "sub": _lineup_decoder("sub"),
    "com": _decode_comment,
    "data": _decode_data,
}

KNOWN_RECORD_TYPES: frozenset[str] = frozenset(DECODERS)


def decode_checked(record_type: str, fields: Sequence[str]) -> tuple[StructuredRecord, list[FieldProblem]]:
    """Decode one record, returning the record and any field problems found."""
    reader = FieldReader(fields)
    decoder = DECODERS.get(record_type)
    if decoder is None:
        return OpaqueRecord(record_type=record_type, value=reader.joined()), []
    return decoder(reader), reader.problems


def decode(record_type: str, fields: Sequence[str]) -> StructuredRecord:
    """Decode one record. Unparseable numeric fields come back as ``None``."""
    record, _ = decode_checked(record_type, fields)
    return record
