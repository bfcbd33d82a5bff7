"""Table projections over parsed event records.

Every projection accepts any iterable of ``ParsedRecord`` (records of other
types are skipped) and returns a pandas DataFrame with a deterministic column
layout, so repeated runs over the same input produce identical frames.
"""

from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

import pandas as pd

from retrosheet_events.domain.records import InfoRecord, LineupRecord, PlayRecord

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from retrosheet_events.domain.records import ParsedRecord

logger = logging.getLogger(__name__)

GAME_KEY_COLUMNS: tuple[str, ...] = ("game_id", "source_year", "source_type")

PLAY_COLUMNS: tuple[str, ...] = (
    "game_id",
    "line_number",
    "source_year",
    "source_type",
    "source_file",
    "inning",
    "team_side",
    "player_id",
    "count",
    "pitch_sequence",
    "event",
)

LINEUP_COLUMNS: tuple[str, ...] = (
    "game_id",
    "line_number",
    "source_year",
    "source_type",
    "source_file",
    "kind",
    "player_id",
    "player_name",
    "team_side",
    "batting_order",
    "field_position",
)

RECORD_COLUMNS: tuple[str, ...] = ("game_id", "line_number", "record_type", "source_year", "source_type", "source_file")

_NULLABLE_INTS = ("line_number", "source_year", "inning", "team_side", "batting_order", "field_position")


def _cell(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _context(parsed: ParsedRecord) -> dict[str, Any]:
    return {
        "game_id": parsed.game_id,
        "line_number": parsed.line_number,
        "record_type": parsed.record_type,
        "source_year": parsed.source_year,
        "source_type": _cell(parsed.source_type),
        "source_file": parsed.source_file,
    }


def _frame(rows: list[dict[str, Any]], columns: Iterable[str]) -> pd.DataFrame:
    column_list = list(columns)
    df = pd.DataFrame([{c: row.get(c) for c in column_list} for row in rows], columns=column_list)
    int_columns = {c: "Int64" for c in _NULLABLE_INTS if c in df.columns}
    return df.astype(int_columns) if int_columns else df


def project_metadata(records: Iterable[ParsedRecord]) -> pd.DataFrame:
    """Pivot ``info`` records into one row per game.

    Columns are ``game_id``, ``source_year``, ``source_type`` and then one
    column per distinct ``info_type`` in first-seen order across the input.
    Games without a given info type get ``None``. When a game repeats an info
    type, the first value is kept.
    """
    games: dict[str | None, dict[str, Any]] = {}
    info_columns: dict[str, None] = {}
    duplicates = 0

    for parsed in records:
        info = parsed.record
        if not isinstance(info, InfoRecord) or info.info_type is None:
            continue
        row = games.get(parsed.game_id)
        if row is None:
            row = {
                "game_id": parsed.game_id,
                "source_year": parsed.source_year,
                "source_type": _cell(parsed.source_type),
            }
            games[parsed.game_id] = row
        info_columns.setdefault(info.info_type, None)
        if info.info_type in row:
            duplicates += 1
            continue
        row[info.info_type] = info.info_value

    if duplicates:
        logger.debug("Ignored %d repeated info entries (first value kept)", duplicates)

    return _frame(list(games.values()), [*GAME_KEY_COLUMNS, *info_columns])


def project_plays(records: Iterable[ParsedRecord]) -> pd.DataFrame:
    """One row per ``play`` record, in input order, with ``game_id`` first.

    Nothing is dropped or deduplicated, including plays whose fields decoded
    to nulls.
    """
    rows: list[dict[str, Any]] = []
    for parsed in records:
        play = parsed.record
        if not isinstance(play, PlayRecord):
            continue
        row = _context(parsed)
        row.update({k: _cell(v) for k, v in dataclasses.asdict(play).items()})
        rows.append(row)
    return _frame(rows, PLAY_COLUMNS)


def project_lineups(records: Iterable[ParsedRecord]) -> pd.DataFrame:
    """One row per ``start`` or ``sub`` record, in input order."""
    rows: list[dict[str, Any]] = []
    for parsed in records:
        lineup = parsed.record
        if not isinstance(lineup, LineupRecord):
            continue
        row = _context(parsed)
        row.update({k: _cell(v) for k, v in dataclasses.asdict(lineup).items()})
        rows.append(row)
    return _frame(rows, LINEUP_COLUMNS)


def project_records(
    records: Iterable[ParsedRecord],
    record_types: Collection[str] | None = None,
) -> pd.DataFrame:
    """Long table of every record with its decoded attributes flattened.

    Attribute columns follow the context columns in first-seen order; a row
    has ``None`` for attributes its record type does not define.
    """
    rows: list[dict[str, Any]] = []
    attribute_columns: dict[str, None] = {}
    for parsed in records:
        if record_types is not None and parsed.record_type not in record_types:
            continue
        row = _context(parsed)
        for key, value in dataclasses.asdict(parsed.record).items():
            if key in row:
                continue
            attribute_columns.setdefault(key, None)
            row[key] = _cell(value)
        rows.append(row)
    return _frame(rows, [*RECORD_COLUMNS, *attribute_columns])
