from __future__ import annotations

import dataclasses
from functools import reduce
from typing import TYPE_CHECKING

from retrosheet_events.domain.records import BoundaryIssue, RawRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

GAME_ID_RECORD = "id"


def _next_game_id(current: str | None, record: RawRecord) -> str | None:
    if record.record_type != GAME_ID_RECORD:
        return current
    return record.fields[0] if record.fields else None


def _stamp(
    acc: tuple[str | None, list[RawRecord]], record: RawRecord
) -> tuple[str | None, list[RawRecord]]:
    current, stamped = acc
    current = _next_game_id(current, record)
    if record.game_id != current:
        record = dataclasses.replace(record, game_id=current)
    stamped.append(record)
    return current, stamped


def assign_game_ids(records: Iterable[RawRecord]) -> list[RawRecord]:
    """Forward-fill ``game_id`` from each ``id`` record onto the records after it.

    The ``id`` record itself carries its own id. Records before the first
    ``id`` record get ``None``. Input records are not modified.
    """
    _, stamped = reduce(_stamp, records, (None, []))
    return stamped


def find_orphan_ranges(records: Iterable[RawRecord]) -> list[BoundaryIssue]:
    """Group contiguous records without a game id into line ranges."""
    issues: list[BoundaryIssue] = []
    run: list[RawRecord] = []
    for record in records:
        if record.game_id is None:
            run.append(record)
            continue
        if run:
            issues.append(_issue_for(run))
            run = []
    if run:
        issues.append(_issue_for(run))
    return issues


def _issue_for(run: list[RawRecord]) -> BoundaryIssue:
    return BoundaryIssue(first_line=run[0].line_number, last_line=run[-1].line_number, record_count=len(run))
