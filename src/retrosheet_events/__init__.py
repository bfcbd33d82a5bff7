"""Retrieve and parse Retrosheet play-by-play event files."""

from retrosheet_events.domain.event_type import EventType, TeamSide
from retrosheet_events.domain.records import (
    CommentRecord,
    DataRecord,
    GameIdentityRecord,
    InfoRecord,
    LineupRecord,
    OpaqueRecord,
    ParsedEventFile,
    ParsedRecord,
    PlayRecord,
    RawRecord,
    VersionRecord,
)
from retrosheet_events.parsing.boundary import assign_game_ids
from retrosheet_events.parsing.decoders import decode, decode_checked
from retrosheet_events.parsing.event_file import parse_event_file, parse_event_text
from retrosheet_events.parsing.tokenizer import tokenize
from retrosheet_events.projections import project_lineups, project_metadata, project_plays, project_records

__all__ = [
    "CommentRecord",
    "DataRecord",
    "EventType",
    "GameIdentityRecord",
    "InfoRecord",
    "LineupRecord",
    "OpaqueRecord",
    "ParsedEventFile",
    "ParsedRecord",
    "PlayRecord",
    "RawRecord",
    "TeamSide",
    "VersionRecord",
    "assign_game_ids",
    "decode",
    "decode_checked",
    "parse_event_file",
    "parse_event_text",
    "project_lineups",
    "project_metadata",
    "project_plays",
    "project_records",
    "tokenize",
]
