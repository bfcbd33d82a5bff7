"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest

from retrosheet_events.domain.event_type import EventType
from retrosheet_events.parsing.event_file import parse_event_text
from tests.helpers import SAMPLE_EVENT_FILE

if TYPE_CHECKING:
    from collections.abc import Generator

    from retrosheet_events.domain.records import ParsedEventFile


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove RETROSHEET__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("RETROSHEET__"):
            monkeypatch.delenv(key)


@pytest.fixture
def restore_root_logger() -> Generator[None]:
    """Restore root logger handlers after a test that configures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_file() -> ParsedEventFile:
    return parse_event_text(
        SAMPLE_EVENT_FILE,
        source_year=2023,
        source_type=EventType.REGULAR,
        source_file="2023NYA.EVA",
    )
