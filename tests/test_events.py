from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from retrosheet_events.cache import ArchiveCache
from retrosheet_events.domain.errors import RetrievalError
from retrosheet_events.domain.event_type import EventType
from retrosheet_events.events import EventLoader
from retrosheet_events.ingest.catalog import EventArchive, event_url
from tests.helpers import SAMPLE_EVENT_FILE, SAMPLE_PLAY_COUNT, build_event_zip

if TYPE_CHECKING:
    from pathlib import Path

    from retrosheet_events.domain.records import ParsedEventFile
    from retrosheet_events.result import Result


class FakeArchiveSource:
    def __init__(self, archives: dict[tuple[int, EventType], bytes]) -> None:
        self._archives = archives
        self.fetched: list[EventArchive] = []

    def fetch(self, archive: EventArchive) -> bytes:
        self.fetched.append(archive)
        data = self._archives.get((archive.year, archive.event_type))
        if data is None:
            raise RetrievalError(
                f"HTTP 404 for {archive.filename}", year=archive.year, event_type=archive.event_type, url=archive.url
            )
        return data


def _archive(year: int, event_type: EventType = EventType.REGULAR) -> EventArchive:
    return EventArchive(year, event_type, event_url(year, event_type))


_TWO_FILE_ZIP = build_event_zip(
    {
        "2023NYA.EVA": SAMPLE_EVENT_FILE,
        "2023BOS.EVA": "id,BOS202304070\nplay,1,0,mullc002,00,,K\n",
        "TEAM2023": "NYA,A,New York,Yankees\n",
    }
)


class TestLoadArchive:
    def test_parses_every_event_file(self) -> None:
        loader = EventLoader(FakeArchiveSource({(2023, EventType.REGULAR): _TWO_FILE_ZIP}), max_workers=1)
        result = loader.load_archive(_archive(2023))
        assert result.is_ok()
        files = result.unwrap()
        assert [f.source_file for f in files] == ["2023BOS.EVA", "2023NYA.EVA"]
        assert all(f.source_year == 2023 for f in files)
        assert all(f.source_type is EventType.REGULAR for f in files)
        assert len(files[1].records_of("play")) == SAMPLE_PLAY_COUNT

    def test_parallel_parse_matches_serial(self) -> None:
        source = FakeArchiveSource({(2023, EventType.REGULAR): _TWO_FILE_ZIP})
        serial = EventLoader(source, max_workers=1).load_archive(_archive(2023)).unwrap()
        parallel = EventLoader(source, max_workers=2).load_archive(_archive(2023)).unwrap()
        assert parallel == serial

    def test_missing_archive_is_err(self) -> None:
        loader = EventLoader(FakeArchiveSource({}))
        result = loader.load_archive(_archive(2023, EventType.POST))
        assert result.is_err()
        error = result.unwrap_err()
        assert error.year == 2023
        assert error.event_type is EventType.POST

    def test_bad_zip_is_err_with_archive_context(self) -> None:
        loader = EventLoader(FakeArchiveSource({(2023, EventType.REGULAR): b"not a zip"}))
        result = loader.load_archive(_archive(2023))
        assert result.is_err()
        error = result.unwrap_err()
        assert error.year == 2023
        assert error.url == event_url(2023)

    def test_archive_without_event_files_is_empty_ok(self) -> None:
        data = build_event_zip({"TEAM2023": "NYA,A,New York,Yankees\n"})
        loader = EventLoader(FakeArchiveSource({(2023, EventType.REGULAR): data}))
        result = loader.load_archive(_archive(2023))
        assert result.is_ok()
        assert result.unwrap() == []


class TestCaching:
    def test_download_is_cached(self, tmp_path: Path) -> None:
        source = FakeArchiveSource({(2023, EventType.REGULAR): _TWO_FILE_ZIP})
        cache = ArchiveCache(tmp_path)
        loader = EventLoader(source, cache, max_workers=1)
        loader.load_archive(_archive(2023))
        loader.load_archive(_archive(2023))
        assert len(source.fetched) == 1
        assert cache.read(2023) == _TWO_FILE_ZIP

    def test_cache_disabled_always_fetches(self, tmp_path: Path) -> None:
        source = FakeArchiveSource({(2023, EventType.REGULAR): _TWO_FILE_ZIP})
        cache = ArchiveCache(tmp_path)
        loader = EventLoader(source, cache, use_cache=False, max_workers=1)
        loader.load_archive(_archive(2023))
        loader.load_archive(_archive(2023))
        assert len(source.fetched) == 2
        assert cache.status() == []

    def test_cached_archive_used_without_source(self, tmp_path: Path) -> None:
        cache = ArchiveCache(tmp_path)
        cache.write(2023, EventType.REGULAR, _TWO_FILE_ZIP)
        source = FakeArchiveSource({})
        result = EventLoader(source, cache, max_workers=1).load_archive(_archive(2023))
        assert result.is_ok()
        assert source.fetched == []


class TestLoad:
    def test_results_keyed_by_year_and_type(self) -> None:
        source = FakeArchiveSource({(2023, EventType.REGULAR): _TWO_FILE_ZIP})
        results = EventLoader(source, max_workers=1).load([_archive(2023), _archive(2022)])
        assert set(results) == {(2023, EventType.REGULAR), (2022, EventType.REGULAR)}
        assert results[(2023, EventType.REGULAR)].is_ok()
        assert results[(2022, EventType.REGULAR)].is_err()

    def test_progress_callback_called_per_archive(self) -> None:
        seen: list[tuple[int, bool]] = []

        def _progress(archive: EventArchive, result: Result[list[ParsedEventFile], RetrievalError]) -> None:
            seen.append((archive.year, result.is_ok()))

        source = FakeArchiveSource({(2023, EventType.REGULAR): _TWO_FILE_ZIP})
        EventLoader(source, max_workers=1, progress_callback=_progress).load([_archive(2023), _archive(2022)])
        assert seen == [(2023, True), (2022, False)]

    def test_cache_write_failure_still_loads(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        not_a_dir = tmp_path / "cache"
        not_a_dir.write_text("occupied")
        source = FakeArchiveSource({(2023, EventType.REGULAR): _TWO_FILE_ZIP})
        loader = EventLoader(source, ArchiveCache(not_a_dir), max_workers=1)
        with caplog.at_level(logging.WARNING, logger="retrosheet_events.events"):
            result = loader.load_archive(_archive(2023))
        assert result.is_ok()
        assert len(result.unwrap()) == 2
        assert "Could not cache 2023eve.zip" in caplog.text
