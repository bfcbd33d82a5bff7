from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from retrosheet_events.cache.archive_cache import ArchiveCache
from retrosheet_events.events import EventLoader
from retrosheet_events.ingest.archive_source import RetrosheetArchiveSource

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from retrosheet_events.config import LoaderSettings


@dataclass(frozen=True)
class FetchContext:
    client: httpx.Client
    cache: ArchiveCache
    loader: EventLoader


@contextmanager
def build_fetch_context(
    settings: LoaderSettings,
    *,
    use_cache: bool | None = None,
    max_workers: int | None = None,
    progress_callback: Callable[..., None] | None = None,
) -> Iterator[FetchContext]:
    """Composition root for commands that download and parse archives."""
    client = httpx.Client(
        timeout=httpx.Timeout(settings.timeout, connect=settings.connect_timeout), follow_redirects=True
    )
    try:
        cache = ArchiveCache(settings.cache_dir)
        loader = EventLoader(
            RetrosheetArchiveSource(client=client),
            cache,
            use_cache=settings.cache_enabled if use_cache is None else use_cache,
            max_workers=max_workers if max_workers is not None else settings.max_workers,
            progress_callback=progress_callback,
        )
        yield FetchContext(client=client, cache=cache, loader=loader)
    finally:
        client.close()
