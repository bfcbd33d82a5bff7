from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import httpx

from retrosheet_events.domain.errors import RetrievalError
from retrosheet_events.ingest._retry import default_http_retry

if TYPE_CHECKING:
    from retrosheet_events.ingest.catalog import EventArchive

logger = logging.getLogger(__name__)

_DEFAULT_RETRY = default_http_retry("Retrosheet archive download")


class RetrosheetArchiveSource:
    """Downloads event archive bytes from the Retrosheet server."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        retry: Callable[[Callable[..., Any]], Callable[..., Any]] = _DEFAULT_RETRY,
        timeout: float = 60.0,
        connect_timeout: float = 10.0,
    ) -> None:
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout, connect=connect_timeout), follow_redirects=True
        )
        self._fetch_with_retry = retry(self._do_fetch)

    def _do_fetch(self, url: str) -> httpx.Response:
        response = self._client.get(url)
        response.raise_for_status()
        return response

    def fetch(self, archive: EventArchive) -> bytes:
        logger.debug("GET %s", archive.url)
        try:
            response = self._fetch_with_retry(archive.url)
        except httpx.HTTPError as e:
            raise RetrievalError(
                f"Failed to download {archive.filename}: {e}",
                year=archive.year,
                event_type=archive.event_type,
                url=archive.url,
            ) from e
        logger.info("Downloaded %s (%d bytes)", archive.filename, len(response.content))
        return response.content
