"""
Web source: fetch fixture feeds over HTTP, all URLs concurrently.
A feed is accepted only with status 200, a JSON content type and a JSON array body.
Failed fetches are logged one by one and never abort the others.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple
from urllib.parse import urlparse

import httpx

from league_tables.core.concurrency import settle_all
from league_tables.ops.ops_events import log_source_failure

from .base import FixtureSource, SourceError, SourceFailure, SourceResult, merge_league_data

logger = logging.getLogger(__name__)

HTTP_OK = 200
CONTENT_TYPE_JSON = "application/json"
DEFAULT_TIMEOUT_SECONDS = 5.0


class FetchError(SourceError):
    """Raised when one feed cannot be fetched or decoded."""


def league_from_url(url: str) -> str:
    """League id from the last path segment of a feed URL, e.g. .../epl-2024 -> 'epl-2024'."""
    path = urlparse(url).path.rstrip("/")
    segment = path.rsplit("/", 1)[-1]
    if segment.endswith(".json"):
        segment = segment[: -len(".json")]
    if not segment:
        raise ValueError(f"Cannot derive league id from URL: {url!r}")
    return segment


def parse_url_spec(spec: str) -> Tuple[str, str]:
    """Parse 'league=url' or a bare url into (league, url)."""
    spec = spec.strip()
    head, sep, tail = spec.partition("=")
    if sep and head and "/" not in head and ":" not in head:
        return head.strip(), tail.strip()
    return league_from_url(spec), spec


class WebFixtureSource(FixtureSource):
    """Live fixture feeds. Pass `transport` to route requests somewhere other than the network."""

    def __init__(
        self,
        urls: Sequence[str],
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not urls:
            raise ValueError("WebFixtureSource requires at least one URL")
        self._feeds = [parse_url_spec(u) for u in urls]
        self._timeout = timeout
        self._transport = transport

    @property
    def name(self) -> str:
        return "web"

    @property
    def feeds(self) -> List[Tuple[str, str]]:
        return list(self._feeds)

    async def fetch_feed(self, client: httpx.AsyncClient, url: str) -> List[Any]:
        """GET one feed and return its records. Raises FetchError."""
        try:
            r = await client.get(url)
        except httpx.TimeoutException as e:
            raise FetchError(f"Request timed out: {url}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch: {url} - {e}") from e

        content_type = r.headers.get("content-type", "")
        if r.status_code != HTTP_OK or CONTENT_TYPE_JSON not in content_type:
            raise FetchError(f"ERROR status({r.status_code}) unable to access: {url}")
        try:
            data = r.json()
        except ValueError as e:
            raise FetchError(f"Unable to read content body from: {url} - {e}") from e
        if not isinstance(data, list):
            raise FetchError(f"Expected a JSON array of fixtures from: {url}, got {type(data).__name__}")
        return data

    async def load(self) -> SourceResult:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            urls = dict.fromkeys(url for _, url in self._feeds)
            tasks = {url: self.fetch_feed(client, url) for url in urls}
            fetched, failed = await settle_all(tasks)

        result = SourceResult()
        for url, exc in failed.items():
            logger.error("%s", exc)
            log_source_failure(self.name, url, str(exc))
            result.failures.append(SourceFailure(target=url, error=str(exc)))
        for league, url in self._feeds:
            if url in fetched:
                merge_league_data(result.leagues, {league: fetched[url]})
        return result
