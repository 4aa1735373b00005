"""HTTP fetcher that turns a URL into a parsed :class:`Document`.

Every failure mode (network error, timeout, HTTP error status, non-HTML
payload, unparsable markup) is reported as :class:`FetchError` so that the
crawler can drop a single page and keep going.
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from recipe_crawler.config import settings
from recipe_crawler.errors import FetchError
from recipe_crawler.scraper.models import Document

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Anything that can turn a URL into a :class:`Document`.

    Implementations must raise :class:`FetchError` (and nothing else) when the
    page cannot be produced.
    """

    def fetch(self, url: str) -> Document:
        ...


def _is_markup(content_type: str) -> bool:
    """Return ``True`` if *content_type* is something an HTML parser can read."""
    if not content_type:
        return True
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime.startswith("text/") or mime.endswith("xml")


class PageFetcher:
    """Fetch pages over a shared ``httpx.Client``.

    The client is thread-safe, so a single instance can back a whole worker
    pool.  Use as a context manager (or call :meth:`close`) to release the
    connection pool when the fetcher created the client itself.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        timeout: float | None = None,
        max_connections: int | None = None,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                headers={"User-Agent": settings.user_agent},
                timeout=timeout if timeout is not None else settings.request_timeout,
                follow_redirects=True,
                limits=httpx.Limits(
                    max_connections=max_connections or settings.max_workers
                ),
            )
        self._client = client

    def fetch(self, url: str) -> Document:
        """GET *url* once and parse it.

        Raises:
            FetchError: On any network, HTTP, content-type or parse failure.
        """
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(url, f"HTTP {exc.response.status_code}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc

        content_type = response.headers.get("content-type", "")
        if not _is_markup(content_type):
            raise FetchError(url, f"unsupported content type {content_type!r}")

        try:
            document = Document.from_html(url, response.text)
        except Exception as exc:  # noqa: BLE001
            raise FetchError(url, f"parse failed: {exc}") from exc

        logger.debug("Fetched %s (HTTP %s)", url, response.status_code)
        return document

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> PageFetcher:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def fetch_document(url: str) -> Document:
    """Fetch and parse *url* with a throwaway client.

    Raises:
        FetchError: If the page cannot be retrieved or parsed.
    """
    with PageFetcher() as fetcher:
        return fetcher.fetch(url)
