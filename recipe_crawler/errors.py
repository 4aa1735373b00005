"""Exception types shared across the crawler packages."""

from __future__ import annotations


class RecipeCrawlerError(Exception):
    """Base class for every error raised by this project."""


class FetchError(RecipeCrawlerError):
    """A page could not be retrieved or parsed.

    Recoverable: callers skip the page and carry on with the rest of the
    crawl.  Network failures, timeouts, HTTP error statuses and non-HTML
    responses all surface as this single type.
    """

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class InputError(RecipeCrawlerError):
    """A seed file could not be read, or an output file could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
