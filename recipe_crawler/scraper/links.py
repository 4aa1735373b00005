"""Recipe-link discovery within a parsed page."""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import Callable, Set
from urllib.parse import urljoin, urlparse

from recipe_crawler.concurrency import CancelScope, gather_results
from recipe_crawler.errors import FetchError
from recipe_crawler.scraper.classifier import is_recipe_page
from recipe_crawler.scraper.fetcher import Fetcher
from recipe_crawler.scraper.models import Document

logger = logging.getLogger(__name__)

# Case-sensitive marker a link's URL must contain to be worth classifying.
RECIPE_URL_MARKER = "recipe"

_FETCHABLE_SCHEMES = frozenset({"http", "https"})


def _base_url(doc: Document) -> str:
    """Return the URL relative links resolve against, honouring ``<base href>``."""
    base = doc.soup.find("base", href=True)
    if base is not None and base["href"].strip():
        return urljoin(doc.url, base["href"].strip())
    return doc.url


class LinkExtractor:
    """Finds links on a page that lead to other recipe pages.

    A link qualifies when its absolute URL contains ``"recipe"`` *and* the
    page it points to passes the classifier.  Checking the second condition
    costs one fetch per candidate link.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        classifier: Callable[[Document], bool] = is_recipe_page,
    ) -> None:
        self._fetcher = fetcher
        self._classifier = classifier

    def candidate_urls(self, doc: Document) -> Set[str]:
        """Absolute URLs of every ``a[href]`` on *doc* that contain the marker.

        No network access; the target pages are not checked.
        """
        base = _base_url(doc)
        candidates: Set[str] = set()
        for anchor in doc.soup.find_all("a", href=True):
            # An empty href resolves to the page itself, like href="#".
            absolute = urljoin(base, anchor["href"].strip())
            if urlparse(absolute).scheme not in _FETCHABLE_SCHEMES:
                continue
            if RECIPE_URL_MARKER in absolute:
                candidates.add(absolute)
        return candidates

    def is_recipe_link(self, url: str) -> bool:
        """Fetch *url* and classify it; unreachable pages are not recipes."""
        try:
            doc = self._fetcher.fetch(url)
        except FetchError as exc:
            logger.debug("Skipping link %s: %s", url, exc.reason)
            return False
        return self._classifier(doc)

    def extract_links(
        self,
        doc: Document,
        executor: Executor | None = None,
        scope: CancelScope | None = None,
    ) -> Set[str]:
        """Return the recipe-link candidates found on *doc*.

        When *executor* is given the candidate pages are fetched on it in
        parallel; otherwise they are fetched one after another.
        """
        candidates = self.candidate_urls(doc)
        if executor is None:
            links: Set[str] = set()
            for url in candidates:
                if scope is not None and scope.cancelled:
                    break
                if self.is_recipe_link(url):
                    links.add(url)
            return links
        verdicts = gather_results(executor, self.is_recipe_link, candidates, scope)
        return {url for url, is_recipe in verdicts if is_recipe}
