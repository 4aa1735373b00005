"""Depth-bounded discovery of recipe pages.

``RecursiveCrawler.crawl`` walks the link graph outward from a seed page one
hop at a time.  Every page visited at a depth below ``max_depth`` contributes
the recipe links it carries; those links are visited in turn only while
``depth + 1 < max_depth``.  Consequently:

* ``crawl(seed, 0)`` is always empty;
* ``crawl(seed, 1)`` is exactly the recipe links on the seed page, and the
  seed itself is never reported unless a visited page links back to it.

The traversal is an iterative worklist processed level by level, so every
page of one level is fetched in parallel on a bounded thread pool and the
stack depth stays constant no matter how deep the crawl goes.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import Callable, Dict, Iterable, Set

from recipe_crawler.concurrency import CancelScope, gather_results, new_executor, shutdown_executor
from recipe_crawler.config import settings
from recipe_crawler.errors import FetchError
from recipe_crawler.scraper.classifier import is_recipe_page
from recipe_crawler.scraper.fetcher import Fetcher
from recipe_crawler.scraper.links import LinkExtractor
from recipe_crawler.scraper.models import Document

logger = logging.getLogger(__name__)


class RecursiveCrawler:
    """Collects recipe-page URLs reachable from seed pages within a hop budget.

    Args:
        fetcher: Page source; must raise :class:`FetchError` on failure.
        classifier: Decides whether a fetched page is a recipe.
        max_workers: Cap on concurrent fetches (defaults to
            ``settings.max_workers``).
    """

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        classifier: Callable[[Document], bool] = is_recipe_page,
        max_workers: int | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._links = LinkExtractor(fetcher, classifier)
        self._max_workers = max_workers or settings.max_workers

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def crawl(
        self,
        seed_url: str,
        max_depth: int,
        scope: CancelScope | None = None,
    ) -> Set[str]:
        """Return the recipe URLs reachable from *seed_url* within *max_depth* hops.

        Pages that fail to fetch contribute nothing.  If *scope* is cancelled
        mid-crawl the URLs confirmed so far are returned.
        """
        scope = scope or CancelScope(timeout=settings.crawl_timeout)
        found: Set[str] = set()
        if max_depth <= 0 or scope.cancelled:
            return found

        executor = new_executor(self._max_workers)
        try:
            self._traverse(seed_url, max_depth, executor, scope, found)
        finally:
            shutdown_executor(executor, scope)

        if scope.cancelled:
            logger.warning(
                "Crawl from %s cancelled; returning %d partial result(s)", seed_url, len(found)
            )
        else:
            logger.info("Crawl from %s found %d recipe page(s)", seed_url, len(found))
        return found

    def crawl_many(
        self,
        seed_urls: Iterable[str],
        max_depth: int,
        scope: CancelScope | None = None,
    ) -> Set[str]:
        """Union of independent :meth:`crawl` runs, one per seed."""
        scope = scope or CancelScope(timeout=settings.crawl_timeout)
        found: Set[str] = set()
        for seed_url in seed_urls:
            if scope.cancelled:
                break
            found |= self.crawl(seed_url, max_depth, scope)
        return found

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def _traverse(
        self,
        seed_url: str,
        max_depth: int,
        executor: Executor,
        scope: CancelScope,
        found: Set[str],
    ) -> None:
        # Per-crawl memo: a page is expanded at most once (BFS reaches it at
        # its shallowest depth first) and each link is classified at most once.
        verdicts: Dict[str, bool] = {}
        expanded: Set[str] = set()

        frontier: Set[str] = {seed_url}
        depth = 0
        while frontier and not scope.cancelled:
            expanded |= frontier
            pages = gather_results(executor, self._page_candidates, frontier, scope)

            unclassified: Set[str] = set()
            for _url, candidates in pages:
                unclassified |= candidates
            unclassified -= verdicts.keys()
            for url, is_recipe in gather_results(
                executor, self._links.is_recipe_link, unclassified, scope
            ):
                verdicts[url] = is_recipe

            next_frontier: Set[str] = set()
            for _url, candidates in pages:
                next_frontier |= {link for link in candidates if verdicts.get(link)}
            found |= next_frontier
            logger.debug(
                "Depth %d: %d page(s) visited, %d recipe link(s) so far",
                depth, len(pages), len(found),
            )

            if depth + 1 >= max_depth:
                break
            frontier = next_frontier - expanded
            depth += 1

    def _page_candidates(self, url: str) -> Set[str]:
        """Fetch *url* and return its unverified recipe-link candidates."""
        try:
            doc = self._fetcher.fetch(url)
        except FetchError as exc:
            logger.debug("Skipping page %s: %s", url, exc.reason)
            return set()
        return self._links.candidate_urls(doc)
