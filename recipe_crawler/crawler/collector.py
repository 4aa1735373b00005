"""Turns a set of recipe URLs into :class:`Recipe` records."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from recipe_crawler.concurrency import CancelScope, gather_results, new_executor, shutdown_executor
from recipe_crawler.config import settings
from recipe_crawler.errors import FetchError
from recipe_crawler.scraper.extractor import extract_recipe
from recipe_crawler.scraper.fetcher import Fetcher
from recipe_crawler.scraper.models import Document, Recipe

logger = logging.getLogger(__name__)


class RecipeCollector:
    """Fetches each URL in parallel and extracts a recipe from it.

    URLs that fail to fetch are skipped.  The returned list is sorted by URL
    so repeated runs over the same pages produce the same output.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        extractor: Callable[[Document, str], Recipe] = extract_recipe,
        max_workers: int | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._extractor = extractor
        self._max_workers = max_workers or settings.max_workers

    def collect(self, urls: Iterable[str], scope: CancelScope | None = None) -> List[Recipe]:
        scope = scope or CancelScope(timeout=settings.crawl_timeout)
        executor = new_executor(self._max_workers)
        try:
            results = gather_results(executor, self._collect_one, urls, scope)
        finally:
            shutdown_executor(executor, scope)

        recipes = [recipe for _url, recipe in results if recipe is not None]
        recipes.sort(key=lambda recipe: recipe.url)
        if scope.cancelled:
            logger.warning("Collection cancelled; returning %d partial recipe(s)", len(recipes))
        else:
            logger.info("Collected %d recipe(s) from %d URL(s)", len(recipes), len(results))
        return recipes

    def _collect_one(self, url: str) -> Optional[Recipe]:
        try:
            doc = self._fetcher.fetch(url)
        except FetchError as exc:
            logger.debug("Skipping recipe %s: %s", url, exc.reason)
            return None
        return self._extractor(doc, url)
