"""High-level runner: seed URLs in, recipe records out.

``harvest`` wires a :class:`PageFetcher`, the crawler and the collector
together and owns the HTTP client for the duration of the run.
``recipes_from_seed_file`` adds seed-file loading on top.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from recipe_crawler.concurrency import CancelScope
from recipe_crawler.config import settings
from recipe_crawler.crawler import RecipeCollector, RecursiveCrawler
from recipe_crawler.scraper.fetcher import Fetcher, PageFetcher
from recipe_crawler.scraper.models import Recipe
from recipe_crawler.storage import read_seed_urls

logger = logging.getLogger(__name__)


def harvest(
    seed_urls: Iterable[str],
    max_depth: int | None = None,
    *,
    fetcher: Fetcher | None = None,
    max_workers: int | None = None,
    scope: CancelScope | None = None,
) -> List[Recipe]:
    """Crawl from every seed and return the recipes found, sorted by URL.

    Args:
        seed_urls: Pages to start from.
        max_depth: Hop budget per seed (defaults to ``settings.max_depth``).
        fetcher: Page source; a fresh :class:`PageFetcher` is used (and closed
            afterwards) when omitted.
        max_workers: Cap on concurrent fetches.
        scope: Cancellation signal shared by the crawl and the collection;
            defaults to one bounded by ``settings.crawl_timeout``.
    """
    depth = settings.max_depth if max_depth is None else max_depth
    scope = scope or CancelScope(timeout=settings.crawl_timeout)
    owned = fetcher is None
    active = PageFetcher(max_connections=max_workers) if owned else fetcher

    try:
        crawler = RecursiveCrawler(active, max_workers=max_workers)
        urls = crawler.crawl_many(seed_urls, depth, scope)
        logger.info("Discovered %d recipe URL(s) at depth %d", len(urls), depth)
        return RecipeCollector(active, max_workers=max_workers).collect(urls, scope)
    finally:
        if owned:
            active.close()


def recipes_from_seed_file(
    path: str | Path,
    max_depth: int | None = None,
    **kwargs,
) -> List[Recipe]:
    """Read seeds from *path* and :func:`harvest` them.

    Raises:
        InputError: If the seed file cannot be read.
    """
    seeds = read_seed_urls(path)
    logger.info("Loaded %d seed URL(s) from %s", len(seeds), path)
    return harvest(seeds, max_depth, **kwargs)
