"""Crawler package: bounded recipe discovery and record collection.

Public API::

    from recipe_crawler.crawler import RecursiveCrawler, RecipeCollector
    urls = RecursiveCrawler(fetcher).crawl("https://example.com/", max_depth=2)
    recipes = RecipeCollector(fetcher).collect(urls)
"""

from recipe_crawler.crawler.collector import RecipeCollector
from recipe_crawler.crawler.crawler import RecursiveCrawler

__all__ = ["RecursiveCrawler", "RecipeCollector"]
