"""Scraper package: page fetch, classification and recipe extraction."""

from recipe_crawler.scraper.classifier import is_recipe_page
from recipe_crawler.scraper.extractor import extract_recipe
from recipe_crawler.scraper.fetcher import Fetcher, PageFetcher, fetch_document
from recipe_crawler.scraper.links import LinkExtractor
from recipe_crawler.scraper.models import Document, Recipe

__all__ = [
    "fetch_document",
    "PageFetcher",
    "Fetcher",
    "LinkExtractor",
    "is_recipe_page",
    "extract_recipe",
    "Document",
    "Recipe",
]
