"""Heuristic recipe-page classifier.

Best-effort only: false positives and false negatives are expected.
"""

from __future__ import annotations

from recipe_crawler.scraper.models import Document


def is_recipe_page(doc: Document) -> bool:
    """Return ``True`` if the page text looks like a recipe.

    A page qualifies when its lower-cased text mentions "ingredients" and
    "recipe", plus either "instructions" or "directions".
    """
    text = doc.text.lower()
    return (
        "ingredients" in text
        and "recipe" in text
        and ("instructions" in text or "directions" in text)
    )
