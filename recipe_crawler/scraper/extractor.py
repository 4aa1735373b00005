"""Recipe extraction: turns a recipe :class:`Document` into a :class:`Recipe`.

Extraction never fails.  A field whose marker is missing from the page comes
back as an empty string (or an empty ingredient list) instead.
"""

from __future__ import annotations

from typing import List

from recipe_crawler.scraper.models import Document, Recipe, element_text

# Paragraph text emitted by a common recipe-site template next to the
# ingredient checkboxes; never a real ingredient.
_TEMPLATE_ARTIFACTS = frozenset({"Deselect All"})


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _first_list_item_containing(doc: Document, marker: str) -> str:
    """Return the text of the first ``<li>`` mentioning *marker*, or empty string.

    The match is case-insensitive, like a ``li:contains(marker)`` selector.
    """
    needle = marker.lower()
    for item in doc.soup.find_all("li"):
        text = element_text(item)
        if needle in text.lower():
            return text
    return ""


def _class_attribute(tag) -> str:
    """Return the raw ``class`` attribute of *tag* as a single string."""
    value = tag.get("class")
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return " ".join(value)


def _extract_ingredients(doc: Document) -> List[str]:
    ingredients: List[str] = []
    for paragraph in doc.soup.find_all("p"):
        if "ingredient" not in _class_attribute(paragraph).lower():
            continue
        text = element_text(paragraph)
        if text in _TEMPLATE_ARTIFACTS:
            continue
        ingredients.append(text)
    return ingredients


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_recipe(doc: Document, url: str | None = None) -> Recipe:
    """Build a :class:`Recipe` from *doc*.

    Args:
        doc: A page already classified as a recipe.
        url: The URL to record; defaults to ``doc.url``.
    """
    return Recipe(
        url=url or doc.url,
        name=doc.title,
        time=_first_list_item_containing(doc, "Total"),
        yield_=_first_list_item_containing(doc, "Yield"),
        ingredients=tuple(_extract_ingredients(doc)),
    )
