"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from bs4 import BeautifulSoup, CData, NavigableString, Tag

# Elements whose edges separate words when a page is rendered as text.
_BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2", "h3",
    "h4", "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "p", "pre",
    "section", "table", "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
})


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace to single spaces and trim the ends."""
    return " ".join(text.split())


def _is_separator(node: object) -> bool:
    return isinstance(node, Tag) and (node.name == "br" or node.name in _BLOCK_TAGS)


def element_text(tag: Tag) -> str:
    """Return the visible text of *tag* with whitespace collapsed.

    Inline children are concatenated without a separator so that
    ``<li><b>Total</b>Time</li>`` reads as ``"TotalTime"``, while ``<br>``
    and block children (``div``, ``p``, ...) separate words:
    ``<li>Yield:<br>4</li>`` reads as ``"Yield: 4"``.
    """
    parts = []
    for node in tag.descendants:
        if _is_separator(node):
            parts.append(" ")
        elif type(node) in (NavigableString, CData):
            # Text that follows a closed block element starts a new word.
            if _is_separator(node.previous_sibling):
                parts.append(" ")
            parts.append(str(node))
    return collapse_whitespace("".join(parts))


@dataclass
class Document:
    """A fetched page, parsed into a navigable BeautifulSoup tree."""

    url: str
    title: str
    text: str
    soup: BeautifulSoup = field(repr=False, compare=False)

    @classmethod
    def from_html(cls, url: str, html: str) -> Document:
        soup = BeautifulSoup(html, "html.parser")
        title_tag = soup.find("title")
        title = element_text(title_tag) if title_tag is not None else ""
        # Block elements are separated by a space so words never run together.
        text = collapse_whitespace(soup.get_text(" "))
        return cls(url=url, title=title, text=text, soup=soup)


@dataclass(frozen=True)
class Recipe:
    """A recipe record extracted from a single page.

    Every field except ``url`` may be an empty string when the matching
    marker was absent from the page.
    """

    url: str
    name: str = ""
    time: str = ""
    yield_: str = ""
    ingredients: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("Recipe.url must not be empty")
        # Accept any iterable of lines but always store an immutable tuple.
        object.__setattr__(self, "ingredients", tuple(self.ingredients))

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------
    def contains_ingredient(self, target: str) -> bool:
        """Return ``True`` if any ingredient line mentions *target* (quantity ignored)."""
        return any(target in ingredient for ingredient in self.ingredients)

    def __str__(self) -> str:
        return "\n".join([self.url, self.name, self.time, self.yield_, *self.ingredients])
