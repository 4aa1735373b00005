"""Seed-file loading and recipe-file writing.

Seed file: one URL per line; surrounding whitespace is stripped and blank
lines are ignored.

Recipe file: each record is the URL, name, time and yield lines followed by
one line per ingredient, and records are separated by a blank line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from recipe_crawler.errors import InputError
from recipe_crawler.scraper.models import Recipe


def read_seed_urls(path: str | Path) -> List[str]:
    """Return the seed URLs listed in *path*, in file order.

    Raises:
        InputError: If the file is missing or unreadable.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(str(path), str(exc)) from exc
    return [line.strip() for line in content.splitlines() if line.strip()]


def format_recipes(recipes: Iterable[Recipe]) -> str:
    """Render *recipes* in the recipe-file layout."""
    return "".join(f"{recipe}\n\n" for recipe in recipes)


def write_recipes(path: str | Path, recipes: Iterable[Recipe]) -> None:
    """Write *recipes* to *path*, replacing any existing file.

    Raises:
        InputError: If the file cannot be written.
    """
    text = format_recipes(recipes)
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise InputError(str(path), str(exc)) from exc
