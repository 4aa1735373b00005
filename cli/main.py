"""Recipe crawler CLI: entry-point for crawling and extraction.

Usage:
    python cli/main.py --help

Commands:
    crawl   seed file → recipe file
    links   list the recipe pages reachable from one URL
    show    classify and extract a single page
    pick    crawl a seed file and print one random recipe
"""

from __future__ import annotations

import sys
from pathlib import Path

# Running this file directly (no install) needs the checkout root importable.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
import random
from typing import Optional

import typer

from recipe_crawler.concurrency import CancelScope
from recipe_crawler.config import settings
from recipe_crawler.crawler import RecursiveCrawler
from recipe_crawler.errors import FetchError, InputError
from recipe_crawler.pipeline import recipes_from_seed_file
from recipe_crawler.scraper import PageFetcher, extract_recipe, is_recipe_page
from recipe_crawler.selection import random_select
from recipe_crawler.storage import write_recipes

app = typer.Typer(
    name="recipe-crawler",
    help="Discover recipe pages and extract their ingredients.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every fetch at DEBUG level."),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _scope(timeout: Optional[float]) -> CancelScope:
    return CancelScope(timeout=timeout if timeout is not None else settings.crawl_timeout)


# ---------------------------------------------------------------------------
# crawl
# ---------------------------------------------------------------------------
@app.command("crawl")
def crawl(
    seed_file: Path = typer.Argument(..., help="Text file with one seed URL per line."),
    output: Path = typer.Option(..., "--output", "-o", help="Where to write the recipes."),
    depth: Optional[int] = typer.Option(None, "--depth", help="Hop budget per seed."),
    workers: Optional[int] = typer.Option(None, "--workers", help="Concurrent fetches."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Stop after this many seconds."),
) -> None:
    """Crawl every seed in SEED_FILE and write the recipes found."""
    typer.echo(f"[crawl] Reading seeds from {str(seed_file)!r} …")
    try:
        recipes = recipes_from_seed_file(
            seed_file, depth, max_workers=workers, scope=_scope(timeout)
        )
        write_recipes(output, recipes)
    except InputError as exc:
        typer.echo(f"[crawl] ✗ {exc}")
        raise typer.Exit(code=1)

    typer.echo(f"[crawl] ✓ Wrote {len(recipes)} recipe(s) to {str(output)!r}")


# ---------------------------------------------------------------------------
# links
# ---------------------------------------------------------------------------
@app.command("links")
def links(
    url: str = typer.Argument(..., help="Seed URL."),
    depth: Optional[int] = typer.Option(None, "--depth", help="Hop budget."),
    workers: Optional[int] = typer.Option(None, "--workers", help="Concurrent fetches."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Stop after this many seconds."),
) -> None:
    """Print the recipe pages reachable from URL."""
    max_depth = settings.max_depth if depth is None else depth
    with PageFetcher(max_connections=workers) as fetcher:
        found = RecursiveCrawler(fetcher, max_workers=workers).crawl(
            url, max_depth, _scope(timeout)
        )

    if not found:
        typer.echo(f"[links] No recipe pages found from {url!r}.")
        return
    for link in sorted(found):
        typer.echo(link)


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------
@app.command("show")
def show(
    url: str = typer.Argument(..., help="Page to inspect."),
) -> None:
    """Fetch one page, classify it and print the extracted recipe."""
    with PageFetcher() as fetcher:
        try:
            doc = fetcher.fetch(url)
        except FetchError as exc:
            typer.echo(f"[show] ✗ {exc}")
            raise typer.Exit(code=1)

    verdict = "recipe" if is_recipe_page(doc) else "not a recipe"
    typer.echo(f"[show] Classified as: {verdict}")
    typer.echo("")
    typer.echo(str(extract_recipe(doc, url)))


# ---------------------------------------------------------------------------
# pick
# ---------------------------------------------------------------------------
@app.command("pick")
def pick(
    seed_file: Path = typer.Argument(..., help="Text file with one seed URL per line."),
    depth: Optional[int] = typer.Option(None, "--depth", help="Hop budget per seed."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for a reproducible pick."),
) -> None:
    """Crawl SEED_FILE and print one randomly chosen recipe."""
    try:
        recipes = recipes_from_seed_file(seed_file, depth)
    except InputError as exc:
        typer.echo(f"[pick] ✗ {exc}")
        raise typer.Exit(code=1)

    if not recipes:
        typer.echo("[pick] No recipes found.")
        raise typer.Exit(code=1)

    typer.echo(str(random_select(recipes, random.Random(seed))))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
