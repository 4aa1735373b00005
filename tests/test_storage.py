"""Tests for seed-file loading, recipe-file writing and recipe selection."""

from __future__ import annotations

import random

import pytest

from recipe_crawler.errors import InputError
from recipe_crawler.scraper.models import Recipe
from recipe_crawler.selection import ingredient_select, random_select
from recipe_crawler.storage import format_recipes, read_seed_urls, write_recipes


_PANCAKES = Recipe(
    url="https://example.com/recipes/pancakes",
    name="Pancakes",
    time="Total Time: 20 min",
    yield_="Yield: 4 servings",
    ingredients=("1 cup flour", "2 eggs", "1 cup milk"),
)
_SALAD = Recipe(
    url="https://example.com/recipes/salad",
    name="Salad",
    ingredients=("lettuce",),
)


# ---------------------------------------------------------------------------
# Seed file
# ---------------------------------------------------------------------------

class TestReadSeedUrls:
    def test_strips_and_skips_blank_lines(self, tmp_path) -> None:
        path = tmp_path / "seeds.txt"
        path.write_text(
            "https://a.test/\n\n   \n\thttps://b.test/recipes  \nhttps://a.test/\n",
            encoding="utf-8",
        )
        assert read_seed_urls(path) == [
            "https://a.test/",
            "https://b.test/recipes",
            "https://a.test/",
        ]

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "seeds.txt"
        path.write_text("", encoding="utf-8")
        assert read_seed_urls(path) == []

    def test_missing_file_raises_input_error(self, tmp_path) -> None:
        missing = tmp_path / "missing.txt"
        with pytest.raises(InputError) as excinfo:
            read_seed_urls(missing)
        assert excinfo.value.path == str(missing)

    def test_directory_raises_input_error(self, tmp_path) -> None:
        with pytest.raises(InputError):
            read_seed_urls(tmp_path)


# ---------------------------------------------------------------------------
# Recipe file
# ---------------------------------------------------------------------------

class TestWriteRecipes:
    def test_layout(self, tmp_path) -> None:
        path = tmp_path / "recipes.txt"
        write_recipes(path, [_PANCAKES, _SALAD])

        assert path.read_text(encoding="utf-8") == (
            "https://example.com/recipes/pancakes\n"
            "Pancakes\n"
            "Total Time: 20 min\n"
            "Yield: 4 servings\n"
            "1 cup flour\n"
            "2 eggs\n"
            "1 cup milk\n"
            "\n"
            "https://example.com/recipes/salad\n"
            "Salad\n"
            "\n"
            "\n"
            "lettuce\n"
            "\n"
        )

    def test_no_recipes_writes_empty_file(self, tmp_path) -> None:
        path = tmp_path / "recipes.txt"
        write_recipes(path, [])
        assert path.read_text(encoding="utf-8") == ""

    def test_format_matches_written_file(self, tmp_path) -> None:
        path = tmp_path / "recipes.txt"
        write_recipes(path, [_SALAD])
        assert path.read_text(encoding="utf-8") == format_recipes([_SALAD])

    def test_unwritable_path_raises_input_error(self, tmp_path) -> None:
        with pytest.raises(InputError):
            write_recipes(tmp_path / "no-such-dir" / "out.txt", [_SALAD])


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class TestRandomSelect:
    def test_seeded_rng_is_reproducible(self) -> None:
        recipes = [_PANCAKES, _SALAD] * 5
        first = [random_select(recipes, random.Random(42)) for _ in range(3)]
        second = [random_select(recipes, random.Random(42)) for _ in range(3)]
        assert first == second

    def test_picks_a_member(self) -> None:
        assert random_select([_SALAD]) is _SALAD

    def test_empty_list_raises(self) -> None:
        with pytest.raises(ValueError):
            random_select([])


class TestIngredientSelect:
    def test_highest_score_wins(self) -> None:
        def matches(recipe: Recipe, wanted) -> float:
            return sum(recipe.contains_ingredient(item) for item in wanted)

        best = ingredient_select([_SALAD, _PANCAKES], ["flour", "eggs"], matches)
        assert best is _PANCAKES

    def test_first_wins_ties(self) -> None:
        best = ingredient_select([_SALAD, _PANCAKES], ["x"], lambda r, w: 0.0)
        assert best is _SALAD

    def test_empty_recipes_returns_none(self) -> None:
        assert ingredient_select([], ["flour"], lambda r, w: 1.0) is None

    def test_nan_score_does_not_pin_first_recipe(self) -> None:
        scores = {_SALAD.url: float("nan"), _PANCAKES.url: 0.5}
        best = ingredient_select([_SALAD, _PANCAKES], ["flour"], lambda r, w: scores[r.url])
        assert best is _PANCAKES

    def test_negative_scores_still_pick_highest(self) -> None:
        scores = {_SALAD.url: -3.0, _PANCAKES.url: -1.0}
        best = ingredient_select([_SALAD, _PANCAKES], ["flour"], lambda r, w: scores[r.url])
        assert best is _PANCAKES
