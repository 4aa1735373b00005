"""Pick a recipe out of a collected list."""

from __future__ import annotations

import math
import random
from typing import Callable, Optional, Sequence

from recipe_crawler.scraper.models import Recipe

# Scores how well *recipe* matches the wanted ingredient lines; higher wins.
IngredientScorer = Callable[[Recipe, Sequence[str]], float]


def random_select(recipes: Sequence[Recipe], rng: random.Random | None = None) -> Recipe:
    """Return a uniformly random recipe.

    Pass a seeded ``random.Random`` for reproducible picks.

    Raises:
        ValueError: If *recipes* is empty.
    """
    if not recipes:
        raise ValueError("cannot select from an empty recipe list")
    rng = rng or random.Random()
    return recipes[rng.randrange(len(recipes))]


def ingredient_select(
    recipes: Sequence[Recipe],
    ingredients: Sequence[str],
    scorer: IngredientScorer,
) -> Optional[Recipe]:
    """Return the recipe *scorer* rates highest for *ingredients*.

    No ranking formula is built in; callers supply *scorer*.  The first
    recipe wins ties and a NaN score ranks below every number.  Returns
    ``None`` when *recipes* is empty.
    """
    if not recipes:
        return None
    # max() keeps the earliest of equal keys.
    return max(recipes, key=lambda recipe: _rank(scorer(recipe, ingredients)))


def _rank(score: float) -> float:
    return float("-inf") if math.isnan(score) else score
