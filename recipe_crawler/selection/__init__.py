"""Recipe selection helpers."""

from recipe_crawler.selection.selector import IngredientScorer, ingredient_select, random_select

__all__ = ["random_select", "ingredient_select", "IngredientScorer"]
