"""Serving-count scaling of recipes."""

import math
from collections.abc import Sequence
from dataclasses import replace

from recipe_generator.domain.recipes import Ingredient, Recipe
from recipe_generator.errors import InvalidServingsError, MissingIngredientsError


def scale_recipe(recipe: Recipe, target_servings: int) -> Recipe:
    """Return a copy of the recipe with quantities rescaled to target servings.

    Ingredient amounts are multiplied by ``target / recipe.servings`` and
    rounded half-up to two decimals. Nutrition is per serving and is carried
    over unchanged, as is every other field.
    """
    if not _is_positive_int(target_servings):
        raise InvalidServingsError(target_servings, label="target servings")
    if not _is_positive_int(recipe.servings):
        raise InvalidServingsError(recipe.servings, label="recipe servings")
    ingredients = recipe.ingredients
    if ingredients is None or isinstance(ingredients, str | bytes | dict):
        raise MissingIngredientsError
    if not isinstance(ingredients, Sequence):
        raise MissingIngredientsError

    factor = target_servings / recipe.servings
    return replace(
        recipe,
        servings=target_servings,
        ingredients=[_scale_ingredient(item, factor) for item in ingredients],
    )


def _scale_ingredient(ingredient: Ingredient, factor: float) -> Ingredient:
    return replace(
        ingredient,
        amount=round_half_up(ingredient.amount * factor),
        imperial_amount=round_half_up(ingredient.imperial_amount * factor),
    )


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to ``digits`` decimals with halves going toward positive infinity."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
