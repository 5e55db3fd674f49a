"""Supabase implementation for recipes."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from recipe_generator.domain.recipes import Ingredient, Macros, Nutrition, Recipe
from recipe_generator.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for saved recipes."""

    client: Client

    def create_recipe(self, owner: str, recipe: Recipe) -> Recipe:
        """Insert a recipe row for the owner and return it."""
        response = (
            self.client.table("recipes")
            .insert({**_serialize_recipe(recipe), "created_by": owner})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return _parse_recipe(response.data[0])

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def list_recipes(self, owner: str) -> list[Recipe]:
        """Return recipes created by owner, newest first."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("created_by", owner)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]

    def set_favorite(
        self, recipe_id: UUID, owner: str, expected: bool, value: bool
    ) -> Recipe | None:
        """Compare-and-set the favorite flag in a single filtered update."""
        response = (
            self.client.table("recipes")
            .update({"is_favorite": value})
            .eq("id", str(recipe_id))
            .eq("created_by", owner)
            .eq("is_favorite", expected)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: UUID, owner: str) -> bool:
        """Delete the recipe only when owner matches."""
        response = (
            self.client.table("recipes")
            .delete()
            .eq("id", str(recipe_id))
            .eq("created_by", owner)
            .execute()
        )
        return bool(response.data)


def _serialize_recipe(recipe: Recipe) -> dict[str, object]:
    """Build the insert payload; ingredients and nutrition keep camelCase keys."""
    return {
        "title": recipe.title,
        "description": recipe.description,
        "servings": recipe.servings,
        "difficulty": recipe.difficulty,
        "prep_time": recipe.prep_time,
        "cook_time": recipe.cook_time,
        "ingredients": [
            {
                "item": ingredient.item,
                "amount": ingredient.amount,
                "unit": ingredient.unit,
                "imperialAmount": ingredient.imperial_amount,
                "imperialUnit": ingredient.imperial_unit,
            }
            for ingredient in recipe.ingredients or []
        ],
        "instructions": list(recipe.instructions),
        "tips": recipe.tips,
        "nutrition": {
            "caloriesPerServing": recipe.nutrition.calories_per_serving,
            "macros": {
                "protein": recipe.nutrition.macros.protein,
                "carbs": recipe.nutrition.macros.carbs,
                "fat": recipe.nutrition.macros.fat,
                "fiber": recipe.nutrition.macros.fiber,
            },
        },
        "is_favorite": recipe.is_favorite,
    }


def _parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    raw_ingredients = row.get("ingredients")
    ingredients = (
        [_parse_ingredient(item) for item in raw_ingredients]
        if isinstance(raw_ingredients, list)
        else None
    )
    return Recipe(
        id=UUID(str(row["id"])),
        title=str(row.get("title", "")),
        description=str(row.get("description") or ""),
        servings=int(row.get("servings", 0)),
        difficulty=str(row.get("difficulty", "")),
        prep_time=int(row.get("prep_time", 0)),
        cook_time=int(row.get("cook_time", 0)),
        ingredients=ingredients,
        instructions=[str(step) for step in row.get("instructions") or []],
        tips=row.get("tips"),
        nutrition=_parse_nutrition(row.get("nutrition")),
        created_by=row.get("created_by"),
        is_favorite=bool(row.get("is_favorite", False)),
        created_at=created_at,
    )


def _parse_ingredient(raw: dict[str, object]) -> Ingredient:
    return Ingredient(
        item=str(raw.get("item", "")),
        amount=float(raw.get("amount") or 0.0),
        unit=str(raw.get("unit", "")),
        imperial_amount=float(raw.get("imperialAmount") or 0.0),
        imperial_unit=str(raw.get("imperialUnit", "")),
    )


def _parse_nutrition(raw: object) -> Nutrition:
    if not isinstance(raw, dict):
        return Nutrition()
    macros = raw.get("macros") or {}
    return Nutrition(
        calories_per_serving=float(raw.get("caloriesPerServing") or 0.0),
        macros=Macros(
            protein=float(macros.get("protein") or 0.0),
            carbs=float(macros.get("carbs") or 0.0),
            fat=float(macros.get("fat") or 0.0),
            fiber=float(macros.get("fiber") or 0.0),
        ),
    )
