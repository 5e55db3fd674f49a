"""Schema for recipe drafts returned by the generation model."""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from recipe_generator.domain.recipes import Ingredient, Macros, Nutrition, Recipe


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DraftIngredient(_CamelModel):
    """Single ingredient line of a draft."""

    item: str
    amount: float = Field(ge=0.0)
    unit: str
    imperial_amount: float = Field(ge=0.0)
    imperial_unit: str


class DraftMacros(_CamelModel):
    """Macros per serving in grams."""

    protein: float = Field(default=0.0, ge=0.0)
    carbs: float = Field(default=0.0, ge=0.0)
    fat: float = Field(default=0.0, ge=0.0)
    fiber: float = Field(default=0.0, ge=0.0)


class DraftNutrition(_CamelModel):
    """Nutrition estimate per serving."""

    calories_per_serving: float = Field(default=0.0, ge=0.0)
    macros: DraftMacros = Field(default_factory=DraftMacros)


class RecipeDraft(_CamelModel):
    """Structured recipe as produced by the model, before it is saved."""

    title: str = Field(min_length=1)
    description: str
    servings: int = Field(gt=0)
    difficulty: Literal["easy", "medium", "hard"]
    prep_time: int = Field(ge=0)
    cook_time: int = Field(ge=0)
    ingredients: list[DraftIngredient] = Field(min_length=1)
    instructions: list[str] = Field(min_length=1)
    tips: str | None = None
    nutrition: DraftNutrition = Field(default_factory=DraftNutrition)

    @field_validator("difficulty", mode="before")
    @classmethod
    def _normalize_difficulty(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("prep_time", "cook_time", mode="before")
    @classmethod
    def _coerce_minutes(cls, value: object) -> object:
        if isinstance(value, str):
            digits = re.sub(r"[^0-9]", "", value)
            if not digits:
                raise ValueError(f"expected minutes, got {value!r}")
            return int(digits)
        return value

    def to_recipe(self) -> Recipe:
        """Convert the draft into an unpersisted domain recipe."""
        return Recipe(
            title=self.title,
            description=self.description,
            servings=self.servings,
            difficulty=self.difficulty,
            prep_time=self.prep_time,
            cook_time=self.cook_time,
            ingredients=[
                Ingredient(
                    item=ingredient.item,
                    amount=ingredient.amount,
                    unit=ingredient.unit,
                    imperial_amount=ingredient.imperial_amount,
                    imperial_unit=ingredient.imperial_unit,
                )
                for ingredient in self.ingredients
            ],
            instructions=list(self.instructions),
            tips=self.tips,
            nutrition=Nutrition(
                calories_per_serving=self.nutrition.calories_per_serving,
                macros=Macros(
                    protein=self.nutrition.macros.protein,
                    carbs=self.nutrition.macros.carbs,
                    fat=self.nutrition.macros.fat,
                    fiber=self.nutrition.macros.fiber,
                ),
            ),
        )
