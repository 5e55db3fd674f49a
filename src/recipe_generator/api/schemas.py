"""Request and response models for the HTTP API (camelCase on the wire)."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from recipe_generator.domain.generation import RecipeDraft
from recipe_generator.domain.models import UserPreferences


class ApiModel(BaseModel):
    """Base model accepting camelCase or snake_case, reading dataclasses."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class GenerateMealRequest(ApiModel):
    """Ingredients dropped on the canvas."""

    ingredients: Any = None
    strict_mode: bool = False


class SaveRecipeRequest(RecipeDraft):
    """A generated recipe plus the wallet saving it."""

    wallet_address: str | None = None


class WalletRequest(ApiModel):
    """Body carrying only the caller's wallet."""

    wallet_address: str | None = None


class ScaleRequest(ApiModel):
    """Target serving count."""

    servings: int | float | None = None


class CustomFoodRequest(ApiModel):
    """New custom food for a wallet."""

    name: str | None = None
    category: str | None = None
    wallet_address: str | None = None


class PreferencesModel(ApiModel):
    """User generation preferences; unknown keys are kept as sent."""

    model_config = ConfigDict(extra="allow")

    strict_mode: bool = False
    favorite_recipes: list[str] = Field(default_factory=list)

    def to_domain(self) -> UserPreferences:
        return UserPreferences(
            strict_mode=self.strict_mode,
            favorite_recipes=list(self.favorite_recipes),
            extra=dict(self.model_extra or {}),
        )

    @classmethod
    def from_domain(cls, preferences: UserPreferences) -> "PreferencesModel":
        return cls(
            **preferences.extra,
            strict_mode=preferences.strict_mode,
            favorite_recipes=list(preferences.favorite_recipes),
        )


class PreferencesRequest(ApiModel):
    wallet_address: str | None = None
    preferences: PreferencesModel = Field(default_factory=PreferencesModel)


class PreferencesResponse(ApiModel):
    preferences: PreferencesModel


class IngredientOut(ApiModel):
    item: str
    amount: float
    unit: str
    imperial_amount: float
    imperial_unit: str


class MacrosOut(ApiModel):
    protein: float
    carbs: float
    fat: float
    fiber: float


class NutritionOut(ApiModel):
    calories_per_serving: float
    macros: MacrosOut


class RecipeOut(ApiModel):
    """Stored recipe, or a scaled projection of one."""

    id: UUID | None
    title: str
    description: str
    servings: int
    difficulty: str
    prep_time: int
    cook_time: int
    ingredients: list[IngredientOut] | None
    instructions: list[str]
    tips: str | None
    nutrition: NutritionOut
    created_by: str | None
    is_favorite: bool
    created_at: datetime | None


class FavoriteResponse(ApiModel):
    is_favorite: bool


class CustomFoodOut(ApiModel):
    id: UUID
    name: str
    category: str
    created_by: str
    created_at: datetime | None


class MessageResponse(ApiModel):
    message: str
