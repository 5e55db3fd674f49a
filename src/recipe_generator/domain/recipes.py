"""Domain models for recipes."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Ingredient:
    """Ingredient quantity in both metric and imperial units."""

    item: str
    amount: float
    unit: str
    imperial_amount: float
    imperial_unit: str


@dataclass(frozen=True)
class Macros:
    """Macronutrients in grams per serving."""

    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0


@dataclass(frozen=True)
class Nutrition:
    """Nutrition estimate for one serving."""

    calories_per_serving: float = 0.0
    macros: Macros = field(default_factory=Macros)


@dataclass(frozen=True)
class Recipe:
    """A generated recipe, either a local draft or a persisted row.

    Drafts have no ``id``; persisted recipes carry the owner's wallet address
    in ``created_by``.
    """

    title: str
    description: str
    servings: int
    difficulty: str
    prep_time: int
    cook_time: int
    ingredients: list[Ingredient] | None
    instructions: list[str]
    tips: str | None = None
    nutrition: Nutrition = field(default_factory=Nutrition)
    id: UUID | None = None
    created_by: str | None = None
    is_favorite: bool = False
    created_at: datetime | None = None
