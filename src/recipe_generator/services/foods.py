"""Services for the ingredient palette: default catalog and custom foods."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_generator.domain.catalog import CUSTOM_CATEGORY, default_food_items
from recipe_generator.domain.foods import CustomFood, DefaultFood
from recipe_generator.errors import (
    CustomFoodNotFoundError,
    DuplicateFoodError,
    EmptyFoodNameError,
    MissingWalletAddressError,
    NotOwnerError,
)
from recipe_generator.services.users import UserService

_logger = logging.getLogger(__name__)


class CustomFoodRepository(Protocol):
    """Persistence interface for user-defined foods."""

    def list_foods(self, owner: str) -> list[CustomFood]:
        """Return the owner's foods, newest first."""

    def find_food(self, owner: str, name: str) -> CustomFood | None:
        """Return the owner's food with exactly this name, if present."""

    def create_food(self, owner: str, name: str, category: str) -> CustomFood:
        """Create a food entry and return it."""

    def get_food(self, food_id: UUID) -> CustomFood | None:
        """Return a food by id, if present."""

    def delete_food(self, food_id: UUID, owner: str) -> bool:
        """Delete the food if owned by owner; return whether it did."""


class DefaultFoodRepository(Protocol):
    """Persistence interface for the seeded ingredient catalog."""

    def replace_all(self, foods: list[DefaultFood]) -> None:
        """Remove every catalog row and insert the given foods."""

    def list_foods(self) -> list[DefaultFood]:
        """Return catalog foods ordered by category, then name."""


@dataclass
class FoodService:
    """Application service for ingredient palettes."""

    custom_repository: CustomFoodRepository
    default_repository: DefaultFoodRepository
    user_service: UserService

    def seed_default_foods(self) -> int:
        """Replace the stored catalog with the built-in one."""
        foods = default_food_items()
        self.default_repository.replace_all(foods)
        _logger.info("Seeded default foods: count=%s", len(foods))
        return len(foods)

    def list_default_foods(self) -> dict[str, list[str]]:
        """Return catalog food names grouped by category."""
        grouped: dict[str, list[str]] = {}
        for food in self.default_repository.list_foods():
            grouped.setdefault(food.category, []).append(food.name)
        return grouped

    def list_custom_foods(self, owner: str) -> list[CustomFood]:
        """Return a wallet's custom foods."""
        return self.custom_repository.list_foods(owner)

    def add_custom_food(
        self, owner: str | None, name: str | None, category: str | None = None
    ) -> CustomFood:
        """Add a custom food for a wallet, creating the user on first use."""
        if not owner:
            raise MissingWalletAddressError
        cleaned = (name or "").strip()
        if not cleaned:
            raise EmptyFoodNameError
        self.user_service.ensure_user(owner)
        if self.custom_repository.find_food(owner, cleaned):
            raise DuplicateFoodError(cleaned)
        return self.custom_repository.create_food(
            owner, cleaned, category or CUSTOM_CATEGORY
        )

    def delete_custom_food(self, food_id: UUID, owner: str | None) -> None:
        """Delete an owned custom food."""
        if owner and self.custom_repository.delete_food(food_id, owner):
            return
        if self.custom_repository.get_food(food_id) is None:
            raise CustomFoodNotFoundError(food_id)
        raise NotOwnerError("delete this food item")
