"""Recipe persistence workflows."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_generator.domain.recipes import Recipe
from recipe_generator.errors import (
    ConcurrentUpdateError,
    MissingWalletAddressError,
    NotOwnerError,
    RecipeNotFoundError,
)
from recipe_generator.services.scaling import scale_recipe

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def create_recipe(self, owner: str, recipe: Recipe) -> Recipe:
        """Persist a recipe for the owner and return it with its id."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""

    def list_recipes(self, owner: str) -> list[Recipe]:
        """Return the owner's recipes, newest first."""

    def set_favorite(
        self, recipe_id: UUID, owner: str, expected: bool, value: bool
    ) -> Recipe | None:
        """Set the favorite flag if the row still matches owner and expected.

        Returns the updated recipe, or None when no row matched.
        """

    def delete_recipe(self, recipe_id: UUID, owner: str) -> bool:
        """Delete the recipe if it belongs to owner; return whether it did."""


@dataclass
class RecipeService:
    """Application service for saved recipes."""

    repository: RecipeRepository

    def save_recipe(self, owner: str | None, recipe: Recipe) -> Recipe:
        """Persist a generated recipe for a wallet."""
        if not owner:
            raise MissingWalletAddressError
        saved = self.repository.create_recipe(owner, recipe)
        _logger.info("Saved recipe: id=%s owner=%s", saved.id, owner)
        return saved

    def list_recipes(self, owner: str) -> list[Recipe]:
        """Return a wallet's saved recipes."""
        return self.repository.list_recipes(owner)

    def get_recipe(self, recipe_id: UUID) -> Recipe:
        """Return a recipe or raise when it does not exist."""
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe

    def scale(self, recipe_id: UUID, servings: int) -> Recipe:
        """Return an in-memory projection of a stored recipe at new servings."""
        return scale_recipe(self.get_recipe(recipe_id), servings)

    def toggle_favorite(self, recipe_id: UUID, owner: str | None) -> bool:
        """Flip the favorite flag of an owned recipe and return the new value."""
        recipe = self.get_recipe(recipe_id)
        if not owner or recipe.created_by != owner:
            raise NotOwnerError("modify this recipe")
        updated = self.repository.set_favorite(
            recipe_id,
            owner=owner,
            expected=recipe.is_favorite,
            value=not recipe.is_favorite,
        )
        if updated is None:
            # Row vanished or flipped between the read and the conditional write.
            self.get_recipe(recipe_id)
            raise ConcurrentUpdateError(recipe_id)
        return updated.is_favorite

    def delete_recipe(self, recipe_id: UUID, owner: str | None) -> None:
        """Delete an owned recipe."""
        if owner and self.repository.delete_recipe(recipe_id, owner):
            _logger.info("Deleted recipe: id=%s owner=%s", recipe_id, owner)
            return
        self.get_recipe(recipe_id)
        raise NotOwnerError("delete this recipe")
