"""Recipe generation and saved-recipe endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Query, Request, status
from openai import OpenAIError

from recipe_generator.api.schemas import (
    FavoriteResponse,
    GenerateMealRequest,
    MessageResponse,
    RecipeOut,
    SaveRecipeRequest,
    ScaleRequest,
    WalletRequest,
)
from recipe_generator.domain.generation import RecipeDraft

if TYPE_CHECKING:
    from recipe_generator.containers import AppContainer

router = APIRouter(tags=["recipes"])
_logger = logging.getLogger(__name__)


@router.post("/generate-meal", response_model=RecipeDraft)
async def generate_meal(body: GenerateMealRequest, request: Request) -> RecipeDraft:
    """Ask the model for a recipe built from the given ingredients."""
    container: AppContainer = request.app.state.container
    try:
        return await container.generation_service.generate(
            body.ingredients, strict_mode=body.strict_mode
        )
    except OpenAIError as exc:
        _logger.exception("Recipe generation request failed")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_with_debug(container, exc, "Failed to generate meal"),
        ) from exc


@router.post("/recipes", response_model=RecipeOut)
async def save_recipe(body: SaveRecipeRequest, request: Request) -> RecipeOut:
    """Persist a generated recipe for the caller's wallet."""
    container: AppContainer = request.app.state.container
    saved = container.recipe_service.save_recipe(body.wallet_address, body.to_recipe())
    return RecipeOut.model_validate(saved)


@router.get("/recipes/{wallet_address}", response_model=list[RecipeOut])
async def list_recipes(wallet_address: str, request: Request) -> list[RecipeOut]:
    """Return a wallet's recipes, newest first."""
    container: AppContainer = request.app.state.container
    recipes = container.recipe_service.list_recipes(wallet_address)
    return [RecipeOut.model_validate(recipe) for recipe in recipes]


@router.post("/recipes/{recipe_id}/favorite", response_model=FavoriteResponse)
async def toggle_favorite(
    recipe_id: UUID, body: WalletRequest, request: Request
) -> FavoriteResponse:
    """Flip the favorite flag of an owned recipe."""
    container: AppContainer = request.app.state.container
    value = container.recipe_service.toggle_favorite(recipe_id, body.wallet_address)
    return FavoriteResponse(is_favorite=value)


@router.post("/recipes/{recipe_id}/scale", response_model=RecipeOut)
async def scale_recipe(
    recipe_id: UUID, body: ScaleRequest, request: Request
) -> RecipeOut:
    """Return the stored recipe rescaled to a new serving count."""
    container: AppContainer = request.app.state.container
    scaled = container.recipe_service.scale(recipe_id, body.servings)
    return RecipeOut.model_validate(scaled)


@router.delete("/recipes/{recipe_id}", response_model=MessageResponse)
async def delete_recipe(
    recipe_id: UUID,
    request: Request,
    wallet_address: str | None = Query(default=None, alias="walletAddress"),
) -> MessageResponse:
    """Delete an owned recipe."""
    container: AppContainer = request.app.state.container
    container.recipe_service.delete_recipe(recipe_id, wallet_address)
    return MessageResponse(message="Recipe deleted successfully")


def _with_debug(container: AppContainer, exc: Exception, fallback: str) -> str:
    """Return a user-facing error message with local debug info."""
    if container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback
