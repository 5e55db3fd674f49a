"""Ingredient palette endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, Request

from recipe_generator.api.schemas import (
    CustomFoodOut,
    CustomFoodRequest,
    MessageResponse,
)

if TYPE_CHECKING:
    from recipe_generator.containers import AppContainer

router = APIRouter(tags=["foods"])


@router.get("/default-foods")
async def default_foods(request: Request) -> dict[str, list[str]]:
    """Return the seeded catalog grouped by category."""
    container: AppContainer = request.app.state.container
    return container.food_service.list_default_foods()


@router.get("/custom-foods/{wallet_address}", response_model=list[CustomFoodOut])
async def list_custom_foods(
    wallet_address: str, request: Request
) -> list[CustomFoodOut]:
    """Return a wallet's custom foods, newest first."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.list_custom_foods(wallet_address)
    return [CustomFoodOut.model_validate(food) for food in foods]


@router.post("/custom-foods", response_model=CustomFoodOut)
async def add_custom_food(body: CustomFoodRequest, request: Request) -> CustomFoodOut:
    """Add a custom food to a wallet's palette."""
    container: AppContainer = request.app.state.container
    food = container.food_service.add_custom_food(
        body.wallet_address, body.name, body.category
    )
    return CustomFoodOut.model_validate(food)


@router.delete("/custom-foods/{food_id}", response_model=MessageResponse)
async def delete_custom_food(
    food_id: UUID,
    request: Request,
    wallet_address: str | None = Query(default=None, alias="walletAddress"),
) -> MessageResponse:
    """Delete an owned custom food."""
    container: AppContainer = request.app.state.container
    container.food_service.delete_custom_food(food_id, wallet_address)
    return MessageResponse(message="Custom food deleted successfully")
