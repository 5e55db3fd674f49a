"""User preference endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from recipe_generator.api.schemas import (
    PreferencesModel,
    PreferencesRequest,
    PreferencesResponse,
)

if TYPE_CHECKING:
    from recipe_generator.containers import AppContainer

router = APIRouter(prefix="/user", tags=["users"])


@router.post("/preferences", response_model=PreferencesResponse)
async def update_preferences(
    body: PreferencesRequest, request: Request
) -> PreferencesResponse:
    """Create or update the caller's preferences."""
    container: AppContainer = request.app.state.container
    saved = container.user_service.update_preferences(
        body.wallet_address, body.preferences.to_domain()
    )
    return PreferencesResponse(preferences=PreferencesModel.from_domain(saved))
