"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from recipe_generator.adapters.openai_chat_client import OpenAIChatClient
from recipe_generator.adapters.supabase_food_repository import (
    SupabaseCustomFoodRepository,
    SupabaseDefaultFoodRepository,
)
from recipe_generator.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from recipe_generator.adapters.supabase_user_repository import SupabaseUserRepository
from recipe_generator.config import Settings
from recipe_generator.services.foods import FoodService
from recipe_generator.services.generation import GenerationService
from recipe_generator.services.recipes import RecipeService
from recipe_generator.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    recipe_service: RecipeService
    food_service: FoodService
    generation_service: GenerationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    recipe_service = RecipeService(SupabaseRecipeRepository(supabase_client))
    food_service = FoodService(
        custom_repository=SupabaseCustomFoodRepository(supabase_client),
        default_repository=SupabaseDefaultFoodRepository(supabase_client),
        user_service=user_service,
    )
    chat_client = OpenAIChatClient.create(
        api_key=resolved_settings.openai_api_key,
        base_url=resolved_settings.openai_base_url,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    generation_service = GenerationService(
        client=chat_client,
        model=resolved_settings.openai_model,
        retry_attempts=resolved_settings.generation_retry_attempts,
    )

    async def close_resources() -> None:
        await chat_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        recipe_service=recipe_service,
        food_service=food_service,
        generation_service=generation_service,
        close_resources=close_resources,
    )
