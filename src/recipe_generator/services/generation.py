"""Recipe generation through a chat-completion model."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from recipe_generator.domain.generation import RecipeDraft
from recipe_generator.domain.prompts import build_messages
from recipe_generator.errors import (
    InvalidIngredientsError,
    RecipeDraftError,
    RecipeSchemaMismatchError,
)
from recipe_generator.services.drafts import validate_recipe_draft

_logger = logging.getLogger(__name__)

STRICT_TEMPERATURE = 0.3
CREATIVE_TEMPERATURE = 0.8


class GenerationClient(Protocol):
    """Interface for chat-completion models."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
    ) -> str:
        """Return the text content of the model's reply."""


@dataclass
class GenerationService:
    """Service that prompts the model and validates the recipe it returns."""

    client: GenerationClient
    model: str
    retry_attempts: int = 1

    async def generate(
        self, ingredients: object, strict_mode: bool = False
    ) -> RecipeDraft:
        """Generate a recipe draft from a list of ingredient names.

        Draft errors (unparseable or incomplete answers) are retried up to
        ``retry_attempts`` extra times; client errors propagate immediately.
        """
        names = _clean_ingredients(ingredients)
        messages = build_messages(names, strict_mode)
        temperature = STRICT_TEMPERATURE if strict_mode else CREATIVE_TEMPERATURE
        attempt = 0
        while True:
            raw = await self.client.complete(
                model=self.model, messages=messages, temperature=temperature
            )
            try:
                return parse_recipe_draft(raw)
            except RecipeDraftError as exc:
                attempt += 1
                _logger.warning(
                    "Recipe draft rejected (attempt %s/%s): %s",
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                if not exc.retryable or attempt > self.retry_attempts:
                    raise


def parse_recipe_draft(raw: str) -> RecipeDraft:
    """Validate raw model output and load it into the recipe schema."""
    draft = validate_recipe_draft(raw)
    try:
        return RecipeDraft.model_validate(draft)
    except ValidationError as exc:
        raise RecipeSchemaMismatchError(exc.errors()) from exc


def _clean_ingredients(ingredients: object) -> list[str]:
    if not isinstance(ingredients, list):
        raise InvalidIngredientsError
    names = [str(item).strip() for item in ingredients if str(item).strip()]
    if not names:
        raise InvalidIngredientsError
    return names
