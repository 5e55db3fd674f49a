"""Tests for recipe generation."""

import asyncio
import json

import pytest

from recipe_generator.errors import (
    InvalidIngredientsError,
    MalformedJSONError,
    MissingFieldError,
    RecipeSchemaMismatchError,
)
from recipe_generator.services.generation import (
    CREATIVE_TEMPERATURE,
    STRICT_TEMPERATURE,
    GenerationService,
    parse_recipe_draft,
)


def test_generate_returns_validated_draft(generation_client) -> None:
    service = GenerationService(client=generation_client, model="deepseek-chat")

    draft = asyncio.run(service.generate(["salmon", "butter"]))

    assert draft.title == "Garlic Butter Salmon"
    assert draft.servings == 4
    assert draft.ingredients[0].imperial_unit == "oz"
    call = generation_client.calls[0]
    assert call["model"] == "deepseek-chat"
    assert call["temperature"] == CREATIVE_TEMPERATURE
    assert "salmon, butter" in call["messages"][-1]["content"]


def test_strict_mode_lowers_temperature(generation_client) -> None:
    service = GenerationService(client=generation_client, model="deepseek-chat")

    asyncio.run(service.generate(["salmon"], strict_mode=True))

    call = generation_client.calls[0]
    assert call["temperature"] == STRICT_TEMPERATURE
    assert call["messages"][0]["role"] == "system"


def test_generate_retries_rejected_draft(generation_client, draft_json) -> None:
    generation_client.replies = ["not json at all", draft_json]
    service = GenerationService(
        client=generation_client, model="deepseek-chat", retry_attempts=1
    )

    draft = asyncio.run(service.generate(["salmon"]))

    assert draft.title == "Garlic Butter Salmon"
    assert len(generation_client.calls) == 2


def test_generate_gives_up_after_retries(generation_client) -> None:
    generation_client.replies = [json.dumps({"title": "Only a title"})]
    service = GenerationService(
        client=generation_client, model="deepseek-chat", retry_attempts=2
    )

    with pytest.raises(MissingFieldError):
        asyncio.run(service.generate(["salmon"]))

    assert len(generation_client.calls) == 3


def test_generate_without_retries(generation_client) -> None:
    generation_client.replies = ["```json\n[]\n```"]
    service = GenerationService(
        client=generation_client, model="deepseek-chat", retry_attempts=0
    )

    with pytest.raises(MalformedJSONError):
        asyncio.run(service.generate(["salmon"]))

    assert len(generation_client.calls) == 1


@pytest.mark.parametrize("ingredients", [None, "salmon", [], ["  ", ""]])
def test_generate_rejects_bad_ingredients(generation_client, ingredients) -> None:
    service = GenerationService(client=generation_client, model="deepseek-chat")

    with pytest.raises(InvalidIngredientsError):
        asyncio.run(service.generate(ingredients))

    assert generation_client.calls == []


def test_generate_propagates_client_errors(generation_client) -> None:
    async def failing_complete(**kwargs) -> str:
        raise ConnectionError("upstream down")

    generation_client.complete = failing_complete
    service = GenerationService(
        client=generation_client, model="deepseek-chat", retry_attempts=3
    )

    with pytest.raises(ConnectionError):
        asyncio.run(service.generate(["salmon"]))


def test_parse_recipe_draft_normalizes_values(make_payload) -> None:
    raw = json.dumps(make_payload(difficulty=" Medium ", prepTime="20 min"))

    draft = parse_recipe_draft(raw)

    assert draft.difficulty == "medium"
    assert draft.prep_time == 20


def test_parse_recipe_draft_rejects_schema_mismatch(make_payload) -> None:
    bad_ingredient = {
        "item": "Salt",
        "amount": -1,
        "unit": "g",
        "imperialAmount": 0,
        "imperialUnit": "oz",
    }
    raw = json.dumps(
        make_payload(difficulty="impossible", ingredients=[bad_ingredient])
    )

    with pytest.raises(RecipeSchemaMismatchError) as excinfo:
        parse_recipe_draft(raw)

    assert "difficulty" in str(excinfo.value)
    assert "ingredients" in str(excinfo.value)


def test_parse_recipe_draft_defaults_nutrition(make_payload) -> None:
    payload = make_payload()
    del payload["nutrition"]
    del payload["tips"]

    draft = parse_recipe_draft(json.dumps(payload))

    assert draft.tips is None
    assert draft.nutrition.calories_per_serving == 0.0


def test_draft_converts_to_recipe(draft_json) -> None:
    recipe = parse_recipe_draft(draft_json).to_recipe()

    assert recipe.id is None
    assert recipe.ingredients[1].item == "Butter"
    assert recipe.nutrition.macros.protein == 34
