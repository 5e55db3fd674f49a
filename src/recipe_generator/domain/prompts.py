"""Prompt templates for recipe generation."""

BASIC_SEASONINGS = ("salt", "pepper", "oil")

_RESPONSE_FORMAT = """{
  "title": "A creative and appealing name for the dish",
  "description": "A brief, appetizing description of the dish",
  "servings": 4,
  "difficulty": "easy|medium|hard",
  "prepTime": 15,
  "cookTime": 30,
  "ingredients": [
    {
      "item": "ingredient name",
      "amount": 100,
      "unit": "g",
      "imperialAmount": 3.5,
      "imperialUnit": "oz"
    }
  ],
  "instructions": ["Step-by-step instruction with temperatures in C and F"],
  "tips": "Helpful cooking tips or serving suggestions",
  "nutrition": {
    "caloriesPerServing": 450,
    "macros": {"protein": 30, "carbs": 40, "fat": 15, "fiber": 6}
  }
}"""


def system_prompt(strict_mode: bool) -> str:
    """Return the chef persona instructions."""
    seasonings = ", ".join(BASIC_SEASONINGS)
    if strict_mode:
        ingredient_rule = (
            "You MUST ONLY use the exact ingredients provided, plus basic "
            f"seasonings ({seasonings}). No other ingredients are allowed."
        )
    else:
        ingredient_rule = "You can suggest additional ingredients when necessary."
    return (
        "You are a creative and knowledgeable chef who creates delicious recipes "
        f"from available ingredients. {ingredient_rule} "
        "You calculate nutritional values from the actual ingredients and amounts "
        "used. Always answer with a single valid JSON object, with no markdown "
        "formatting, no code blocks and no text before or after it. "
        "prepTime and cookTime are integers counting minutes."
    )


def recipe_prompt(ingredients: list[str], strict_mode: bool) -> str:
    """Return the user message asking for a recipe from ingredients."""
    listed = ", ".join(ingredients)
    if strict_mode:
        scope = (
            "using ONLY the following ingredients (salt, pepper and oil are "
            f"allowed): {listed}."
        )
        constraint = "Do not use any other ingredient."
    else:
        scope = f"using some or all of these ingredients: {listed}."
        constraint = "If an essential ingredient is missing, you may add it."
    return (
        f"Create a creative and delicious recipe {scope}\n\n{constraint}\n\n"
        f"Format the response as JSON with this structure:\n{_RESPONSE_FORMAT}\n\n"
        "Rules:\n"
        "1. Every ingredient has both metric and imperial measurements.\n"
        "2. Nutrition values are per serving, in grams for macros.\n"
        "3. Instructions are clear, ordered steps.\n"
        "4. Temperatures are given in both C and F."
    )


def build_messages(ingredients: list[str], strict_mode: bool) -> list[dict[str, str]]:
    """Return the role-tagged chat messages for a generation request."""
    return [
        {"role": "system", "content": system_prompt(strict_mode)},
        {"role": "user", "content": recipe_prompt(ingredients, strict_mode)},
    ]
