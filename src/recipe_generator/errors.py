"""Domain errors raised by services and mapped to HTTP responses by the API."""

from uuid import UUID


class RecipeGeneratorError(Exception):
    """Base class for all domain errors."""


class RecipeValidationError(RecipeGeneratorError, ValueError):
    """Caller supplied input that cannot be processed."""


class InvalidServingsError(RecipeValidationError):
    """Target or source servings is not a positive integer."""

    def __init__(self, value: object, label: str = "servings") -> None:
        super().__init__(f"Invalid {label}: {value!r} (expected a positive integer)")
        self.value = value


class MissingIngredientsError(RecipeValidationError):
    """Recipe has no ingredient sequence to scale."""

    def __init__(self) -> None:
        super().__init__("Recipe has no ingredient list")


class InvalidIngredientsError(RecipeValidationError):
    """Generation request carried no usable ingredients."""

    def __init__(self) -> None:
        super().__init__("Please provide a non-empty array of ingredients")


class MissingWalletAddressError(RecipeValidationError):
    """Request did not identify the calling wallet."""

    def __init__(self) -> None:
        super().__init__("Wallet address is required")


class EmptyFoodNameError(RecipeValidationError):
    """Custom food name is blank."""

    def __init__(self) -> None:
        super().__init__("Food name is required")


class RecipeDraftError(RecipeGeneratorError):
    """LLM output could not be turned into a recipe draft.

    Draft errors describe the content of a single model answer, so asking the
    model again may succeed.
    """

    retryable = True


class MalformedJSONError(RecipeDraftError):
    """Model output is not a JSON object."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid recipe format returned from AI: {detail}")


class MissingFieldError(RecipeDraftError):
    """A required recipe field is absent."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class InvalidNumericError(RecipeDraftError):
    """prepTime, cookTime or servings is not a finite number."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Invalid numeric value for {field}: {value!r}")
        self.field = field
        self.value = value


class RecipeSchemaMismatchError(RecipeDraftError):
    """Draft passed presence checks but does not match the recipe schema."""

    def __init__(self, errors: list[dict[str, object]]) -> None:
        locations = ", ".join(
            ".".join(str(part) for part in error.get("loc", ())) for error in errors
        )
        super().__init__(f"Recipe does not match schema at: {locations}")
        self.errors = errors


class NotFoundError(RecipeGeneratorError):
    """Requested entity does not exist."""


class RecipeNotFoundError(NotFoundError):
    def __init__(self, recipe_id: UUID) -> None:
        super().__init__("Recipe not found")
        self.recipe_id = recipe_id


class CustomFoodNotFoundError(NotFoundError):
    def __init__(self, food_id: UUID) -> None:
        super().__init__("Custom food not found")
        self.food_id = food_id


class NotOwnerError(RecipeGeneratorError):
    """Caller's wallet does not own the entity it tries to modify."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Not authorized to {action}")


class ConflictError(RecipeGeneratorError):
    """Write could not be applied because of existing or concurrent state."""


class DuplicateFoodError(ConflictError):
    def __init__(self, name: str) -> None:
        super().__init__("Food item already exists")
        self.name = name


class ConcurrentUpdateError(ConflictError):
    def __init__(self, recipe_id: UUID) -> None:
        super().__init__("Recipe was modified concurrently, please retry")
        self.recipe_id = recipe_id
