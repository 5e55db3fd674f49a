"""Validation of raw recipe drafts returned by the generation model."""

import json
import math
import re

from recipe_generator.errors import (
    InvalidNumericError,
    MalformedJSONError,
    MissingFieldError,
)

REQUIRED_FIELDS = (
    "title",
    "description",
    "servings",
    "difficulty",
    "prepTime",
    "cookTime",
    "ingredients",
    "instructions",
)

_OPENING_FENCE_RE = re.compile(r"\A```[\w+-]*[ \t]*\n?")
_CLOSING_FENCE_RE = re.compile(r"\n?[ \t]*```\Z")
_DURATION_FIELDS = ("prepTime", "cookTime")
_NON_DIGITS_RE = re.compile(r"[^0-9]")


def strip_code_fence(text: str) -> str:
    """Remove a leading and a trailing markdown code fence, then trim.

    Each side is stripped on its own, so a reply cut off before its closing
    fence still parses.
    """
    cleaned = _OPENING_FENCE_RE.sub("", text.strip(), count=1)
    cleaned = _CLOSING_FENCE_RE.sub("", cleaned, count=1)
    return cleaned.strip()


def validate_recipe_draft(raw: str) -> dict[str, object]:
    """Parse model output into a draft dict with numeric times.

    Only presence of the required fields and the numeric fields are checked;
    the rest of the object is returned as parsed. A required field is missing
    when it is null or falsy (empty string or list, zero servings); prepTime
    and cookTime may be zero.
    """
    content = strip_code_fence(raw)
    try:
        draft = json.loads(content)
    except json.JSONDecodeError as exc:
        raise MalformedJSONError(str(exc)) from exc
    if not isinstance(draft, dict):
        raise MalformedJSONError(f"expected a JSON object, got {type(draft).__name__}")

    for field in REQUIRED_FIELDS:
        if _is_missing(field, draft.get(field)):
            raise MissingFieldError(field)

    for field in _DURATION_FIELDS:
        draft[field] = coerce_minutes(field, draft[field])
    if not _is_finite_number(draft["servings"]):
        raise InvalidNumericError("servings", draft["servings"])
    return draft


def coerce_minutes(field: str, value: object) -> int | float:
    """Turn values like ``"15 minutes"`` into ``15``."""
    if isinstance(value, str):
        digits = _NON_DIGITS_RE.sub("", value)
        if not digits:
            raise InvalidNumericError(field, value)
        return int(digits)
    if not _is_finite_number(value):
        raise InvalidNumericError(field, value)
    return value


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int | float):
        return math.isfinite(value)
    if isinstance(value, str):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


def _is_missing(field: str, value: object) -> bool:
    if value is None:
        return True
    if field in _DURATION_FIELDS and not isinstance(value, bool):
        return value == ""
    return not value
