"""Domain models for ingredient catalogs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CustomFood:
    """Ingredient a user added to their own palette."""

    id: UUID
    name: str
    category: str
    created_by: str
    created_at: datetime | None


@dataclass(frozen=True)
class DefaultFood:
    """Ingredient from the seeded catalog."""

    name: str
    category: str
