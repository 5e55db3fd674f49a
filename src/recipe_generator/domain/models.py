"""Domain models for users."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserPreferences:
    """Per-user generation preferences."""

    strict_mode: bool = False
    favorite_recipes: list[str] = field(default_factory=list)
    # Client-defined keys stored alongside the known ones.
    extra: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database, keyed by wallet address."""

    wallet_address: str
    preferences: UserPreferences = field(default_factory=UserPreferences)
