"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from recipe_generator.domain.models import UserPreferences, UserRecord
from recipe_generator.services.users import UserRepository

_KNOWN_PREFERENCE_KEYS = frozenset(
    {"strictMode", "strict_mode", "favoriteRecipes", "favorite_recipes"}
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_wallet(self, wallet_address: str) -> UserRecord | None:
        """Return the user for a wallet address, if present."""
        response = (
            self.client.table("users")
            .select("wallet_address, preferences")
            .eq("wallet_address", wallet_address)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(
        self, wallet_address: str, preferences: UserPreferences
    ) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "wallet_address": wallet_address,
                    "preferences": _serialize_preferences(preferences),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def upsert_preferences(
        self, wallet_address: str, preferences: UserPreferences
    ) -> UserRecord:
        """Insert or update the user's preferences."""
        response = (
            self.client.table("users")
            .upsert(
                {
                    "wallet_address": wallet_address,
                    "preferences": _serialize_preferences(preferences),
                },
                on_conflict="wallet_address",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user preferences")
        return _parse_user(response.data[0])


def _serialize_preferences(preferences: UserPreferences) -> dict[str, object]:
    return {
        **preferences.extra,
        "strictMode": preferences.strict_mode,
        "favoriteRecipes": list(preferences.favorite_recipes),
    }


def _parse_user(row: dict[str, object]) -> UserRecord:
    raw = row.get("preferences") or {}
    return UserRecord(
        wallet_address=str(row["wallet_address"]),
        preferences=UserPreferences(
            strict_mode=bool(raw.get("strictMode", False)),
            favorite_recipes=[str(item) for item in raw.get("favoriteRecipes") or []],
            extra={
                key: value
                for key, value in raw.items()
                if key not in _KNOWN_PREFERENCE_KEYS
            },
        ),
    )
