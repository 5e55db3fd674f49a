"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from recipe_generator.domain.models import UserPreferences, UserRecord
from recipe_generator.errors import MissingWalletAddressError


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_wallet(self, wallet_address: str) -> UserRecord | None:
        """Return the user for a wallet address, if present."""

    def create_user(
        self, wallet_address: str, preferences: UserPreferences
    ) -> UserRecord:
        """Create and return a new user record."""

    def upsert_preferences(
        self, wallet_address: str, preferences: UserPreferences
    ) -> UserRecord:
        """Create the user or replace its preferences, returning the row."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def ensure_user(self, wallet_address: str) -> UserRecord:
        """Ensure a user exists for the wallet and return it."""
        existing = self.repository.get_by_wallet(wallet_address)
        if existing:
            return existing
        return self.repository.create_user(wallet_address, UserPreferences())

    def update_preferences(
        self, wallet_address: str | None, preferences: UserPreferences
    ) -> UserPreferences:
        """Store preferences for a wallet and return what was saved."""
        if not wallet_address:
            raise MissingWalletAddressError
        record = self.repository.upsert_preferences(wallet_address, preferences)
        return record.preferences
