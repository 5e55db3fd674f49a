"""Supabase repositories for custom and default foods."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from recipe_generator.domain.foods import CustomFood, DefaultFood
from recipe_generator.services.foods import CustomFoodRepository, DefaultFoodRepository

_NIL_UUID = "00000000-0000-0000-0000-000000000000"


@dataclass
class SupabaseCustomFoodRepository(CustomFoodRepository):
    """Supabase-backed repository for user-defined foods."""

    client: Client

    def list_foods(self, owner: str) -> list[CustomFood]:
        """Return foods created by owner, newest first."""
        response = (
            self.client.table("custom_food_items")
            .select("*")
            .eq("created_by", owner)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_custom_food(row) for row in response.data or []]

    def find_food(self, owner: str, name: str) -> CustomFood | None:
        """Return the owner's food with this exact name, if present."""
        response = (
            self.client.table("custom_food_items")
            .select("*")
            .eq("created_by", owner)
            .eq("name", name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_custom_food(response.data[0])

    def create_food(self, owner: str, name: str, category: str) -> CustomFood:
        """Create a food entry and return it."""
        response = (
            self.client.table("custom_food_items")
            .insert({"name": name, "category": category, "created_by": owner})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create custom food")
        return _parse_custom_food(response.data[0])

    def get_food(self, food_id: UUID) -> CustomFood | None:
        """Return a food entry by id, if present."""
        response = (
            self.client.table("custom_food_items")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_custom_food(response.data[0])

    def delete_food(self, food_id: UUID, owner: str) -> bool:
        """Delete the food only when owner matches."""
        response = (
            self.client.table("custom_food_items")
            .delete()
            .eq("id", str(food_id))
            .eq("created_by", owner)
            .execute()
        )
        return bool(response.data)


@dataclass
class SupabaseDefaultFoodRepository(DefaultFoodRepository):
    """Supabase-backed repository for the seeded catalog."""

    client: Client

    def replace_all(self, foods: list[DefaultFood]) -> None:
        """Clear the catalog table and bulk insert foods."""
        # PostgREST refuses unfiltered deletes.
        self.client.table("default_food_items").delete().neq("id", _NIL_UUID).execute()
        if not foods:
            return
        self.client.table("default_food_items").insert(
            [{"name": food.name, "category": food.category} for food in foods]
        ).execute()

    def list_foods(self) -> list[DefaultFood]:
        """Return catalog foods ordered by category, then name."""
        response = (
            self.client.table("default_food_items")
            .select("name, category")
            .order("category")
            .order("name")
            .execute()
        )
        return [
            DefaultFood(name=str(row["name"]), category=str(row["category"]))
            for row in response.data or []
        ]


def _parse_custom_food(row: dict[str, object]) -> CustomFood:
    """Parse a custom food row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return CustomFood(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        category=str(row.get("category") or "Custom"),
        created_by=str(row.get("created_by", "")),
        created_at=created_at,
    )
