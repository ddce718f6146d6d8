"""Supabase implementation for the user food catalog."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.rows import parse_timestamp, to_row
from calorie_tracker.domain.foods import Food
from calorie_tracker.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for per-user foods."""

    client: Client

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> Food:
        """Create a food entry and return it."""
        response = (
            self.client.table("foods")
            .insert(to_row({"user_id": user_id, **payload}))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return parse_food(response.data[0])

    def get_food(self, user_id: UUID, food_id: UUID) -> Food | None:
        """Return a food entry owned by the user."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def list_foods(
        self,
        user_id: UUID,
        search: str | None,
        category: str | None,
        offset: int,
        limit: int,
    ) -> tuple[list[Food], int]:
        """Return a page of foods matching the filters and the match count."""
        query = (
            self.client.table("foods")
            .select("*", count="exact")
            .eq("user_id", str(user_id))
        )
        if search:
            query = query.ilike("name", f"%{search}%")
        if category:
            query = query.eq("category", category)
        response = (
            query.order("created_at", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        foods = [parse_food(row) for row in response.data or []]
        total = response.count if response.count is not None else len(foods)
        return foods, total

    def update_food(
        self, user_id: UUID, food_id: UUID, payload: dict[str, object]
    ) -> Food | None:
        """Update a food entry owned by the user."""
        response = (
            self.client.table("foods")
            .update(to_row({**payload, "updated_at": datetime.now(tz=UTC)}))
            .eq("id", str(food_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def delete_food(self, user_id: UUID, food_id: UUID) -> bool:
        """Delete a food entry owned by the user."""
        response = (
            self.client.table("foods")
            .delete()
            .eq("id", str(food_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def parse_food(row: dict[str, object]) -> Food:
    """Parse a food row into a domain model."""
    return Food(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fats=float(row.get("fats") or 0.0),
        serving_size=float(row.get("serving_size") or 0.0),
        serving_unit=str(row.get("serving_unit") or "g"),
        barcode=row.get("barcode"),
        image_url=row.get("image_url"),
        category=str(row.get("category") or "other"),
        is_public=bool(row.get("is_public", False)),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
