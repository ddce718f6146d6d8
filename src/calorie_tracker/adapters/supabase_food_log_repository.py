"""Supabase repository for food logs."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.rows import parse_timestamp, to_row
from calorie_tracker.domain.food_logs import FoodLog, RangeSummary
from calorie_tracker.services.food_logs import FoodLogRepository

RANGE_SUMMARY_FUNCTION = "food_log_range_summary"


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def create_log(self, user_id: UUID, payload: dict[str, object]) -> FoodLog:
        """Create a food log row and return it."""
        response = (
            self.client.table("food_logs")
            .insert(to_row({"user_id": user_id, **payload}))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")
        return _parse_log(response.data[0])

    def get_log(self, user_id: UUID, log_id: UUID) -> FoodLog | None:
        """Return a log owned by the user."""
        response = (
            self.client.table("food_logs")
            .select("*")
            .eq("id", str(log_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def list_logs(
        self,
        user_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
        meal_type: str | None = None,
    ) -> list[FoodLog]:
        """Return logs in a date range, newest first."""
        query = self.client.table("food_logs").select("*").eq("user_id", str(user_id))
        if start is not None:
            query = query.gte("date", start.isoformat())
        if end is not None:
            query = query.lte("date", end.isoformat())
        if meal_type:
            query = query.eq("meal_type", meal_type)
        response = (
            query.order("date", desc=True).order("created_at", desc=True).execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def update_log(
        self, user_id: UUID, log_id: UUID, payload: dict[str, object]
    ) -> FoodLog | None:
        """Update a log owned by the user."""
        response = (
            self.client.table("food_logs")
            .update(to_row({**payload, "updated_at": datetime.now(tz=UTC)}))
            .eq("id", str(log_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def delete_log(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete a log owned by the user."""
        response = (
            self.client.table("food_logs")
            .delete()
            .eq("id", str(log_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)

    def summarize_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> RangeSummary:
        """Sum nutrients in the database with the range summary function."""
        response = self.client.rpc(
            RANGE_SUMMARY_FUNCTION,
            {
                "p_user_id": str(user_id),
                "p_start": start.isoformat(),
                "p_end": end.isoformat(),
            },
        ).execute()
        data = response.data
        row = data[0] if isinstance(data, list) and data else data
        if not isinstance(row, dict):
            return RangeSummary()
        return RangeSummary(
            total_calories=float(row.get("total_calories") or 0.0),
            total_protein=float(row.get("total_protein") or 0.0),
            total_carbs=float(row.get("total_carbs") or 0.0),
            total_fats=float(row.get("total_fats") or 0.0),
            count=int(row.get("count") or 0),
        )


def _parse_log(row: dict[str, object]) -> FoodLog:
    logged_on = parse_timestamp(row.get("date"))
    if logged_on is None:
        raise RuntimeError(f"Food log {row.get('id')} has no date")
    return FoodLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        food_id=UUID(str(row["food_id"])),
        date=logged_on,
        meal_type=str(row.get("meal_type", "")),
        servings=float(row.get("servings") or 0.0),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fats=float(row.get("fats") or 0.0),
        food_name=str(row.get("food_name", "")),
        notes=row.get("notes"),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
