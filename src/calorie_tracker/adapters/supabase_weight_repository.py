"""Supabase repository for weight history."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.rows import parse_timestamp, to_row
from calorie_tracker.domain.weight import WeightEntry
from calorie_tracker.services.weight import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight entries."""

    client: Client

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> WeightEntry:
        """Create a weight entry and return it."""
        response = (
            self.client.table("weight_entries")
            .insert(to_row({"user_id": user_id, **payload}))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create weight entry")
        return _parse_entry(response.data[0])

    def get_entry(self, user_id: UUID, entry_id: UUID) -> WeightEntry | None:
        """Return an entry owned by the user."""
        response = (
            self.client.table("weight_entries")
            .select("*")
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_entries(
        self,
        user_id: UUID,
        start: datetime | None,
        end: datetime | None,
        limit: int,
    ) -> list[WeightEntry]:
        """Return entries in a date range, newest first."""
        query = (
            self.client.table("weight_entries").select("*").eq("user_id", str(user_id))
        )
        if start is not None:
            query = query.gte("date", start.isoformat())
        if end is not None:
            query = query.lte("date", end.isoformat())
        response = query.order("date", desc=True).limit(limit).execute()
        return [_parse_entry(row) for row in response.data or []]

    def list_since(self, user_id: UUID, since: datetime) -> list[WeightEntry]:
        """Return entries on or after a moment, oldest first."""
        response = (
            self.client.table("weight_entries")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("date", since.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def get_latest(self, user_id: UUID) -> WeightEntry | None:
        """Return the most recently dated entry."""
        response = (
            self.client.table("weight_entries")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def update_entry(
        self, user_id: UUID, entry_id: UUID, payload: dict[str, object]
    ) -> WeightEntry | None:
        """Update an entry owned by the user."""
        response = (
            self.client.table("weight_entries")
            .update(to_row({**payload, "updated_at": datetime.now(tz=UTC)}))
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete an entry owned by the user."""
        response = (
            self.client.table("weight_entries")
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_entry(row: dict[str, object]) -> WeightEntry:
    recorded_on = parse_timestamp(row.get("date"))
    if recorded_on is None:
        raise RuntimeError(f"Weight entry {row.get('id')} has no date")
    return WeightEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        weight=float(row.get("weight") or 0.0),
        date=recorded_on,
        notes=row.get("notes"),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
