"""Weight history and trend statistics."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.weight import WeightEntry, WeightStats, WeightTrend

logger = logging.getLogger(__name__)

DEFAULT_TREND_DAYS = 30
DEFAULT_HISTORY_LIMIT = 100

_NULLABLE_FIELDS = frozenset({"notes"})


class WeightRepository(Protocol):
    """Persistence interface for weight entries."""

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> WeightEntry:
        """Create a weight entry and return it."""

    def get_entry(self, user_id: UUID, entry_id: UUID) -> WeightEntry | None:
        """Return an entry owned by the user, if present."""

    def list_entries(
        self,
        user_id: UUID,
        start: datetime | None,
        end: datetime | None,
        limit: int,
    ) -> list[WeightEntry]:
        """Return entries with date in [start, end], newest first."""

    def list_since(self, user_id: UUID, since: datetime) -> list[WeightEntry]:
        """Return entries dated on or after `since`, oldest first."""

    def get_latest(self, user_id: UUID) -> WeightEntry | None:
        """Return the most recently dated entry."""

    def update_entry(
        self, user_id: UUID, entry_id: UUID, payload: dict[str, object]
    ) -> WeightEntry | None:
        """Update an entry owned by the user and return it."""

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete an entry owned by the user; return False when absent."""


def compute_weight_stats(entries: list[WeightEntry]) -> WeightStats:
    """Average and net change of a series ordered oldest to newest."""
    count = len(entries)
    if count == 0:
        return WeightStats()
    average = sum(entry.weight for entry in entries) / count
    if count < 2:  # noqa: PLR2004
        return WeightStats(count=count, average=average)
    oldest = entries[0].weight
    change = entries[-1].weight - oldest
    percentage = f"{change / oldest * 100:.2f}" if oldest else "0"
    return WeightStats(
        count=count, average=average, change=change, change_percentage=percentage
    )


@dataclass
class WeightService:
    """Service for recording weights and summarizing their trend."""

    repository: WeightRepository
    timezone: tzinfo

    def list_entries(
        self,
        user_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> list[WeightEntry]:
        """Return the user's weights, newest first."""
        return self.repository.list_entries(
            user_id, self._localize(start), self._localize(end), limit
        )

    def latest(self, user_id: UUID) -> WeightEntry | None:
        """Return the user's most recent weight."""
        return self.repository.get_latest(user_id)

    def trend(self, user_id: UUID, days: int = DEFAULT_TREND_DAYS) -> WeightTrend:
        """Return the last `days` days of weights with summary statistics."""
        try:
            since = datetime.now(tz=UTC) - timedelta(days=days)
        except OverflowError:
            since = datetime.min.replace(tzinfo=UTC)
        entries = self.repository.list_since(user_id, since)
        return WeightTrend(entries=entries, stats=compute_weight_stats(entries))

    def create_entry(
        self,
        user_id: UUID,
        weight: float,
        recorded_on: datetime,
        notes: str | None = None,
    ) -> WeightEntry:
        """Record a weight observation."""
        entry = self.repository.create_entry(
            user_id,
            {
                "weight": weight,
                "date": self._localize(recorded_on),
                "notes": notes,
            },
        )
        logger.info(
            "Weight entry created",
            extra={"user_id": str(user_id), "entry_id": str(entry.id)},
        )
        return entry

    def update_entry(
        self, user_id: UUID, entry_id: UUID, changes: dict[str, object]
    ) -> WeightEntry | None:
        """Update one of the user's weight entries."""
        payload = {
            key: value
            for key, value in changes.items()
            if value is not None or key in _NULLABLE_FIELDS
        }
        if "date" in payload:
            payload["date"] = self._localize(payload["date"])
        if not payload:
            return self.repository.get_entry(user_id, entry_id)
        return self.repository.update_entry(user_id, entry_id, payload)

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete one of the user's weight entries."""
        return self.repository.delete_entry(user_id, entry_id)

    def _localize(self, value: datetime | None) -> datetime | None:
        if value is None or value.tzinfo is not None:
            return value
        return value.replace(tzinfo=self.timezone)
