"""Domain models for weight history."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class WeightEntry:
    """A dated body weight observation in kilograms."""

    id: UUID
    user_id: UUID
    weight: float
    date: datetime
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class WeightStats:
    """Summary statistics over a weight series."""

    count: int = 0
    average: float = 0.0
    change: float = 0.0
    change_percentage: str = "0"


@dataclass(frozen=True)
class WeightTrend:
    """Weight entries in ascending date order with their statistics."""

    entries: list[WeightEntry] = field(default_factory=list)
    stats: WeightStats = field(default_factory=WeightStats)
