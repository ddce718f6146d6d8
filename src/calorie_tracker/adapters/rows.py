"""Helpers for converting between domain values and Supabase rows."""

from datetime import datetime
from uuid import UUID


def to_row(payload: dict[str, object]) -> dict[str, object]:
    """Convert UUID and datetime values into JSON-friendly strings."""
    row: dict[str, object] = {}
    for key, value in payload.items():
        if isinstance(value, UUID):
            row[key] = str(value)
        elif isinstance(value, datetime):
            row[key] = value.isoformat()
        else:
            row[key] = value
    return row


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, tolerating empty values."""
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def parse_optional_float(raw: object) -> float | None:
    if raw is None:
        return None
    return float(raw)
