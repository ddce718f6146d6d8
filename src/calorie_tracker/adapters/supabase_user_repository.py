"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from calorie_tracker.adapters.rows import (
    parse_optional_float,
    parse_timestamp,
    to_row,
)
from calorie_tracker.domain.users import (
    DEFAULT_CALORIE_GOAL,
    DEFAULT_CARBS_GOAL,
    DEFAULT_FATS_GOAL,
    DEFAULT_PROTEIN_GOAL,
    UserCredentials,
    UserProfile,
)
from calorie_tracker.services.auth import EmailAlreadyRegisteredError
from calorie_tracker.services.users import UserRepository

UNIQUE_VIOLATION = "23505"

_PROFILE_COLUMNS = (
    "id, email, name, current_weight, goal_weight, height, age, gender, "
    "activity_level, daily_calorie_goal, protein_goal, carbs_goal, fats_goal, "
    "created_at, updated_at"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> UserProfile | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_PROFILE_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def get_credentials(self, email: str) -> UserCredentials | None:
        """Return the user and password hash for an email, if present."""
        response = (
            self.client.table("users")
            .select(f"{_PROFILE_COLUMNS}, password_hash")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserCredentials(
            user=_parse_user(row), password_hash=str(row.get("password_hash", ""))
        )

    def create_user(self, email: str, name: str, password_hash: str) -> UserProfile:
        """Create a new user row and return it."""
        try:
            response = (
                self.client.table("users")
                .insert({"email": email, "name": name, "password_hash": password_hash})
                .execute()
            )
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise EmailAlreadyRegisteredError(
                    "User already exists with this email"
                ) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_profile(
        self, user_id: UUID, payload: dict[str, object]
    ) -> UserProfile | None:
        """Update profile columns for a user."""
        response = (
            self.client.table("users")
            .update(to_row({**payload, "updated_at": datetime.now(tz=UTC)}))
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserProfile:
    age = row.get("age")
    return UserProfile(
        id=UUID(str(row["id"])),
        email=str(row.get("email", "")),
        name=str(row.get("name", "")),
        current_weight=parse_optional_float(row.get("current_weight")),
        goal_weight=parse_optional_float(row.get("goal_weight")),
        height=parse_optional_float(row.get("height")),
        age=int(age) if age is not None else None,
        gender=str(row.get("gender") or "other"),
        activity_level=row.get("activity_level"),
        daily_calorie_goal=float(row.get("daily_calorie_goal") or DEFAULT_CALORIE_GOAL),
        protein_goal=float(row.get("protein_goal") or DEFAULT_PROTEIN_GOAL),
        carbs_goal=float(row.get("carbs_goal") or DEFAULT_CARBS_GOAL),
        fats_goal=float(row.get("fats_goal") or DEFAULT_FATS_GOAL),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
