"""Domain models for user accounts."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal
from uuid import UUID

Gender = Literal["male", "female", "other"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]

GENDERS: tuple[str, ...] = ("male", "female", "other")
ACTIVITY_LEVELS: tuple[str, ...] = (
    "sedentary",
    "light",
    "moderate",
    "active",
    "very_active",
)

DEFAULT_CALORIE_GOAL = 2000.0
DEFAULT_PROTEIN_GOAL = 150.0
DEFAULT_CARBS_GOAL = 250.0
DEFAULT_FATS_GOAL = 65.0

PROFILE_FIELDS: tuple[str, ...] = (
    "name",
    "current_weight",
    "goal_weight",
    "height",
    "age",
    "gender",
    "activity_level",
    "daily_calorie_goal",
    "protein_goal",
    "carbs_goal",
    "fats_goal",
)


@dataclass(frozen=True)
class UserProfile:
    """Represents a user account without its credential."""

    id: UUID
    email: str
    name: str
    current_weight: float | None = None
    goal_weight: float | None = None
    height: float | None = None
    age: int | None = None
    gender: str = "other"
    activity_level: str | None = None
    daily_calorie_goal: float = DEFAULT_CALORIE_GOAL
    protein_goal: float = DEFAULT_PROTEIN_GOAL
    carbs_goal: float = DEFAULT_CARBS_GOAL
    fats_goal: float = DEFAULT_FATS_GOAL
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class UserCredentials:
    """A user together with the stored password hash."""

    user: UserProfile
    password_hash: str
