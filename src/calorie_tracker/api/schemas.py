"""Pydantic request models for the JSON API."""

from datetime import datetime, timedelta
from typing import Annotated
from uuid import UUID

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
)
from pydantic.alias_generators import to_camel

from calorie_tracker.domain.food_logs import MIN_SERVINGS, MealType
from calorie_tracker.domain.foods import FoodCategory
from calorie_tracker.domain.users import ActivityLevel, Gender

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Notes = Annotated[str, StringConstraints(max_length=500)]
NonNegative = Annotated[float, Field(ge=0)]


def _within_calendar(value: datetime) -> datetime:
    """Reject timestamps within a day of the representable limits."""
    try:
        value + timedelta(days=1)
        value - timedelta(days=1)
    except OverflowError as exc:
        raise ValueError("date is out of range") from exc
    return value


RecordedAt = Annotated[datetime, AfterValidator(_within_calendar)]


class ApiModel(BaseModel):
    """Base model accepting camelCase or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def changes(self) -> dict[str, object]:
        """Fields the client actually sent, keyed by Python name."""
        return self.model_dump(exclude_unset=True)


class RegisterRequest(ApiModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: NonBlankStr


class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(min_length=1)


class FoodCreate(ApiModel):
    name: NonBlankStr
    calories: NonNegative
    protein: NonNegative
    carbs: NonNegative
    fats: NonNegative
    serving_size: NonNegative = 100.0
    serving_unit: NonBlankStr = "g"
    barcode: str | None = None
    image_url: str | None = None
    category: FoodCategory = "other"
    is_public: bool = False


class FoodUpdate(ApiModel):
    name: NonBlankStr | None = None
    calories: NonNegative | None = None
    protein: NonNegative | None = None
    carbs: NonNegative | None = None
    fats: NonNegative | None = None
    serving_size: NonNegative | None = None
    serving_unit: NonBlankStr | None = None
    barcode: str | None = None
    image_url: str | None = None
    category: FoodCategory | None = None
    is_public: bool | None = None


class FoodLogCreate(ApiModel):
    food_id: UUID
    date: RecordedAt
    meal_type: MealType
    servings: float = Field(default=1.0, ge=MIN_SERVINGS)
    notes: Notes | None = None


class FoodLogUpdate(ApiModel):
    date: RecordedAt | None = None
    meal_type: MealType | None = None
    servings: float | None = Field(default=None, ge=MIN_SERVINGS)
    notes: Notes | None = None


class WeightCreate(ApiModel):
    weight: float = Field(gt=0)
    date: RecordedAt
    notes: Notes | None = None


class WeightUpdate(ApiModel):
    weight: float | None = Field(default=None, gt=0)
    date: RecordedAt | None = None
    notes: Notes | None = None


class ProfileUpdate(ApiModel):
    name: NonBlankStr | None = None
    current_weight: NonNegative | None = None
    goal_weight: NonNegative | None = None
    height: NonNegative | None = None
    age: int | None = Field(default=None, ge=0)
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None
    daily_calorie_goal: NonNegative | None = None
    protein_goal: NonNegative | None = None
    carbs_goal: NonNegative | None = None
    fats_goal: NonNegative | None = None
