"""Domain models for food logs and nutrient summaries."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from uuid import UUID

MealType = Literal["breakfast", "lunch", "dinner", "snack"]

MEAL_TYPES: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")

MIN_SERVINGS = 0.1


@dataclass(frozen=True)
class NutrientTotals:
    """Calories and macronutrients for a portion or a sum of portions."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0

    def __add__(self, other: "NutrientTotals") -> "NutrientTotals":
        return NutrientTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fats=self.fats + other.fats,
        )


@dataclass(frozen=True)
class FoodLog:
    """A logged portion of a food, with nutrients captured at write time."""

    id: UUID
    user_id: UUID
    food_id: UUID
    date: datetime
    meal_type: str
    servings: float
    calories: float
    protein: float
    carbs: float
    fats: float
    food_name: str
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def nutrients(self) -> NutrientTotals:
        return NutrientTotals(self.calories, self.protein, self.carbs, self.fats)


@dataclass(frozen=True)
class MealTotals:
    """Subtotal for one meal slot of a day."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class DailySummary:
    """Totals for a calendar day with a per-meal breakdown."""

    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fats: float = 0.0
    meal_breakdown: dict[str, MealTotals] = field(
        default_factory=lambda: {meal: MealTotals() for meal in MEAL_TYPES}
    )


@dataclass(frozen=True)
class RangeSummary:
    """Totals and log count across a date range."""

    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fats: float = 0.0
    count: int = 0
