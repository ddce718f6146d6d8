"""Food logging and nutrient aggregation."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.food_logs import (
    MEAL_TYPES,
    DailySummary,
    FoodLog,
    MealTotals,
    NutrientTotals,
    RangeSummary,
)
from calorie_tracker.domain.foods import Food
from calorie_tracker.services.foods import FoodRepository

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59, 999000)

_NULLABLE_FIELDS = frozenset({"notes"})


class FoodUnavailableError(Exception):
    """Raised when a log's referenced food is needed but no longer exists."""


class InvalidDateRangeError(ValueError):
    """Raised when a range starts after it ends."""


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def create_log(self, user_id: UUID, payload: dict[str, object]) -> FoodLog:
        """Create a food log and return it."""

    def get_log(self, user_id: UUID, log_id: UUID) -> FoodLog | None:
        """Return a log owned by the user, if present."""

    def list_logs(
        self,
        user_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
        meal_type: str | None = None,
    ) -> list[FoodLog]:
        """Return logs with date in [start, end], newest first."""

    def update_log(
        self, user_id: UUID, log_id: UUID, payload: dict[str, object]
    ) -> FoodLog | None:
        """Update a log owned by the user and return it."""

    def delete_log(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete a log owned by the user; return False when absent."""

    def summarize_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> RangeSummary:
        """Sum nutrients and count logs with date in [start, end]."""


def scale_log(food: Food, servings: float) -> NutrientTotals:
    """Scale a food's per-serving nutrients by a serving multiplier."""
    return NutrientTotals(
        calories=food.calories * servings,
        protein=food.protein * servings,
        carbs=food.carbs * servings,
        fats=food.fats * servings,
    )


def day_window(day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """Return local midnight through 23:59:59.999 for a calendar day."""
    return (
        datetime.combine(day, time.min, tzinfo=tz),
        datetime.combine(day, END_OF_DAY, tzinfo=tz),
    )


def start_of_day(value: datetime, tz: tzinfo) -> datetime:
    """Drop the time of day, interpreting naive values in the local zone."""
    local = value.replace(tzinfo=tz) if value.tzinfo is None else value.astimezone(tz)
    return datetime.combine(local.date(), time.min, tzinfo=tz)


def summarize_day(logs: list[FoodLog]) -> DailySummary:
    """Sum logs into day totals and a breakdown covering every meal slot."""
    totals = NutrientTotals()
    breakdown = {meal: MealTotals() for meal in MEAL_TYPES}
    for log in logs:
        totals = totals + log.nutrients
        meal = breakdown[log.meal_type]
        breakdown[log.meal_type] = MealTotals(
            calories=meal.calories + log.calories,
            protein=meal.protein + log.protein,
            carbs=meal.carbs + log.carbs,
            fats=meal.fats + log.fats,
            count=meal.count + 1,
        )
    return DailySummary(
        total_calories=totals.calories,
        total_protein=totals.protein,
        total_carbs=totals.carbs,
        total_fats=totals.fats,
        meal_breakdown=breakdown,
    )


@dataclass
class FoodLogService:
    """Service that snapshots food nutrients into logs and summarizes them."""

    repository: FoodLogRepository
    food_repository: FoodRepository
    timezone: tzinfo

    def create_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        logged_on: datetime,
        meal_type: str,
        servings: float = 1.0,
        notes: str | None = None,
    ) -> FoodLog | None:
        """Log servings of one of the user's foods; None if the food is unknown."""
        food = self.food_repository.get_food(user_id, food_id)
        if food is None:
            return None
        payload: dict[str, object] = {
            "food_id": food.id,
            "date": start_of_day(logged_on, self.timezone),
            "meal_type": meal_type,
            "servings": servings,
            "food_name": food.name,
            "notes": notes,
            **_nutrient_columns(scale_log(food, servings)),
        }
        log = self.repository.create_log(user_id, payload)
        logger.info(
            "Food log created", extra={"user_id": str(user_id), "log_id": str(log.id)}
        )
        return log

    def get_log(self, user_id: UUID, log_id: UUID) -> FoodLog | None:
        """Return one of the user's logs."""
        return self.repository.get_log(user_id, log_id)

    def list_logs(
        self,
        user_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
        meal_type: str | None = None,
    ) -> list[FoodLog]:
        """Return the user's logs, optionally filtered by date and meal."""
        return self.repository.list_logs(
            user_id,
            start=self._localize(start),
            end=self._localize(end),
            meal_type=meal_type,
        )

    def update_log(
        self, user_id: UUID, log_id: UUID, changes: dict[str, object]
    ) -> FoodLog | None:
        """Apply changes to a log, rescaling nutrients when servings change.

        Nutrients are recomputed from the referenced food's current values.
        If that food has been deleted the update is rejected as a whole.
        """
        current = self.repository.get_log(user_id, log_id)
        if current is None:
            return None
        payload = {
            key: value
            for key, value in changes.items()
            if value is not None or key in _NULLABLE_FIELDS
        }
        if "date" in payload:
            payload["date"] = start_of_day(payload["date"], self.timezone)
        servings = payload.get("servings")
        if servings is not None and servings != current.servings:
            food = self.food_repository.get_food(user_id, current.food_id)
            if food is None:
                raise FoodUnavailableError(
                    "The food for this log no longer exists; servings cannot change"
                )
            payload.update(_nutrient_columns(scale_log(food, float(servings))))
        if not payload:
            return current
        updated = self.repository.update_log(user_id, log_id, payload)
        logger.info(
            "Food log updated",
            extra={"user_id": str(user_id), "log_id": str(log_id)},
        )
        return updated

    def delete_log(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete one of the user's logs."""
        return self.repository.delete_log(user_id, log_id)

    def daily_summary(
        self, user_id: UUID, day: date
    ) -> tuple[list[FoodLog], DailySummary]:
        """Return a day's logs in meal order together with their totals."""
        start, end = day_window(day, self.timezone)
        logs = self.repository.list_logs(user_id, start=start, end=end)
        ordered = sorted(
            logs,
            key=lambda log: (
                MEAL_TYPES.index(log.meal_type),
                log.created_at or log.date,
            ),
        )
        return ordered, summarize_day(ordered)

    def range_summary(
        self, user_id: UUID, start_day: date, end_day: date
    ) -> RangeSummary:
        """Return totals for every log between two calendar days inclusive."""
        if start_day > end_day:
            raise InvalidDateRangeError("startDate must not be after endDate")
        start, _ = day_window(start_day, self.timezone)
        _, end = day_window(end_day, self.timezone)
        return self.repository.summarize_range(user_id, start, end)

    def _localize(self, value: datetime | None) -> datetime | None:
        if value is None or value.tzinfo is not None:
            return value
        return value.replace(tzinfo=self.timezone)


def _nutrient_columns(nutrients: NutrientTotals) -> dict[str, object]:
    return {
        "calories": nutrients.calories,
        "protein": nutrients.protein,
        "carbs": nutrients.carbs,
        "fats": nutrients.fats,
    }
