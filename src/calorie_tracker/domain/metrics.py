"""Domain models for energy expenditure estimates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CalorieRecommendation:
    """Daily calorie targets derived from TDEE."""

    maintain: int
    mild_weight_loss: int
    weight_loss: int
    extreme_weight_loss: int


@dataclass(frozen=True)
class TdeeResult:
    """Estimated resting and total daily energy expenditure."""

    tdee: int
    bmr: int
    recommendation: CalorieRecommendation
