"""Energy expenditure estimates from a user's body metrics."""

import math
from types import MappingProxyType

from calorie_tracker.domain.metrics import CalorieRecommendation, TdeeResult
from calorie_tracker.domain.users import UserProfile

ACTIVITY_MULTIPLIERS = MappingProxyType(
    {
        "sedentary": 1.2,
        "light": 1.375,
        "moderate": 1.55,
        "active": 1.725,
        "very_active": 1.9,
    }
)

MILD_DEFICIT = 250
STANDARD_DEFICIT = 500
EXTREME_DEFICIT = 1000


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def has_body_metrics(user: UserProfile) -> bool:
    """Return True when weight, height and age are all set and non-zero."""
    return bool(user.current_weight and user.height and user.age)


def calculate_bmr(user: UserProfile) -> float | None:
    """Mifflin-St Jeor resting energy expenditure in kcal/day."""
    if not has_body_metrics(user):
        return None
    base = 10 * user.current_weight + 6.25 * user.height - 5 * user.age
    if user.gender == "male":
        return base + 5
    return base - 161


def calculate_tdee(user: UserProfile) -> TdeeResult | None:
    """Return TDEE with calorie targets, or None when inputs are incomplete."""
    bmr = calculate_bmr(user)
    if bmr is None:
        return None
    multiplier = ACTIVITY_MULTIPLIERS.get(user.activity_level or "")
    if multiplier is None:
        return None
    tdee = round_half_up(bmr * multiplier)
    return TdeeResult(
        tdee=tdee,
        bmr=round_half_up(bmr),
        recommendation=CalorieRecommendation(
            maintain=tdee,
            mild_weight_loss=tdee - MILD_DEFICIT,
            weight_loss=tdee - STANDARD_DEFICIT,
            extreme_weight_loss=tdee - EXTREME_DEFICIT,
        ),
    )
