"""Convert domain models into camelCase JSON payloads."""

from datetime import datetime

from calorie_tracker.domain.food_logs import DailySummary, FoodLog, RangeSummary
from calorie_tracker.domain.foods import Food, FoodPage
from calorie_tracker.domain.metrics import TdeeResult
from calorie_tracker.domain.users import UserProfile
from calorie_tracker.domain.weight import WeightEntry, WeightTrend


def success(data: object, **extra: object) -> dict[str, object]:
    """Wrap a payload in the success envelope."""
    return {"success": True, "data": data, **extra}


def serialize_user(user: UserProfile) -> dict[str, object]:
    return {
        "id": str(user.id),
        "email": user.email,
        "name": user.name,
        "currentWeight": user.current_weight,
        "goalWeight": user.goal_weight,
        "height": user.height,
        "age": user.age,
        "gender": user.gender,
        "activityLevel": user.activity_level,
        "dailyCalorieGoal": user.daily_calorie_goal,
        "proteinGoal": user.protein_goal,
        "carbsGoal": user.carbs_goal,
        "fatsGoal": user.fats_goal,
        "createdAt": _isoformat(user.created_at),
        "updatedAt": _isoformat(user.updated_at),
    }


def serialize_food(food: Food) -> dict[str, object]:
    return {
        "id": str(food.id),
        "userId": str(food.user_id),
        "name": food.name,
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fats": food.fats,
        "servingSize": food.serving_size,
        "servingUnit": food.serving_unit,
        "barcode": food.barcode,
        "imageUrl": food.image_url,
        "category": food.category,
        "isPublic": food.is_public,
        "createdAt": _isoformat(food.created_at),
        "updatedAt": _isoformat(food.updated_at),
    }


def serialize_pagination(page: FoodPage) -> dict[str, object]:
    return {
        "currentPage": page.page,
        "totalPages": page.total_pages,
        "totalItems": page.total,
    }


def serialize_log(log: FoodLog) -> dict[str, object]:
    return {
        "id": str(log.id),
        "userId": str(log.user_id),
        "foodId": str(log.food_id),
        "date": log.date.isoformat(),
        "mealType": log.meal_type,
        "servings": log.servings,
        "calories": log.calories,
        "protein": log.protein,
        "carbs": log.carbs,
        "fats": log.fats,
        "foodName": log.food_name,
        "notes": log.notes,
        "createdAt": _isoformat(log.created_at),
        "updatedAt": _isoformat(log.updated_at),
    }


def serialize_daily_summary(summary: DailySummary) -> dict[str, object]:
    return {
        "totalCalories": summary.total_calories,
        "totalProtein": summary.total_protein,
        "totalCarbs": summary.total_carbs,
        "totalFats": summary.total_fats,
        "mealBreakdown": {
            meal: {
                "calories": totals.calories,
                "protein": totals.protein,
                "carbs": totals.carbs,
                "fats": totals.fats,
                "count": totals.count,
            }
            for meal, totals in summary.meal_breakdown.items()
        },
    }


def serialize_range_summary(summary: RangeSummary) -> dict[str, object]:
    return {
        "totalCalories": summary.total_calories,
        "totalProtein": summary.total_protein,
        "totalCarbs": summary.total_carbs,
        "totalFats": summary.total_fats,
        "count": summary.count,
    }


def serialize_weight(entry: WeightEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "userId": str(entry.user_id),
        "weight": entry.weight,
        "date": entry.date.isoformat(),
        "notes": entry.notes,
        "createdAt": _isoformat(entry.created_at),
        "updatedAt": _isoformat(entry.updated_at),
    }


def serialize_trend(trend: WeightTrend) -> dict[str, object]:
    return {
        "entries": [serialize_weight(entry) for entry in trend.entries],
        "stats": {
            "count": trend.stats.count,
            "average": trend.stats.average,
            "change": trend.stats.change,
            "changePercentage": trend.stats.change_percentage,
        },
    }


def serialize_tdee(result: TdeeResult) -> dict[str, object]:
    return {
        "tdee": result.tdee,
        "bmr": result.bmr,
        "recommendation": {
            "maintain": result.recommendation.maintain,
            "mildWeightLoss": result.recommendation.mild_weight_loss,
            "weightLoss": result.recommendation.weight_loss,
            "extremeWeightLoss": result.recommendation.extreme_weight_loss,
        },
    }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
