"""Food log and nutrient summary endpoints."""

from datetime import date, datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from calorie_tracker.api.dependencies import get_container, get_current_user
from calorie_tracker.api.schemas import FoodLogCreate, FoodLogUpdate
from calorie_tracker.api.serializers import (
    serialize_daily_summary,
    serialize_log,
    serialize_range_summary,
    success,
)
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.food_logs import MealType
from calorie_tracker.domain.users import UserProfile
from calorie_tracker.services.food_logs import (
    FoodUnavailableError,
    InvalidDateRangeError,
)

router = APIRouter(prefix="/api/logs", tags=["logs"])

LOG_NOT_FOUND = "Log not found"


@router.get("")
async def list_logs(
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    meal_type: MealType | None = Query(default=None, alias="mealType"),
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's logs, newest first."""
    logs = container.food_log_service.list_logs(
        user.id, start=start_date, end=end_date, meal_type=meal_type
    )
    return success([serialize_log(log) for log in logs])


@router.get("/daily/{day}")
async def daily_summary(
    day: date,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a day's logs with totals and a per-meal breakdown."""
    logs, summary = container.food_log_service.daily_summary(user.id, day)
    return success(
        {
            "logs": [serialize_log(log) for log in logs],
            "summary": serialize_daily_summary(summary),
        }
    )


@router.get("/summary/{start_date}/{end_date}")
async def range_summary(
    start_date: date,
    end_date: date,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return totals across an inclusive range of days."""
    try:
        summary = container.food_log_service.range_summary(
            user.id, start_date, end_date
        )
    except InvalidDateRangeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return success(serialize_range_summary(summary))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_log(
    body: FoodLogCreate,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log servings of one of the caller's foods."""
    log = container.food_log_service.create_log(
        user.id,
        food_id=body.food_id,
        logged_on=body.date,
        meal_type=body.meal_type,
        servings=body.servings,
        notes=body.notes,
    )
    if log is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Food not found"
        )
    return success(serialize_log(log))


@router.put("/{log_id}")
async def update_log(
    log_id: UUID,
    body: FoodLogUpdate,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Update a log; changing servings rescales its nutrients."""
    try:
        log = container.food_log_service.update_log(user.id, log_id, body.changes())
    except FoodUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    if log is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=LOG_NOT_FOUND)
    return success(serialize_log(log))


@router.delete("/{log_id}")
async def delete_log(
    log_id: UUID,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    if not container.food_log_service.delete_log(user.id, log_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=LOG_NOT_FOUND)
    return success(None, message="Log deleted successfully")
