"""Weight history endpoints."""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from calorie_tracker.api.dependencies import get_container, get_current_user
from calorie_tracker.api.schemas import WeightCreate, WeightUpdate
from calorie_tracker.api.serializers import (
    serialize_trend,
    serialize_weight,
    success,
)
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.users import UserProfile
from calorie_tracker.services.weight import DEFAULT_HISTORY_LIMIT, DEFAULT_TREND_DAYS

router = APIRouter(prefix="/api/weight", tags=["weight"])

ENTRY_NOT_FOUND = "Weight entry not found"


@router.get("")
async def list_weights(
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    limit: int = Query(default=DEFAULT_HISTORY_LIMIT, ge=1),
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's weight history, newest first."""
    entries = container.weight_service.list_entries(
        user.id, start=start_date, end=end_date, limit=limit
    )
    return success([serialize_weight(entry) for entry in entries])


@router.get("/latest")
async def latest_weight(
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    entry = container.weight_service.latest(user.id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No weight entries found"
        )
    return success(serialize_weight(entry))


@router.get("/trend")
async def weight_trend(
    days: int = Query(default=DEFAULT_TREND_DAYS, ge=1),
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return recent weights with average and net change."""
    trend = container.weight_service.trend(user.id, days)
    return success(serialize_trend(trend))


@router.get("/trend/{days}")
async def weight_trend_for_days(
    days: int = Path(ge=1),
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    return await weight_trend(days=days, user=user, container=container)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_weight(
    body: WeightCreate,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    entry = container.weight_service.create_entry(
        user.id, weight=body.weight, recorded_on=body.date, notes=body.notes
    )
    return success(serialize_weight(entry))


@router.put("/{entry_id}")
async def update_weight(
    entry_id: UUID,
    body: WeightUpdate,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    entry = container.weight_service.update_entry(user.id, entry_id, body.changes())
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=ENTRY_NOT_FOUND
        )
    return success(serialize_weight(entry))


@router.delete("/{entry_id}")
async def delete_weight(
    entry_id: UUID,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    if not container.weight_service.delete_entry(user.id, entry_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=ENTRY_NOT_FOUND
        )
    return success(None, message="Weight entry deleted successfully")
