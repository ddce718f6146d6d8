"""Profile and TDEE endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from calorie_tracker.api.dependencies import get_container, get_current_user
from calorie_tracker.api.schemas import ProfileUpdate
from calorie_tracker.api.serializers import (
    serialize_tdee,
    serialize_user,
    success,
)
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.users import UserProfile

router = APIRouter(prefix="/api/users", tags=["users"])

MISSING_METRICS = (
    "Please update your weight, height, age and activity level to calculate TDEE"
)


@router.get("/profile")
async def get_profile(
    user: UserProfile = Depends(get_current_user),
) -> dict[str, object]:
    """Return the caller's profile."""
    return success(serialize_user(user))


@router.put("/profile")
async def update_profile(
    body: ProfileUpdate,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Update whitelisted profile fields."""
    updated = container.user_service.update_profile(user.id, body.changes())
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return success(serialize_user(updated))


@router.get("/calculate-tdee")
async def calculate_tdee(
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Estimate BMR and TDEE from the caller's body metrics."""
    result = container.user_service.calculate_tdee(user.id)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_METRICS
        )
    return success(serialize_tdee(result))
