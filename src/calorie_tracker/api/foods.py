"""Food catalog endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from calorie_tracker.api.dependencies import get_container, get_current_user
from calorie_tracker.api.schemas import FoodCreate, FoodUpdate
from calorie_tracker.api.serializers import (
    serialize_food,
    serialize_pagination,
    success,
)
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.foods import FoodCategory
from calorie_tracker.domain.users import UserProfile

router = APIRouter(prefix="/api/foods", tags=["foods"])

FOOD_NOT_FOUND = "Food not found"


@router.get("")
async def list_foods(  # noqa: PLR0913
    search: str | None = None,
    category: FoodCategory | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1),
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a page of the caller's foods, newest first."""
    result = container.food_service.list_foods(
        user.id, search=search, category=category, page=page, limit=limit
    )
    return success(
        [serialize_food(food) for food in result.items],
        pagination=serialize_pagination(result),
    )


@router.get("/{food_id}")
async def get_food(
    food_id: UUID,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    food = container.food_service.get_food(user.id, food_id)
    if food is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=FOOD_NOT_FOUND
        )
    return success(serialize_food(food))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(
    body: FoodCreate,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    food = container.food_service.create_food(user.id, body.model_dump())
    return success(serialize_food(food))


@router.put("/{food_id}")
async def update_food(
    food_id: UUID,
    body: FoodUpdate,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Update a food; logs created from it keep their recorded values."""
    food = container.food_service.update_food(user.id, food_id, body.changes())
    if food is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=FOOD_NOT_FOUND
        )
    return success(serialize_food(food))


@router.delete("/{food_id}")
async def delete_food(
    food_id: UUID,
    user: UserProfile = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    if not container.food_service.delete_food(user.id, food_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=FOOD_NOT_FOUND
        )
    return success(None, message="Food deleted successfully")
