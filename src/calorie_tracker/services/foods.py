"""Services for managing the user food catalog."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.foods import Food, FoodPage

logger = logging.getLogger(__name__)

_NULLABLE_FIELDS = frozenset({"barcode", "image_url"})


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> Food:
        """Create a food owned by the user and return it."""

    def get_food(self, user_id: UUID, food_id: UUID) -> Food | None:
        """Return a food owned by the user, if present."""

    def list_foods(
        self,
        user_id: UUID,
        search: str | None,
        category: str | None,
        offset: int,
        limit: int,
    ) -> tuple[list[Food], int]:
        """Return one page of foods, newest first, and the total match count."""

    def update_food(
        self, user_id: UUID, food_id: UUID, payload: dict[str, object]
    ) -> Food | None:
        """Update a food owned by the user and return it."""

    def delete_food(self, user_id: UUID, food_id: UUID) -> bool:
        """Delete a food owned by the user; return False when absent."""


@dataclass
class FoodService:
    """Application service for food catalog operations."""

    repository: FoodRepository

    def list_foods(
        self,
        user_id: UUID,
        search: str | None = None,
        category: str | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> FoodPage:
        """Search the user's foods by name and category, one page at a time."""
        query = search.strip() if search else None
        items, total = self.repository.list_foods(
            user_id,
            search=query or None,
            category=category,
            offset=(page - 1) * limit,
            limit=limit,
        )
        return FoodPage(items=items, page=page, limit=limit, total=total)

    def get_food(self, user_id: UUID, food_id: UUID) -> Food | None:
        """Return one of the user's foods."""
        return self.repository.get_food(user_id, food_id)

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> Food:
        """Add a food to the user's catalog."""
        food = self.repository.create_food(user_id, payload)
        logger.info(
            "Food created", extra={"user_id": str(user_id), "food_id": str(food.id)}
        )
        return food

    def update_food(
        self, user_id: UUID, food_id: UUID, changes: dict[str, object]
    ) -> Food | None:
        """Update one of the user's foods. Existing logs keep their snapshot."""
        payload = {
            key: value
            for key, value in changes.items()
            if value is not None or key in _NULLABLE_FIELDS
        }
        if not payload:
            return self.repository.get_food(user_id, food_id)
        return self.repository.update_food(user_id, food_id, payload)

    def delete_food(self, user_id: UUID, food_id: UUID) -> bool:
        """Remove a food; logs that referenced it are left untouched."""
        deleted = self.repository.delete_food(user_id, food_id)
        if deleted:
            logger.info(
                "Food deleted",
                extra={"user_id": str(user_id), "food_id": str(food_id)},
            )
        return deleted
