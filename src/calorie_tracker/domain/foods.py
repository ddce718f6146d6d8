"""Domain models for the user food catalog."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal
from uuid import UUID

FoodCategory = Literal[
    "protein",
    "carbs",
    "fats",
    "vegetables",
    "fruits",
    "dairy",
    "snacks",
    "drinks",
    "other",
]

FOOD_CATEGORIES: tuple[str, ...] = (
    "protein",
    "carbs",
    "fats",
    "vegetables",
    "fruits",
    "dairy",
    "snacks",
    "drinks",
    "other",
)


@dataclass(frozen=True)
class Food:
    """Nutrition values for one serving of a food, owned by a user."""

    id: UUID
    user_id: UUID
    name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    serving_size: float = 100.0
    serving_unit: str = "g"
    barcode: str | None = None
    image_url: str | None = None
    category: str = "other"
    is_public: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class FoodPage:
    """A page of foods with the total number of matches."""

    items: list[Food]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold every match."""
        if self.limit <= 0:
            return 0
        return -(-self.total // self.limit)
