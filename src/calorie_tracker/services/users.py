"""User profile business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.metrics import TdeeResult
from calorie_tracker.domain.users import PROFILE_FIELDS, UserCredentials, UserProfile
from calorie_tracker.services.metrics import calculate_tdee

logger = logging.getLogger(__name__)

_NULLABLE_FIELDS = frozenset(
    {"current_weight", "goal_weight", "height", "age", "activity_level"}
)


class UserRepository(Protocol):
    """Persistence interface for user accounts."""

    def get_by_id(self, user_id: UUID) -> UserProfile | None:
        """Return the user with the given id, if present."""

    def get_credentials(self, email: str) -> UserCredentials | None:
        """Return a user and password hash by lowercased email."""

    def create_user(self, email: str, name: str, password_hash: str) -> UserProfile:
        """Create and return a new user."""

    def update_profile(
        self, user_id: UUID, payload: dict[str, object]
    ) -> UserProfile | None:
        """Update profile columns and return the user."""


@dataclass
class UserService:
    """Application service for profile reads, updates and TDEE estimates."""

    repository: UserRepository

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile."""
        return self.repository.get_by_id(user_id)

    def update_profile(
        self, user_id: UUID, changes: dict[str, object]
    ) -> UserProfile | None:
        """Apply whitelisted profile changes; other keys are ignored."""
        payload = {
            key: value
            for key, value in changes.items()
            if key in PROFILE_FIELDS
            and (value is not None or key in _NULLABLE_FIELDS)
        }
        if not payload:
            return self.repository.get_by_id(user_id)
        logger.info(
            "Profile updated",
            extra={"user_id": str(user_id), "fields": sorted(payload)},
        )
        return self.repository.update_profile(user_id, payload)

    def calculate_tdee(self, user_id: UUID) -> TdeeResult | None:
        """Estimate TDEE; None when the profile lacks the required metrics."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            return None
        return calculate_tdee(user)
