"""Dependency container wiring for the application."""

from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from calorie_tracker.adapters.security import JoseTokenCodec, PasslibPasswordHasher
from calorie_tracker.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from calorie_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from calorie_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from calorie_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from calorie_tracker.config import Settings
from calorie_tracker.services.auth import AuthService
from calorie_tracker.services.food_logs import FoodLogService
from calorie_tracker.services.foods import FoodService
from calorie_tracker.services.users import UserService
from calorie_tracker.services.weight import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    user_service: UserService
    food_service: FoodService
    food_log_service: FoodLogService
    weight_service: WeightService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    food_log_repository = SupabaseFoodLogRepository(supabase_client)
    weight_repository = SupabaseWeightRepository(supabase_client)
    tz = resolved_settings.tzinfo

    auth_service = AuthService(
        repository=user_repository,
        password_hasher=PasslibPasswordHasher(),
        token_codec=JoseTokenCodec(
            secret=resolved_settings.jwt_secret,
            algorithm=resolved_settings.jwt_algorithm,
            ttl=timedelta(days=resolved_settings.token_ttl_days),
        ),
    )

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        user_service=UserService(user_repository),
        food_service=FoodService(food_repository),
        food_log_service=FoodLogService(
            repository=food_log_repository,
            food_repository=food_repository,
            timezone=tz,
        ),
        weight_service=WeightService(repository=weight_repository, timezone=tz),
    )
