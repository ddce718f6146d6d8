"""Tests for container wiring and settings."""

import pytest
from pydantic import ValidationError

from calorie_tracker.config import Settings
from calorie_tracker.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.food_log_service is not None
    assert container.weight_service.timezone == settings.tzinfo
    assert container.auth_service.token_codec.secret == "test-secret"


def test_settings_reject_unknown_timezone(settings: Settings) -> None:
    with pytest.raises(ValidationError):
        Settings(
            supabase_url=settings.supabase_url,
            supabase_service_key=settings.supabase_service_key,
            jwt_secret=settings.jwt_secret,
            timezone="Mars/Olympus_Mons",
        )


def test_settings_defaults(settings: Settings) -> None:
    assert settings.jwt_algorithm == "HS256"
    assert settings.token_ttl_days == 30
    assert settings.timezone == "UTC"
