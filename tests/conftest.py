"""Pytest fixtures for smart-calendar tests."""

from datetime import date

import pytest

from src.calendar.preferences import UserSettings
from src.calendar.service import CalendarService
from src.config.settings import Settings


# 2024-01-10 is a Wednesday
REFERENCE_DATE = date(2024, 1, 10)


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(
        environment="development",
        log_level="DEBUG",
        api_keys=None,
        rate_limit_enabled=False,
    )


@pytest.fixture
def reference_date() -> date:
    """Canonical 'today' for relative date resolution (a Wednesday)."""
    return REFERENCE_DATE


@pytest.fixture
def user_settings() -> UserSettings:
    """Default user preferences."""
    return UserSettings()


@pytest.fixture
def calendar_service(user_settings, reference_date) -> CalendarService:
    """CalendarService whose clock is pinned to the reference date."""
    return CalendarService(settings=user_settings, clock=lambda: reference_date)
