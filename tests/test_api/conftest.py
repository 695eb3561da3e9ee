"""Shared fixtures for API tests."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.api.auth import verify_api_key
from src.api.dependencies import get_calendar_service, get_extraction_config
from src.calendar.service import CalendarService
from src.event_extraction.config import EventExtractionConfig

# 2024-01-10 is a Wednesday
TODAY = date(2024, 1, 10)


@pytest.fixture
def extraction_config() -> EventExtractionConfig:
    """Extraction config with defaults."""
    return EventExtractionConfig()


@pytest.fixture
def service(extraction_config) -> CalendarService:
    """Fresh in-memory calendar with a pinned clock."""
    return CalendarService(clock=lambda: TODAY, extraction_config=extraction_config)


@pytest.fixture
def client(service, extraction_config):
    """FastAPI TestClient with dependency overrides."""
    app = create_app()

    app.dependency_overrides[verify_api_key] = lambda: "test-key"
    app.dependency_overrides[get_calendar_service] = lambda: service
    app.dependency_overrides[get_extraction_config] = lambda: extraction_config

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
