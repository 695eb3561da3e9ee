"""Tests for X-API-KEY authentication."""

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.api.dependencies import get_calendar_service
from src.config.settings import get_settings


@pytest.fixture
def secured_client(monkeypatch, service):
    monkeypatch.setenv("API_KEYS", "key-one,key-two")
    get_settings.cache_clear()
    app = create_app()
    app.dependency_overrides[get_calendar_service] = lambda: service

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
    get_settings.cache_clear()


class TestApiKey:
    def test_missing_key(self, secured_client):
        resp = secured_client.get("/events")
        assert resp.status_code == 401
        assert "Missing API key" in resp.json()["detail"]

    def test_invalid_key(self, secured_client):
        resp = secured_client.get("/events", headers={"X-API-KEY": "wrong"})
        assert resp.status_code == 401

    def test_valid_key(self, secured_client):
        resp = secured_client.get("/events", headers={"X-API-KEY": "key-two"})
        assert resp.status_code == 200

    def test_health_is_public(self, secured_client):
        assert secured_client.get("/health").status_code == 200
