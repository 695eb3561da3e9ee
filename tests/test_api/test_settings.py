"""Tests for user settings endpoints."""


class TestGetSettings:
    def test_defaults(self, client):
        resp = client.get("/settings")
        assert resp.status_code == 200
        data = resp.json()
        assert data["default_reminder_minutes"] == 15
        assert data["start_week_on"] == "monday"
        assert data["theme"]["primary_color"] == "#3b82f6"


class TestUpdateSettings:
    def test_partial_update(self, client):
        resp = client.patch("/settings", json={"time_format": "24h"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["time_format"] == "24h"
        assert data["default_reminder_minutes"] == 15

    def test_theme_partial_update(self, client):
        data = client.patch("/settings", json={"theme": {"is_dark_mode": True}}).json()
        assert data["theme"]["is_dark_mode"] is True
        assert data["theme"]["calendar_style"] == "modern"

    def test_invalid_value(self, client):
        resp = client.patch("/settings", json={"start_week_on": "friday"})
        assert resp.status_code == 422
        assert resp.json()["detail"].startswith("Invalid settings")
        assert client.get("/settings").json()["start_week_on"] == "monday"

    def test_invalid_color(self, client):
        resp = client.patch("/settings", json={"default_event_color": "red"})
        assert resp.status_code == 422

    def test_unknown_field(self, client):
        assert client.patch("/settings", json={"sparkles": True}).status_code == 422
