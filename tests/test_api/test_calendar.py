"""Tests for the month grid endpoint."""


class TestMonthGrid:
    def test_empty_month(self, client):
        resp = client.get("/calendar/2024/1")
        assert resp.status_code == 200
        data = resp.json()
        assert data["year"] == 2024
        assert data["event_count"] == 0
        assert data["week_numbers"] == [1, 2, 3, 4, 5]
        assert all(len(week) == 7 for week in data["weeks"])

    def test_events_and_flags(self, client):
        client.post("/events", json={"text": "Dentist tomorrow at 3pm"})
        data = client.get("/calendar/2024/1").json()

        assert data["event_count"] == 1
        # Monday-first rows: Jan 11 is row 1, column 3
        cell = data["weeks"][1][3]
        assert cell["date"] == "2024-01-11"
        assert cell["events"][0]["time"] == "3:00pm"
        assert data["weeks"][1][2]["is_today"] is True

    def test_sunday_start(self, client):
        client.patch("/settings", json={"start_week_on": "sunday"})
        data = client.get("/calendar/2024/1").json()
        assert data["weeks"][0][0] is None
        assert data["weeks"][0][1]["date"] == "2024-01-01"

    def test_week_numbers_off(self, client):
        client.patch("/settings", json={"show_week_numbers": False})
        assert client.get("/calendar/2024/1").json()["week_numbers"] == []

    def test_invalid_month(self, client):
        assert client.get("/calendar/2024/13").status_code == 422
        assert client.get("/calendar/2024/0").status_code == 422
