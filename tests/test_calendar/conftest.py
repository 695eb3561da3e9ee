"""Fixtures for calendar tests."""

from datetime import date

import pytest

from src.calendar.schemas import Event


@pytest.fixture
def make_event():
    """Factory for events on a given day."""

    def _make(day: date, title: str = "Event", **kwargs) -> Event:
        return Event(title=title, date=day, **kwargs)

    return _make
