"""Shared fixtures for event extraction tests."""

from datetime import date

import pytest

from src.event_extraction.config import EventExtractionConfig


@pytest.fixture
def event_config():
    """Default event extraction config."""
    return EventExtractionConfig()


@pytest.fixture
def wednesday():
    """2024-01-10, a Wednesday."""
    return date(2024, 1, 10)


@pytest.fixture
def sample_inputs():
    """Example phrases offered to users, with what they should yield."""
    return {
        "Urgent meeting with Sarah tomorrow at noon #work": {
            "priority": "high",
            "date": date(2024, 1, 11),
            "tags": ["work"],
            "time": None,
        },
        "Low priority team lunch next Tuesday at 2pm in Cafe": {
            "priority": "high",  # "priority" is a high keyword and is checked first
            "date": date(2024, 1, 16),
            "tags": [],
            "time": "2:00pm",
        },
        "Important doctor appointment on March 15th at 3:30pm #health": {
            "priority": "high",
            "date": date(2024, 3, 15),
            "tags": ["health"],
            "time": "3:30pm",
        },
    }
