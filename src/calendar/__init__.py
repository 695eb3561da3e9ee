"""
In-memory calendar built on the event extraction pipeline.

Components:
- CalendarService: Event list, text-to-event creation, month grid
- Event: A calendar event assembled from extraction results
- MonthGrid / CalendarDay: Month layout of events
- UserSettings / ThemeSettings: User preferences
- CalendarError and subclasses: Rejections surfaced to callers
"""

from src.calendar.preferences import ThemeSettings, UserSettings
from src.calendar.schemas import CalendarDay, Event, MonthGrid, priority_color
from src.calendar.service import (
    EXAMPLE_PHRASES,
    CalendarError,
    CalendarService,
    DateNotDetectedError,
    EmptyInputError,
    EventNotFoundError,
)

__all__ = [
    "EXAMPLE_PHRASES",
    "CalendarDay",
    "CalendarError",
    "CalendarService",
    "DateNotDetectedError",
    "EmptyInputError",
    "Event",
    "EventNotFoundError",
    "MonthGrid",
    "ThemeSettings",
    "UserSettings",
    "priority_color",
]
