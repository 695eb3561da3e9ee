"""Data models for the calendar module.

Provides the Event dataclass assembled from extraction results, plus the
CalendarDay / MonthGrid views used to lay events out month by month.
"""

import datetime as dt
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from src.event_extraction.schemas import Priority, Recurrence

# Event card palette keyed by priority; anything else renders blue
PRIORITY_COLORS: dict[str, str] = {
    "high": "red",
    "medium": "yellow",
    "low": "green",
}
DEFAULT_PRIORITY_COLOR = "blue"


def priority_color(priority: str | None) -> str:
    """Color family used to render an event of the given priority."""
    return PRIORITY_COLORS.get(priority or "", DEFAULT_PRIORITY_COLOR)


@dataclass
class Event:
    """
    A calendar event held in memory for the lifetime of the process.

    Built by CalendarService from an ExtractedEventInfo plus the user's
    defaults. ``completed``, ``attendees``, ``notes`` and ``description``
    are never filled in by extraction.

    Attributes:
        title: Display title.
        date: Day the event falls on.
        id: Generated identifier (UUID4).
        time: Canonical clock time such as "3:00pm".
        location: Free-text location.
        description: Longer free-text description.
        color: Hex color from user settings.
        priority: low/medium/high.
        tags: Hashtags without the leading '#'.
        reminder: Minutes before the event to remind.
        completed: Whether the user ticked the event off.
        recurring: Recurrence period, None for one-off events.
        attendees: Names of attendees.
        notes: Free-text notes.
        category: Category name.
        duration: Length in minutes.
    """

    title: str
    date: dt.date
    id: str = field(default_factory=lambda: str(uuid4()))
    time: str | None = None
    location: str | None = None
    description: str | None = None
    color: str | None = None
    priority: Priority = "medium"
    tags: list[str] = field(default_factory=list)
    reminder: int = 15
    completed: bool = False
    recurring: Recurrence | None = None
    attendees: list[str] = field(default_factory=list)
    notes: str | None = None
    category: str | None = None
    duration: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert event to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date.isoformat(),
            "time": self.time,
            "location": self.location,
            "description": self.description,
            "color": self.color,
            "priority": self.priority,
            "tags": list(self.tags),
            "reminder": self.reminder,
            "completed": self.completed,
            "recurring": self.recurring,
            "attendees": list(self.attendees),
            "notes": self.notes,
            "category": self.category,
            "duration": self.duration,
        }


@dataclass
class CalendarDay:
    """One day cell of a month grid."""

    date: dt.date
    events: list[Event] = field(default_factory=list)
    is_today: bool = False
    is_weekend: bool = False


@dataclass
class MonthGrid:
    """
    Events for one month, as a flat day list and as 7-day rows.

    ``weeks`` rows start on the configured first weekday; cells before the
    1st and after the last day of the month are None. ``week_numbers``
    holds the ISO week number of each row, or is empty when week numbers
    are switched off.
    """

    year: int
    month: int
    days: list[CalendarDay]
    weeks: list[list[CalendarDay | None]]
    week_numbers: list[int] = field(default_factory=list)

    @property
    def event_count(self) -> int:
        return sum(len(day.events) for day in self.days)

    def to_dict(self) -> dict[str, Any]:
        """Convert grid to dictionary for JSON serialization."""

        def _day(day: CalendarDay | None) -> dict[str, Any] | None:
            if day is None:
                return None
            return {
                "date": day.date.isoformat(),
                "is_today": day.is_today,
                "is_weekend": day.is_weekend,
                "events": [e.to_dict() for e in day.events],
            }

        return {
            "year": self.year,
            "month": self.month,
            "event_count": self.event_count,
            "week_numbers": list(self.week_numbers),
            "weeks": [[_day(d) for d in week] for week in self.weeks],
        }
