"""Schema definitions for extracted event information.

Provides the Priority/Recurrence literals, the category vocabulary and
the ExtractedEventInfo dataclass returned by the extraction pipeline.
"""

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Literal

Priority = Literal["low", "medium", "high"]

Recurrence = Literal["daily", "weekly", "monthly", "yearly"]

# Tested in this order; the first substring hit wins.
CATEGORIES: tuple[str, ...] = (
    "work",
    "personal",
    "health",
    "social",
    "family",
    "shopping",
    "travel",
    "education",
    "finance",
    "other",
)


@dataclass
class ExtractedEventInfo:
    """
    Structured event attributes extracted from one line of free text.

    Every attribute except ``priority`` and ``tags`` may be absent (None),
    which means it could not be determined from the input. A missing
    ``date`` is the signal that the text is not actionable as an event.

    Attributes:
        title: Human-readable label.
        date: Absolute calendar date, without a time-of-day component.
        time: Clock time in canonical form, e.g. "3:00pm".
        location: Trimmed free-text location span.
        priority: One of low/medium/high.
        tags: Hashtags in order of first occurrence, without duplicates.
        recurring: Recurrence period, None for one-off events.
        category: Entry from CATEGORIES, or None.
    """

    title: str | None = None
    date: dt.date | None = None
    time: str | None = None
    location: str | None = None
    priority: Priority = "medium"
    tags: list[str] = field(default_factory=list)
    recurring: Recurrence | None = None
    category: str | None = None

    @property
    def has_date(self) -> bool:
        """Whether a date was resolved (the caller's acceptance test)."""
        return self.date is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "date": self.date.isoformat() if self.date else None,
            "time": self.time,
            "location": self.location,
            "priority": self.priority,
            "tags": list(self.tags),
            "recurring": self.recurring,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtractedEventInfo":
        """
        Create ExtractedEventInfo from dictionary.

        Args:
            data: Dictionary with extraction fields.

        Returns:
            ExtractedEventInfo instance.
        """
        raw_date = data.get("date")
        if isinstance(raw_date, str):
            raw_date = dt.date.fromisoformat(raw_date)

        return cls(
            title=data.get("title"),
            date=raw_date,
            time=data.get("time"),
            location=data.get("location"),
            priority=data.get("priority", "medium"),
            tags=list(data.get("tags") or []),
            recurring=data.get("recurring"),
            category=data.get("category"),
        )
