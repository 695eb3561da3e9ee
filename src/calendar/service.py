"""In-memory calendar service.

Turns free-text input into calendar events using the extraction pipeline
and the user's defaults, and keeps them in a process-local list. Nothing
is persisted.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from datetime import date
from typing import Any

import structlog

from src.calendar.grid import build_month_grid
from src.calendar.preferences import UserSettings
from src.calendar.schemas import Event, MonthGrid
from src.event_extraction.config import EventExtractionConfig
from src.event_extraction.extractor import extract_event_info
from src.event_extraction.schemas import ExtractedEventInfo
from src.observability.metrics import get_metrics

logger = structlog.get_logger(__name__)

# Shown to the user when a date could not be detected
EXAMPLE_PHRASES: tuple[str, ...] = ("tomorrow", "next Tuesday", "March 15th")


class CalendarError(Exception):
    """Base error for calendar operations."""


class EmptyInputError(CalendarError):
    """The submitted text was empty or whitespace."""


class DateNotDetectedError(CalendarError):
    """No date could be resolved from the submitted text."""

    def __init__(self, text: str, info: ExtractedEventInfo | None = None):
        self.text = text
        self.info = info
        self.examples = list(EXAMPLE_PHRASES)
        super().__init__(
            "Could not detect a date in your input. Please try again with a "
            "clearer date mention, e.g. " + ", ".join(f'"{p}"' for p in EXAMPLE_PHRASES)
        )


class EventNotFoundError(CalendarError):
    """No event with the requested id exists."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event not found: {event_id}")


class CalendarService:
    """
    Process-local calendar backed by a list of events.

    Usage:
        service = CalendarService(clock=lambda: date(2024, 1, 10))
        event = service.add_from_text("Dentist appointment tomorrow at 3pm")
        grid = service.month_grid(2024, 1)
    """

    def __init__(
        self,
        settings: UserSettings | None = None,
        clock: Callable[[], date] | None = None,
        extraction_config: EventExtractionConfig | None = None,
    ) -> None:
        self._settings = settings or UserSettings()
        self._clock = clock or date.today
        self._extraction_config = extraction_config or EventExtractionConfig()
        self._events: list[Event] = []
        self._lock = threading.Lock()

    # ── Extraction ──────────────────────────────────────────────

    def extract(self, text: str, reference: date | None = None) -> ExtractedEventInfo:
        """Run extraction against the service clock and record metrics."""
        start = time.perf_counter()
        info = extract_event_info(
            text,
            reference or self._clock(),
            config=self._extraction_config,
        )
        get_metrics().record_extraction(info.has_date, time.perf_counter() - start)
        return info

    def add_from_text(self, text: str) -> Event:
        """
        Create an event from free text and add it to the calendar.

        Args:
            text: Input such as "Lunch with Sam next Friday at 1pm". Only the
                blank check trims it; extraction sees the raw text.

        Returns:
            The created Event.

        Raises:
            EmptyInputError: If text is blank.
            DateNotDetectedError: If no date could be resolved.
        """
        if not text.strip():
            get_metrics().record_rejection("empty")
            raise EmptyInputError("Input text is empty")

        info = self.extract(text)
        if not info.has_date:
            get_metrics().record_rejection("no_date")
            logger.info("Rejected input without a date", text_length=len(text))
            raise DateNotDetectedError(text, info)

        event = self._build_event(info)
        metrics = get_metrics()
        with self._lock:
            self._events.append(event)
            metrics.events_stored.set(len(self._events))
        metrics.events_created.inc()
        logger.info(
            "Event created",
            event_id=event.id,
            date=event.date.isoformat(),
            priority=event.priority,
        )
        return event

    def _build_event(self, info: ExtractedEventInfo) -> Event:
        settings = self._settings
        recurring = info.recurring if settings.enable_recurring_events else None
        return Event(
            title=info.title or self._extraction_config.untitled_title,
            date=info.date,
            time=info.time,
            location=info.location,
            priority=info.priority,
            tags=list(info.tags),
            recurring=recurring,
            category=info.category,
            reminder=settings.default_reminder_minutes,
            color=settings.default_event_color,
            duration=settings.default_event_duration,
        )

    # ── Event list ──────────────────────────────────────────────

    def list_events(self, include_completed: bool | None = None) -> list[Event]:
        """
        List events in insertion order.

        Args:
            include_completed: Whether to include completed events.
                Defaults to the ``show_completed`` preference.
        """
        if include_completed is None:
            include_completed = self._settings.show_completed
        with self._lock:
            events = list(self._events)
        if include_completed:
            return events
        return [e for e in events if not e.completed]

    def get_event(self, event_id: str) -> Event:
        """Get an event by id, raising EventNotFoundError if missing."""
        with self._lock:
            for event in self._events:
                if event.id == event_id:
                    return event
        raise EventNotFoundError(event_id)

    def delete_event(self, event_id: str) -> None:
        """Remove an event by id."""
        with self._lock:
            for i, event in enumerate(self._events):
                if event.id == event_id:
                    del self._events[i]
                    get_metrics().events_stored.set(len(self._events))
                    break
            else:
                raise EventNotFoundError(event_id)
        logger.info("Event deleted", event_id=event_id)

    def set_completed(self, event_id: str, completed: bool = True) -> Event:
        """Mark an event as completed (or not) and return it."""
        with self._lock:
            for event in self._events:
                if event.id == event_id:
                    event.completed = completed
                    return event
        raise EventNotFoundError(event_id)

    def events_on(self, day: date) -> list[Event]:
        """Events falling on ``day``, in insertion order."""
        return [e for e in self.list_events(include_completed=True) if e.date == day]

    def clear(self) -> None:
        """Drop every event."""
        with self._lock:
            self._events.clear()
            get_metrics().events_stored.set(0)

    # ── Views ───────────────────────────────────────────────────

    def month_grid(self, year: int, month: int) -> MonthGrid:
        """Month grid honouring the week-start, week-number and completed preferences."""
        settings = self._settings
        return build_month_grid(
            year,
            month,
            self.list_events(),
            start_week_on=settings.start_week_on,
            show_week_numbers=settings.show_week_numbers,
            today=self._clock(),
        )

    # ── Preferences ─────────────────────────────────────────────

    def get_settings(self) -> UserSettings:
        return self._settings

    def update_settings(self, **changes: Any) -> UserSettings:
        """
        Apply preference changes.

        Raises:
            pydantic.ValidationError: If a value is invalid; the current
                preferences are left unchanged.
        """
        self._settings = self._settings.merged(changes)
        logger.info("Settings updated", fields=sorted(changes))
        return self._settings
