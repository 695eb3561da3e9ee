"""
Request and response models for the calendar API.
"""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Response model for errors."""

    detail: str = Field(
        ...,
        description="Error message",
    )
    error_type: str = Field(
        default="error",
        description="Error type",
    )


class DateNotDetectedResponse(ErrorResponse):
    """Response model for input rejected because no date was found."""

    error_type: str = "date_not_detected"
    examples: list[str] = Field(
        default_factory=list,
        description="Date phrases the extractor understands",
    )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")
    events_stored: int = Field(..., description="Events currently held in memory")


# Extraction models


class ExtractRequest(BaseModel):
    """Request model for the extraction playground."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=10_000,
        description="Free text to extract event details from",
    )
    reference_date: dt.date | None = Field(
        default=None,
        description="Date treated as today for relative phrases (defaults to today)",
    )


class ExtractedEventResponse(BaseModel):
    """Response model for extracted event details."""

    title: str | None = None
    date: dt.date | None = None
    time: str | None = None
    location: str | None = None
    priority: Literal["low", "medium", "high"] = "medium"
    tags: list[str] = Field(default_factory=list)
    recurring: Literal["daily", "weekly", "monthly", "yearly"] | None = None
    category: str | None = None
    has_date: bool = Field(..., description="Whether the text is actionable as an event")
    latency_ms: float = Field(..., description="Processing latency in milliseconds")


# Event models


class CreateEventRequest(BaseModel):
    """Request model for creating an event from text."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=10_000,
        description="Free text such as 'Lunch with Sam next Friday at 1pm'",
    )


class UpdateEventRequest(BaseModel):
    """Request model for updating an event."""

    completed: bool = Field(..., description="Completion flag")


class EventResponse(BaseModel):
    """Response model for a calendar event."""

    id: str
    title: str
    date: dt.date
    time: str | None = None
    location: str | None = None
    description: str | None = None
    color: str | None = None
    priority: Literal["low", "medium", "high"]
    priority_color: str
    tags: list[str] = Field(default_factory=list)
    reminder: int
    completed: bool = False
    recurring: Literal["daily", "weekly", "monthly", "yearly"] | None = None
    attendees: list[str] = Field(default_factory=list)
    notes: str | None = None
    category: str | None = None
    duration: int | None = None


class EventListResponse(BaseModel):
    """Response model for listing events."""

    events: list[EventResponse]
    total: int


# Calendar models


class CalendarDayResponse(BaseModel):
    """One day cell in a month grid."""

    date: dt.date
    is_today: bool
    is_weekend: bool
    events: list[EventResponse]


class MonthGridResponse(BaseModel):
    """Response model for a month grid."""

    year: int
    month: int
    event_count: int
    week_numbers: list[int]
    weeks: list[list[CalendarDayResponse | None]]


# Settings models


class ThemeSettingsUpdate(BaseModel):
    """Partial theme update; omitted fields are left unchanged."""

    model_config = ConfigDict(extra="forbid")

    is_dark_mode: bool | None = None
    primary_color: str | None = None
    font_family: str | None = None
    event_card_style: str | None = None
    calendar_style: str | None = None
    animations: bool | None = None


class SettingsUpdateRequest(BaseModel):
    """Partial settings update; omitted fields are left unchanged."""

    model_config = ConfigDict(extra="forbid")

    theme: ThemeSettingsUpdate | None = None
    default_reminder_minutes: int | None = None
    show_week_numbers: bool | None = None
    start_week_on: str | None = None
    time_format: str | None = None
    default_event_duration: int | None = None
    default_event_color: str | None = None
    enable_notifications: bool | None = None
    categories: list[str] | None = None
    default_view: str | None = None
    show_completed: bool | None = None
    enable_recurring_events: bool | None = None
    enable_drag_and_drop: bool | None = None
    enable_confetti: bool | None = None
