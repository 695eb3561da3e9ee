"""User-editable calendar preferences.

Pydantic models so that partial updates coming from the API are
validated field by field before they replace the current preferences.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.event_extraction.schemas import CATEGORIES

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class ThemeSettings(BaseModel):
    """Look-and-feel preferences, passed through to the front-end."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    is_dark_mode: bool = False
    primary_color: str = Field(default="#3b82f6", pattern=HEX_COLOR_PATTERN)
    font_family: str = Field(default="system-ui", min_length=1)
    event_card_style: Literal["minimal", "gradient", "solid", "glass"] = "gradient"
    calendar_style: Literal["classic", "modern", "compact"] = "modern"
    animations: bool = True


class UserSettings(BaseModel):
    """
    Calendar behaviour preferences.

    ``default_reminder_minutes``, ``default_event_color`` and
    ``default_event_duration`` are copied onto every event created from
    text; the grid honours ``start_week_on``, ``show_week_numbers`` and
    ``show_completed``.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    theme: ThemeSettings = Field(default_factory=ThemeSettings)
    default_reminder_minutes: int = Field(default=15, ge=0, le=10_080)
    show_week_numbers: bool = True
    start_week_on: Literal["sunday", "monday"] = "monday"
    time_format: Literal["12h", "24h"] = "12h"
    default_event_duration: int = Field(default=60, ge=0, le=1_440)
    default_event_color: str = Field(default="#3b82f6", pattern=HEX_COLOR_PATTERN)
    enable_notifications: bool = True
    categories: list[str] = Field(default_factory=lambda: list(CATEGORIES))
    default_view: Literal["month", "week", "day"] = "month"
    show_completed: bool = True
    enable_recurring_events: bool = True
    enable_drag_and_drop: bool = True
    enable_confetti: bool = False

    def merged(self, changes: dict) -> "UserSettings":
        """
        Return a copy with ``changes`` applied and validated.

        Nested ``theme`` changes are merged into the current theme rather
        than replacing it.

        Raises:
            pydantic.ValidationError: If any changed value is invalid.
        """
        data = self.model_dump()
        theme_changes = changes.get("theme")
        for key, value in changes.items():
            if key != "theme":
                data[key] = value
        if theme_changes:
            data["theme"] = {**data["theme"], **theme_changes}
        return UserSettings.model_validate(data)
