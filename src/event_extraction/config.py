"""Configuration for the event extraction service.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other configs in the project.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EventExtractionConfig(BaseSettings):
    """
    Configuration for the text-to-event extraction service.

    All settings can be overridden via environment variables with EVENTS_ prefix.
    Example: EVENTS_MAX_INPUT_LENGTH=1000

    Attributes:
        enabled: Whether the extraction playground endpoint is served.
        default_priority: Priority applied when no priority keyword matches.
        untitled_title: Title used when nothing precedes a marker word.
        max_input_length: Longest text accepted by the API and CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="EVENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    enabled: bool = Field(
        default=True,
        description="Serve the /events/extract endpoint.",
    )
    default_priority: Literal["low", "medium", "high"] = Field(
        default="medium",
        description="Priority used when the text has no priority keyword.",
    )
    untitled_title: str = Field(
        default="Untitled Event",
        min_length=1,
        description="Fallback title when no title text can be derived.",
    )
    max_input_length: int = Field(
        default=500,
        ge=1,
        le=10_000,
        description="Maximum characters accepted for a single input.",
    )
