"""
Event extraction for free-text calendar input.

This module turns a single line such as "Urgent meeting with Sarah
tomorrow at noon #work" into structured event attributes using a fixed
set of regex and keyword heuristics. It is stateless: the same text and
reference date always produce the same result.

Components:
- EventExtractionConfig: Configuration for the extraction service
- ExtractedEventInfo: Dataclass holding the extracted attributes
- Priority / Recurrence: Literal types for the classified attributes
- extract_event_info: The orchestrating entry point
- extract_date: Relative/absolute date resolution
"""

from src.event_extraction.config import EventExtractionConfig
from src.event_extraction.dates import extract_date
from src.event_extraction.extractor import extract_event_info
from src.event_extraction.schemas import (
    CATEGORIES,
    ExtractedEventInfo,
    Priority,
    Recurrence,
)

__all__ = [
    "CATEGORIES",
    "EventExtractionConfig",
    "ExtractedEventInfo",
    "Priority",
    "Recurrence",
    "extract_date",
    "extract_event_info",
]
