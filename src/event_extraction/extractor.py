"""Orchestrator for text-to-event extraction.

Runs every attribute extractor over the same raw text and the same
reference date, then merges the results into one ExtractedEventInfo.
"""

from __future__ import annotations

from datetime import date, datetime

import structlog

from src.event_extraction.config import EventExtractionConfig
from src.event_extraction.dates import extract_date, reference_day
from src.event_extraction.patterns import (
    extract_category,
    extract_location,
    extract_priority,
    extract_recurrence,
    extract_tags,
    extract_time,
    extract_title,
)
from src.event_extraction.schemas import ExtractedEventInfo

logger = structlog.get_logger(__name__)

_DEFAULT_CONFIG: EventExtractionConfig | None = None


def _default_config() -> EventExtractionConfig:
    global _DEFAULT_CONFIG
    if _DEFAULT_CONFIG is None:
        _DEFAULT_CONFIG = EventExtractionConfig()
    return _DEFAULT_CONFIG


def extract_event_info(
    text: str,
    reference: date | datetime | None = None,
    config: EventExtractionConfig | None = None,
) -> ExtractedEventInfo:
    """
    Extract structured event attributes from free text.

    Never raises for string input: every attribute that cannot be
    determined is left as None. Callers should treat a missing ``date``
    as a rejection of the whole input.

    Args:
        text: Raw input, e.g. "Lunch with Sam next Friday at 1pm #social".
        reference: Moment treated as "now" for relative dates. Read once
            from the clock when omitted.
        config: Extraction config (defaults from EVENTS_* env vars).

    Returns:
        ExtractedEventInfo for this input.

    Usage:
        info = extract_event_info("call mom tomorrow at 9am", date(2024, 1, 10))
        info.date  # date(2024, 1, 11)
        info.time  # "9:00am"
    """
    config = config or _default_config()
    today = reference_day(reference)

    info = ExtractedEventInfo(
        title=extract_title(text, untitled=config.untitled_title),
        date=extract_date(text, today),
        time=extract_time(text),
        location=extract_location(text),
        priority=extract_priority(text) or config.default_priority,
        tags=extract_tags(text),
        recurring=extract_recurrence(text),
        category=extract_category(text),
    )

    logger.debug(
        "Extracted event info",
        reference=today.isoformat(),
        has_date=info.has_date,
        has_time=info.time is not None,
        has_location=info.location is not None,
        priority=info.priority,
        tag_count=len(info.tags),
    )
    return info
