"""Pattern-based attribute extractors for free-text calendar input.

Each extractor is a pure function over the raw input that returns one
attribute or None when the attribute cannot be determined. Keyword
classifiers are ordered (label, keywords) tables: the first label with a
hit wins, so table order defines tie-breaking.
"""

from __future__ import annotations

import re

from src.event_extraction.schemas import CATEGORIES, Priority, Recurrence

PRIORITY_KEYWORDS: tuple[tuple[Priority, tuple[str, ...]], ...] = (
    ("high", ("urgent", "important", "critical", "asap", "priority", "high")),
    ("medium", ("normal", "regular", "medium")),
    ("low", ("low", "optional", "whenever", "flexible")),
)

RECURRENCE_KEYWORDS: tuple[tuple[Recurrence, tuple[str, ...]], ...] = (
    ("daily", ("every day", "daily", "each day")),
    ("weekly", ("every week", "weekly", "each week")),
    ("monthly", ("every month", "monthly", "each month")),
    ("yearly", ("every year", "yearly", "annually", "each year")),
)

EVENT_TYPES: tuple[str, ...] = (
    "meeting",
    "appointment",
    "call",
    "lunch",
    "dinner",
    "conference",
    "event",
    "reminder",
    "task",
)

# Words that end the title when no event-type phrase is present
TITLE_MARKERS: tuple[str, ...] = ("at", "in", "on", "tomorrow", "next", "today")

UNTITLED = "Untitled Event"

TIME_PATTERN = re.compile(r"(\d{1,2})(?::(\d{2}))?\s*(am|pm)", re.IGNORECASE)

# Strict form stops before a trailing "at"/"on" clause or a comma; the loose
# form runs to the end of the string or the first comma.
LOCATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(?:at|in)\s+(?:the\s+)?([^,\.]+?)(?=\s+at|\s*$|\s*,|\s+on\s+)",
        re.IGNORECASE,
    ),
    re.compile(r"(?:at|in)\s+(?:the\s+)?([^,\.]+)(?:\s*$|,)", re.IGNORECASE),
)

HASHTAG_PATTERN = re.compile(r"#(\w+)", re.ASCII)

TITLE_PATTERN = re.compile(
    rf"({'|'.join(EVENT_TYPES)})\s+(?:with|about|for)?\s+([^,\.]+)",
    re.IGNORECASE,
)

TITLE_SPLIT_PATTERN = re.compile(
    rf"\s+(?:{'|'.join(TITLE_MARKERS)})\s+",
    re.IGNORECASE,
)


def extract_time(text: str) -> str | None:
    """
    Find the first clock time and canonicalize it.

    "3pm" -> "3:00pm", "3:30 PM" -> "3:30pm". The hour is kept as typed
    and is not range-checked.
    """
    m = TIME_PATTERN.search(text)
    if not m:
        return None
    hours, minutes, meridiem = m.groups()
    return f"{hours}:{minutes or '00'}{meridiem.lower()}"


def extract_location(text: str) -> str | None:
    """
    Find a location span introduced by "at"/"in".

    A candidate that contains a clock time ("at 3pm") is rejected and the
    next pattern is tried.
    """
    for pattern in LOCATION_PATTERNS:
        m = pattern.search(text)
        if m and not TIME_PATTERN.search(m.group(1)):
            return m.group(1).strip()
    return None


def _first_bucket(text: str, table):
    lower = text.lower()
    for label, keywords in table:
        if any(keyword in lower for keyword in keywords):
            return label
    return None


def extract_priority(text: str) -> Priority | None:
    """Classify priority by keyword; None when no keyword is present."""
    return _first_bucket(text, PRIORITY_KEYWORDS)


def extract_recurrence(text: str) -> Recurrence | None:
    """Classify the recurrence period by keyword."""
    return _first_bucket(text, RECURRENCE_KEYWORDS)


def extract_category(text: str) -> str | None:
    """Return the first category name contained in the text."""
    lower = text.lower()
    for category in CATEGORIES:
        if category in lower:
            return category
    return None


def extract_tags(text: str) -> list[str]:
    """Collect hashtags in order of first occurrence, without duplicates."""
    return list(dict.fromkeys(HASHTAG_PATTERN.findall(text)))


def extract_title(text: str, untitled: str = UNTITLED) -> str:
    """
    Derive a human-readable title.

    Prefers an "<event type> [with|about|for] <subject>" span, ending at
    the first comma or period. Otherwise keeps everything before the first
    marker word (at, in, on, tomorrow, next, today).

    Args:
        text: Raw input text.
        untitled: Title returned when nothing usable precedes a marker.

    Returns:
        The title, never empty.
    """
    m = TITLE_PATTERN.search(text)
    if m:
        return m.group(0).strip()

    head = TITLE_SPLIT_PATTERN.split(text, maxsplit=1)[0].strip()
    return head or untitled
