"""Date resolution for event extraction.

Resolves relative phrases ("tomorrow", "next week"), explicit month/day
phrases ("March 15th") and weekday phrases ("next Tuesday") into absolute
calendar dates, anchored on an injected reference date.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

# Month name / abbreviation -> month number. Keyed by the first three
# letters, which is all the month pattern needs to disambiguate.
_MONTH_MAP: dict[str, int] = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4,
    "may": 5, "jun": 6, "jul": 7, "aug": 8,
    "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

# Sunday=0 .. Saturday=6
_WEEKDAYS: tuple[str, ...] = (
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
)

MONTH_DAY_PATTERN = re.compile(
    r"(jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|jul(?:y)?"
    r"|aug(?:ust)?|sep(?:tember)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
    r"\s+(\d{1,2})(?:st|nd|rd|th)?",
    re.IGNORECASE,
)

NEXT_WEEKDAY_PATTERN = re.compile(
    r"next\s+(monday|tuesday|wednesday|thursday|friday|saturday|sunday)",
    re.IGNORECASE,
)


class _NoDate(Exception):
    """A rule matched but its day number is out of range."""


def reference_day(reference: date | datetime | None = None) -> date:
    """
    Reduce a reference instant to its calendar date.

    Args:
        reference: Moment treated as "now". Defaults to today.

    Returns:
        The date component of the reference.
    """
    if reference is None:
        return date.today()
    if isinstance(reference, datetime):
        return reference.date()
    return reference


def weekday_index(day: date) -> int:
    """Weekday of ``day`` with Sunday=0 .. Saturday=6."""
    return (day.weekday() + 1) % 7


def extract_date(text: str, reference: date | datetime | None = None) -> date | None:
    """
    Resolve an absolute date from free text.

    Rules are tried in order and the first rule that matches decides the
    outcome. A month/day phrase with a day of 0 or above 31 yields no
    date; days past the end of the month roll over into the next one.

    Args:
        text: Raw input text.
        reference: Anchor for relative phrases. Defaults to today.

    Returns:
        Resolved date, or None if the text carries no usable date phrase.
    """
    today = reference_day(reference)
    lower = text.lower()

    for fn in (
        _try_tomorrow,
        _try_today,
        _try_next_week,
        _try_month_day,
        _try_next_weekday,
    ):
        try:
            result = fn(text, lower, today)
        except _NoDate:
            return None
        if result is not None:
            return result

    return None


def _try_tomorrow(text: str, lower: str, today: date) -> date | None:
    if "tomorrow" in lower:
        return today + timedelta(days=1)
    return None


def _try_today(text: str, lower: str, today: date) -> date | None:
    if "today" in lower:
        return today
    return None


def _try_next_week(text: str, lower: str, today: date) -> date | None:
    if "next week" in lower:
        return today + timedelta(weeks=1)
    return None


def _try_month_day(text: str, lower: str, today: date) -> date | None:
    """Match 'March 15th', 'dec 3', 'Jan 21st' in the reference year."""
    m = MONTH_DAY_PATTERN.search(text)
    if not m:
        return None
    month = _MONTH_MAP[m.group(1)[:3].lower()]
    day = int(m.group(2))
    if not 1 <= day <= 31:
        raise _NoDate(f"day out of range: {day}")
    # Days past the end of the month roll over ("Feb 30" is Mar 1)
    return date(today.year, month, 1) + timedelta(days=day - 1)


def _try_next_weekday(text: str, lower: str, today: date) -> date | None:
    """Match 'next Tuesday': the next occurrence strictly after today."""
    m = NEXT_WEEKDAY_PATTERN.search(text)
    if not m:
        return None
    target = _WEEKDAYS.index(m.group(1).lower())
    days_to_add = target - weekday_index(today)
    if days_to_add <= 0:
        days_to_add += 7
    return today + timedelta(days=days_to_add)
