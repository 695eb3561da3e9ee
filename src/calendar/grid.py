"""Month grid construction.

Stateless helpers that bucket events by day and lay the days of a month
out in 7-day rows starting on the configured first weekday.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from src.calendar.schemas import CalendarDay, Event, MonthGrid

# date.weekday() of the first column
_WEEK_START: dict[str, int] = {"monday": 0, "sunday": 6}


def month_days(year: int, month: int) -> list[date]:
    """All dates of the given month, in order."""
    first = date(year, month, 1)
    if month == 12:
        next_first = date(year + 1, 1, 1)
    else:
        next_first = date(year, month + 1, 1)
    return [first + timedelta(days=i) for i in range((next_first - first).days)]


def build_month_grid(
    year: int,
    month: int,
    events: Iterable[Event],
    start_week_on: str = "monday",
    show_week_numbers: bool = True,
    today: date | None = None,
) -> MonthGrid:
    """
    Lay out one month of events.

    Args:
        year: Calendar year.
        month: Month number (1-12).
        events: Events to place; those outside the month are ignored.
        start_week_on: "monday" or "sunday".
        show_week_numbers: Whether to compute ISO week numbers per row.
        today: Day flagged as today. Defaults to the system date.

    Returns:
        MonthGrid with every day of the month.

    Raises:
        ValueError: If month is not 1-12 or start_week_on is unknown.
    """
    if start_week_on not in _WEEK_START:
        raise ValueError(f"Invalid start_week_on: {start_week_on}")

    today = today or date.today()
    days = month_days(year, month)

    by_day: dict[date, list[Event]] = {d: [] for d in days}
    for event in events:
        if event.date in by_day:
            by_day[event.date].append(event)

    cells = [
        CalendarDay(
            date=d,
            events=by_day[d],
            is_today=d == today,
            is_weekend=d.weekday() >= 5,
        )
        for d in days
    ]

    lead = (days[0].weekday() - _WEEK_START[start_week_on]) % 7
    padded: list[CalendarDay | None] = [None] * lead + list(cells)
    padded += [None] * (-len(padded) % 7)
    weeks = [padded[i:i + 7] for i in range(0, len(padded), 7)]

    week_numbers: list[int] = []
    if show_week_numbers:
        for week in weeks:
            first_day = next(cell.date for cell in week if cell is not None)
            week_numbers.append(first_day.isocalendar()[1])

    return MonthGrid(
        year=year,
        month=month,
        days=cells,
        weeks=weeks,
        week_numbers=week_numbers,
    )
