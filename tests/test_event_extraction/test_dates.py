"""Tests for date resolution."""

from datetime import date, datetime

import pytest

from src.event_extraction.dates import extract_date, reference_day, weekday_index


class TestRelativeDates:
    """Tests for tomorrow / today / next week."""

    def test_tomorrow(self, wednesday):
        assert extract_date("lunch tomorrow", wednesday) == date(2024, 1, 11)

    def test_today(self, wednesday):
        assert extract_date("gym today", wednesday) == wednesday

    def test_next_week(self, wednesday):
        assert extract_date("review next week", wednesday) == date(2024, 1, 17)

    def test_case_insensitive(self, wednesday):
        assert extract_date("Dinner TOMORROW", wednesday) == date(2024, 1, 11)

    def test_tomorrow_across_year_end(self):
        assert extract_date("party tomorrow", date(2024, 12, 31)) == date(2025, 1, 1)

    def test_tomorrow_wins_over_today(self, wednesday):
        assert extract_date("not today, tomorrow", wednesday) == date(2024, 1, 11)

    def test_today_wins_over_month_day(self, wednesday):
        assert extract_date("today, not March 3", wednesday) == wednesday

    def test_next_week_wins_over_weekday(self, wednesday):
        # "next weekend" contains "next week"
        assert extract_date("trip next weekend", wednesday) == date(2024, 1, 17)


class TestMonthDay:
    """Tests for explicit month/day phrases."""

    def test_full_month_with_ordinal(self, wednesday):
        assert extract_date("doctor on March 15th", wednesday) == date(2024, 3, 15)

    def test_abbreviation(self, wednesday):
        assert extract_date("Dec 3 party", wednesday) == date(2024, 12, 3)

    def test_ordinals(self, wednesday):
        assert extract_date("jan 1st", wednesday) == date(2024, 1, 1)
        assert extract_date("feb 2nd", wednesday) == date(2024, 2, 2)
        assert extract_date("apr 3rd", wednesday) == date(2024, 4, 3)

    def test_uses_reference_year(self):
        assert extract_date("July 4", date(2031, 9, 1)) == date(2031, 7, 4)

    def test_past_month_stays_in_reference_year(self, wednesday):
        # No rollover into next year
        assert extract_date("Jan 2", wednesday) == date(2024, 1, 2)

    def test_leap_day(self, wednesday):
        assert extract_date("feb 29", wednesday) == date(2024, 2, 29)

    def test_may(self, wednesday):
        assert extract_date("picnic May 20", wednesday) == date(2024, 5, 20)

    def test_month_requires_following_day_number(self, wednesday):
        assert extract_date("sometime in March", wednesday) is None


class TestMonthDayOverflow:
    """Days past the end of the month roll over; days outside 1-31 give no date."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Feb 30 party", date(2024, 3, 1)),
            ("Apr 31 dinner", date(2024, 5, 1)),
            ("Team dinner April 31", date(2024, 5, 1)),
            ("feb 31", date(2024, 3, 2)),
            ("jan 31", date(2024, 1, 31)),
        ],
    )
    def test_rolls_into_next_month(self, wednesday, text, expected):
        assert extract_date(text, wednesday) == expected

    def test_feb_29_outside_leap_year(self):
        assert extract_date("feb 29", date(2023, 5, 1)) == date(2023, 3, 1)

    def test_feb_31_outside_leap_year(self):
        assert extract_date("Feb 31", date(2023, 5, 1)) == date(2023, 3, 3)

    def test_dec_31_stays_in_year(self, wednesday):
        assert extract_date("dec 31", wednesday) == date(2024, 12, 31)

    @pytest.mark.parametrize("text", ["june 0", "jan 0", "Jan 32", "oct 45", "dec 99"])
    def test_out_of_range_day_is_absent(self, wednesday, text):
        assert extract_date(text, wednesday) is None

    def test_out_of_range_day_does_not_fall_through_to_weekday(self, wednesday):
        assert extract_date("Jan 32 or next Friday", wednesday) is None

    def test_overflow_wins_over_weekday(self, wednesday):
        assert extract_date("Feb 30 or next Friday", wednesday) == date(2024, 3, 1)


class TestNextWeekday:
    """Tests for 'next <weekday>' resolution."""

    def test_next_tuesday_from_wednesday(self, wednesday):
        # Next week's Tuesday, six days later
        assert extract_date("next Tuesday", wednesday) == date(2024, 1, 16)

    def test_next_same_weekday_is_a_week_later(self, wednesday):
        assert extract_date("next wednesday", wednesday) == date(2024, 1, 17)

    def test_next_later_weekday_this_week(self, wednesday):
        assert extract_date("next Friday", wednesday) == date(2024, 1, 12)

    def test_next_sunday(self, wednesday):
        assert extract_date("brunch next sunday", wednesday) == date(2024, 1, 14)

    def test_next_monday_from_sunday(self):
        assert extract_date("next monday", date(2024, 1, 14)) == date(2024, 1, 15)

    def test_next_saturday_from_saturday(self):
        assert extract_date("next saturday", date(2024, 1, 13)) == date(2024, 1, 20)

    def test_weekday_without_next(self, wednesday):
        assert extract_date("on Tuesday", wednesday) is None


class TestNoDate:
    def test_plain_text(self, wednesday):
        assert extract_date("buy milk", wednesday) is None

    def test_empty(self, wednesday):
        assert extract_date("", wednesday) is None

    def test_relative_duration_not_supported(self, wednesday):
        assert extract_date("in 3 days", wednesday) is None


class TestReference:
    def test_datetime_reference_uses_date_component(self):
        ref = datetime(2024, 1, 10, 23, 59)
        assert extract_date("tomorrow", ref) == date(2024, 1, 11)

    def test_default_reference_is_today(self):
        assert extract_date("today") == date.today()

    def test_reference_day(self):
        assert reference_day(datetime(2024, 1, 10, 8, 0)) == date(2024, 1, 10)
        assert reference_day(date(2024, 1, 10)) == date(2024, 1, 10)

    def test_weekday_index_sunday_zero(self):
        assert weekday_index(date(2024, 1, 14)) == 0  # Sunday
        assert weekday_index(date(2024, 1, 10)) == 3  # Wednesday
        assert weekday_index(date(2024, 1, 13)) == 6  # Saturday
