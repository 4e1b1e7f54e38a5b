"""
Unit tests for calendar arithmetic helpers.
"""

from datetime import datetime

import pytest

from chronotext.processors.core.date_utils import (
    MIN_VALUE, add_months, first_weekday_of_month, generate_dates, generate_month_day_dates,
    is_default_value, last_weekday, monday_of_iso_week, nearest_weekday_pair, next_weekday,
    previous_weekday, resolve_two_digit_year, safe_create_from_min_value, this_weekday,
    upcoming_weekday
)

WEDNESDAY = datetime(2024, 6, 12)


class TestWeekdayHelpers:
    """Test suite for weekday arithmetic"""

    @pytest.mark.unit
    def test_this_weekday_stays_in_monday_week(self):
        """Test weekday inside the current Monday-based week"""
        assert this_weekday(WEDNESDAY, 1) == datetime(2024, 6, 10)
        assert this_weekday(WEDNESDAY, 7) == datetime(2024, 6, 16)

    @pytest.mark.unit
    def test_next_and_last_week(self):
        """Test weekday inside the following and previous weeks"""
        assert next_weekday(WEDNESDAY, 1) == datetime(2024, 6, 17)
        assert last_weekday(WEDNESDAY, 5) == datetime(2024, 6, 7)

    @pytest.mark.unit
    def test_upcoming_and_previous_are_strict(self):
        """Test that the reference weekday itself is skipped"""
        assert upcoming_weekday(WEDNESDAY, 5) == datetime(2024, 6, 14)
        assert upcoming_weekday(WEDNESDAY, 3) == datetime(2024, 6, 19)
        assert previous_weekday(WEDNESDAY, 3) == datetime(2024, 6, 5)
        assert previous_weekday(WEDNESDAY, 1) == datetime(2024, 6, 10)

    @pytest.mark.unit
    def test_nearest_weekday_pair(self):
        """Test future and past occurrences of a bare weekday"""
        assert nearest_weekday_pair(WEDNESDAY, 5) == (datetime(2024, 6, 14), datetime(2024, 6, 7))
        assert nearest_weekday_pair(WEDNESDAY, 3) == (WEDNESDAY, WEDNESDAY)

    @pytest.mark.unit
    def test_first_weekday_of_month(self):
        """Test first occurrence of a weekday in a month"""
        assert first_weekday_of_month(2024, 5, 7) == datetime(2024, 5, 5)
        assert first_weekday_of_month(2024, 6, 6) == datetime(2024, 6, 1)

    @pytest.mark.unit
    def test_monday_of_iso_week(self):
        """Test ISO week start, including a missing week 53"""
        assert monday_of_iso_week(2024, 1) == datetime(2024, 1, 1)
        assert monday_of_iso_week(2024, 24) == datetime(2024, 6, 10)
        assert monday_of_iso_week(2023, 53) == datetime(2024, 1, 1)


class TestDateConstruction:
    """Test suite for safe date construction"""

    @pytest.mark.unit
    def test_impossible_day_gives_min_value(self):
        """Test that invalid days are not clamped"""
        assert safe_create_from_min_value(2023, 2, 29) == MIN_VALUE
        assert is_default_value(safe_create_from_min_value(2024, 4, 31))
        assert safe_create_from_min_value(2024, 2, 29) == datetime(2024, 2, 29)

    @pytest.mark.unit
    def test_month_overflow_rolls_into_year(self):
        """Test that months outside 1-12 move the year"""
        assert safe_create_from_min_value(2024, 13, 1) == datetime(2025, 1, 1)
        assert safe_create_from_min_value(2024, 0, 1) == datetime(2023, 12, 1)

    @pytest.mark.unit
    def test_add_months_clamps_day(self):
        """Test month arithmetic at month end"""
        assert add_months(datetime(2024, 1, 31), 1) == datetime(2024, 2, 29)


class TestTwoDigitYears:
    """Test suite for two digit year expansion"""

    @pytest.mark.unit
    @pytest.mark.parametrize("year,expected", [
        (0, 2000),
        (18, 2018),
        (39, 2039),
        (40, 1940),
        (85, 1985),
        (2016, 2016),
    ])
    def test_default_thresholds(self, year, expected):
        """Test expansion with the default thresholds"""
        assert resolve_two_digit_year(year, 40, 40) == expected

    @pytest.mark.unit
    def test_custom_thresholds(self):
        """Test that thresholds are injectable"""
        assert resolve_two_digit_year(45, 50, 50) == 2045
        assert resolve_two_digit_year(45, 30, 30) == 1945


class TestCandidateDates:
    """Test suite for future/past candidate generation"""

    @pytest.mark.unit
    def test_generate_dates_with_year(self):
        """Test that an explicit year gives one date"""
        assert generate_dates(False, WEDNESDAY, 2016, 3, 5) == (datetime(2016, 3, 5), datetime(2016, 3, 5))

    @pytest.mark.unit
    def test_generate_dates_without_year(self):
        """Test earliest future and latest past occurrences"""
        future, past = generate_dates(True, WEDNESDAY, 2024, 7, 4)
        assert future == datetime(2024, 7, 4)
        assert past == datetime(2023, 7, 4)

        future, past = generate_dates(True, WEDNESDAY, 2024, 6, 12)
        assert future == past == WEDNESDAY

    @pytest.mark.unit
    def test_generate_dates_feb_29_skips_common_years(self):
        """Test that Feb 29 only resolves inside leap years"""
        future, past = generate_dates(True, WEDNESDAY, 2024, 2, 29)
        assert future == datetime(2028, 2, 29)
        assert past == datetime(2024, 2, 29)

    @pytest.mark.unit
    def test_month_day_collapse(self):
        """Test that a day still ahead this month resolves to itself"""
        assert generate_month_day_dates(WEDNESDAY, 27, collapse_current_month=True) == (
            datetime(2024, 6, 27), datetime(2024, 6, 27)
        )
        assert generate_month_day_dates(WEDNESDAY, 27) == (datetime(2024, 6, 27), datetime(2024, 5, 27))

    @pytest.mark.unit
    def test_month_day_skips_short_months(self):
        """Test that the 31st skips months without one"""
        future, past = generate_month_day_dates(datetime(2024, 4, 5), 31)
        assert future == datetime(2024, 5, 31)
        assert past == datetime(2024, 3, 31)
