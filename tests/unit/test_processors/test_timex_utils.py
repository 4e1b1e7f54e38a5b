"""
Unit tests for timex and resolution formatting.
"""

from datetime import datetime

import pytest

from chronotext.processors.core.date_utils import MIN_VALUE
from chronotext.processors.core.timex_utils import (
    format_date, format_date_time, format_number, generate_date_period_timex,
    generate_duration_timex, generate_seconds_timex, luis_date, luis_date_time,
    merge_timex_alternatives, short_time_timex, time_timex
)


class TestTimexFormatting:
    """Test suite for timex builders"""

    @pytest.mark.unit
    def test_luis_date_marks_unknown_fields(self):
        """Test X placeholders for missing date parts"""
        assert luis_date(-1, 12, 25) == "XXXX-12-25"
        assert luis_date(-1, -1, 5) == "XXXX-XX-05"
        assert luis_date(2024, 6, 1) == "2024-06-01"

    @pytest.mark.unit
    def test_time_timex_parts(self):
        """Test hour, minute and second precision"""
        assert time_timex(15) == "T15"
        assert time_timex(9, 30) == "T09:30"
        assert time_timex(9, 30, 5) == "T09:30:05"
        assert short_time_timex(datetime(2024, 6, 12, 17, 0)) == "T17"
        assert short_time_timex(datetime(2024, 6, 12, 17, 45)) == "T17:45"

    @pytest.mark.unit
    @pytest.mark.parametrize("number,unit,expected", [
        (2, "H", "PT2H"),
        (30, "M", "PT30M"),
        (3, "D", "P3D"),
        (2, "W", "P2W"),
        (6, "MON", "P6M"),
        (1, "Y", "P1Y"),
        (1.5, "H", "PT1.5H"),
    ])
    def test_duration_timex(self, number, unit, expected):
        """Test P and PT prefixes for date and time units"""
        assert generate_duration_timex(number, unit) == expected

    @pytest.mark.unit
    def test_seconds_timex(self):
        """Test time duration timex built from seconds"""
        assert generate_seconds_timex(7200) == "PT2H"
        assert generate_seconds_timex(5400) == "PT1H30M"
        assert generate_seconds_timex(0) == "PT0S"

    @pytest.mark.unit
    def test_date_period_timex(self):
        """Test the (begin,end,duration) triple"""
        begin, end = datetime(2023, 1, 1), datetime(2023, 4, 1)
        assert generate_date_period_timex(begin, end, "MON") == "(2023-01-01,2023-04-01,P3M)"
        assert generate_date_period_timex(begin, datetime(2023, 1, 15), "W") == "(2023-01-01,2023-01-15,P2W)"
        assert generate_date_period_timex(
            datetime(2024, 5, 1), datetime(2024, 5, 7), "D", "XXXX-05-01", "XXXX-05-07"
        ) == "(XXXX-05-01,XXXX-05-07,P6D)"

    @pytest.mark.unit
    def test_date_period_timex_with_unset_bound(self):
        """Test XX count when a bound is missing"""
        assert generate_date_period_timex(MIN_VALUE, datetime(2024, 1, 1), "D") == "(0001-01-01,2024-01-01,PXXD)"

    @pytest.mark.unit
    def test_merge_alternatives(self):
        """Test double timex only for different alternatives"""
        assert merge_timex_alternatives("a", "a") == "a"
        assert merge_timex_alternatives("a", "b") == "a|b"


class TestResolutionFormatting:
    """Test suite for resolution strings"""

    @pytest.mark.unit
    def test_number_format(self):
        """Test integral numbers without a decimal part"""
        assert format_number(3.0) == "3"
        assert format_number(2.5) == "2.5"

    @pytest.mark.unit
    def test_date_and_time_strings(self):
        """Test date, date-time and date-time timex strings"""
        value = datetime(2024, 6, 12, 8, 5, 0)
        assert format_date(value) == "2024-06-12"
        assert format_date_time(value) == "2024-06-12 08:05:00"
        assert luis_date_time(value) == "2024-06-12T08:05:00"
