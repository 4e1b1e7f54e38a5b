"""
Unit tests for date-time range extraction and parsing.
"""

from datetime import datetime

import pytest

from chronotext.processors.core.constants import Constants


class TestDateTimePeriodExtractor:
    """Test suite for DateTimePeriodExtractor"""

    @pytest.fixture
    def extractor(self, culture_config):
        return culture_config.date_time_period_extractor

    @pytest.mark.unit
    def test_empty_input(self, extractor, reference_date):
        """Test that blank text yields no spans"""
        assert extractor.extract("", reference_date) == []

    @pytest.mark.unit
    def test_parts_of_days(self, extractor, reference_date):
        """Test named and date-anchored parts of the day"""
        results = extractor.extract("I left last night and will return tomorrow morning", reference_date)

        assert [r.text for r in results] == ["last night", "tomorrow morning"]
        assert all(r.type == Constants.SYS_DATETIME_DATETIMEPERIOD for r in results)


class TestDateTimePeriodParser:
    """Test suite for DateTimePeriodParser"""

    @pytest.fixture
    def parse(self, culture_config, extract_and_parse, reference_date):
        def _parse(text):
            return extract_and_parse(
                culture_config.date_time_period_extractor, culture_config.date_time_period_parser,
                text, reference_date
            )
        return _parse

    @pytest.mark.unit
    @pytest.mark.parametrize("text,timex,begin,end", [
        ("tonight", "2024-06-12TNI", datetime(2024, 6, 12, 20), datetime(2024, 6, 13)),
        ("last night", "2024-06-11TNI", datetime(2024, 6, 11, 20), datetime(2024, 6, 12)),
        ("tomorrow morning", "2024-06-13TMO", datetime(2024, 6, 13, 8), datetime(2024, 6, 13, 12)),
    ])
    def test_parts_of_day(self, parse, text, timex, begin, end):
        """Test parts of the day on a specific date"""
        pr = parse(text)

        assert pr.timex_str == timex
        assert pr.value.future_value == (begin, end)

    @pytest.mark.unit
    def test_date_with_time_range(self, parse):
        """Test an hour range on an ambiguous weekday"""
        pr = parse("Friday from 3 to 5pm")

        assert pr.timex_str == "(XXXX-WXX-5T15,XXXX-WXX-5T17,PT2H)"
        assert pr.value.future_value == (datetime(2024, 6, 14, 15), datetime(2024, 6, 14, 17))
        assert pr.value.past_value == (datetime(2024, 6, 7, 15), datetime(2024, 6, 7, 17))

    @pytest.mark.unit
    def test_past_hours(self, parse):
        """Test a range ending at the reference time"""
        pr = parse("the past 3 hours")

        assert pr.timex_str == "(2024-06-12T07:00:00,2024-06-12T10:00:00,PT3H)"
        assert pr.value.future_value == (datetime(2024, 6, 12, 7), datetime(2024, 6, 12, 10))
        assert pr.value.future_resolution == {
            "startDateTime": "2024-06-12 07:00:00",
            "endDateTime": "2024-06-12 10:00:00",
        }
