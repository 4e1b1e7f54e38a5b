"""
Unit tests for date-time extraction and parsing.
"""

from datetime import datetime

import pytest

from chronotext.processors.core.constants import Constants


class TestDateTimeExtractor:
    """Test suite for DateTimeExtractor"""

    @pytest.fixture
    def extractor(self, culture_config):
        return culture_config.date_time_extractor

    @pytest.mark.unit
    def test_empty_input(self, extractor, reference_date):
        """Test that blank text yields no spans"""
        assert extractor.extract("", reference_date) == []

    @pytest.mark.unit
    def test_date_time_and_relative_time(self, extractor, reference_date):
        """Test merged date and time plus a relative offset"""
        results = extractor.extract("call me tomorrow at 5pm or in 30 minutes", reference_date)

        assert [r.text for r in results] == ["tomorrow at 5pm", "in 30 minutes"]
        assert all(r.type == Constants.SYS_DATETIME_DATETIME for r in results)

    @pytest.mark.unit
    def test_date_alone_is_not_date_time(self, extractor, reference_date):
        """Test that a date without a time is left to the date extractor"""
        assert extractor.extract("see you tomorrow", reference_date) == []


class TestDateTimeParser:
    """Test suite for DateTimeParser"""

    @pytest.fixture
    def parse(self, culture_config, extract_and_parse, reference_date):
        def _parse(text):
            return extract_and_parse(
                culture_config.date_time_extractor, culture_config.date_time_parser, text, reference_date
            )
        return _parse

    @pytest.mark.unit
    def test_date_then_time(self, parse):
        """Test a date followed by a time"""
        pr = parse("tomorrow at 5pm")

        assert pr.timex_str == "2024-06-13T17"
        assert pr.value.future_value == datetime(2024, 6, 13, 17)
        assert pr.value.future_resolution == {"dateTime": "2024-06-13 17:00:00"}

    @pytest.mark.unit
    def test_time_then_ambiguous_date(self, parse):
        """Test that the date alternatives carry over to the date-time"""
        pr = parse("3pm on Friday")

        assert pr.timex_str == "XXXX-WXX-5T15"
        assert pr.value.future_value == datetime(2024, 6, 14, 15)
        assert pr.value.past_value == datetime(2024, 6, 7, 15)

    @pytest.mark.unit
    def test_ambiguous_hour_comment(self, parse):
        """Test that the time comment is kept"""
        pr = parse("tomorrow at 5")

        assert pr.timex_str == "2024-06-13T05"
        assert pr.value.comment == Constants.COMMENT_AMPM

    @pytest.mark.unit
    def test_now(self, parse, reference_date):
        """Test the present reference"""
        pr = parse("now")

        assert pr.timex_str == Constants.TIMEX_PRESENT_REF
        assert pr.value.future_value == reference_date

    @pytest.mark.unit
    @pytest.mark.parametrize("text,timex,expected", [
        ("2 hours ago", "2024-06-12T08:00:00", datetime(2024, 6, 12, 8)),
        ("in 30 minutes", "2024-06-12T10:30:00", datetime(2024, 6, 12, 10, 30)),
    ])
    def test_relative_times(self, parse, text, timex, expected):
        """Test hour and minute offsets keep the time of day"""
        pr = parse(text)

        assert pr.timex_str == timex
        assert pr.value.future_value == expected
