"""
Unit tests for duration extraction and parsing.
"""

import pytest

from chronotext.processors.core.constants import Constants


class TestDurationExtractor:
    """Test suite for DurationExtractor"""

    @pytest.fixture
    def extractor(self, culture_config):
        return culture_config.duration_extractor

    @pytest.mark.unit
    def test_empty_input(self, extractor, reference_date):
        """Test that blank text yields no spans"""
        assert extractor.extract("", reference_date) == []
        assert extractor.extract("  ", reference_date) == []

    @pytest.mark.unit
    def test_multiple_durations(self, extractor, reference_date):
        """Test several durations in one sentence"""
        results = extractor.extract("I was gone for 3 days and then 2 hours", reference_date)

        assert [r.text for r in results] == ["3 days", "2 hours"]
        assert all(r.type == Constants.SYS_DATETIME_DURATION for r in results)

    @pytest.mark.unit
    def test_inequality_prefix(self, extractor, reference_date):
        """Test that "more than" is absorbed and recorded"""
        results = extractor.extract("it took more than 2 hours", reference_date)

        assert results[0].text == "more than 2 hours"
        assert results[0].data == Constants.MORE_THAN_MOD


class TestDurationParser:
    """Test suite for DurationParser"""

    @pytest.fixture
    def parse(self, culture_config, extract_and_parse, reference_date):
        def _parse(text):
            return extract_and_parse(
                culture_config.duration_extractor, culture_config.duration_parser, text, reference_date
            )
        return _parse

    @pytest.mark.unit
    @pytest.mark.parametrize("text,timex,seconds", [
        ("2 hours", "PT2H", 7200),
        ("30 minutes", "PT30M", 1800),
        ("3 days", "P3D", 259200),
        ("2 weeks", "P2W", 1209600),
        ("6 months", "P6M", 15552000),
        ("1 year", "P1Y", 31536000),
        ("half an hour", "PT0.5H", 1800),
        ("three and a half hours", "PT3.5H", 12600),
        ("2.5hrs", "PT2.5H", 9000),
        ("a couple of days", "P2D", 172800),
        ("a few weeks", "P3W", 1814400),
        ("all day", "P1D", 86400),
    ])
    def test_timex_and_seconds(self, parse, text, timex, seconds):
        """Test timex and value in seconds"""
        pr = parse(text)

        assert pr.timex_str == timex
        assert pr.value.future_value == seconds
        assert pr.value.past_value == seconds
        assert pr.value.future_resolution == {"duration": str(seconds)}

    @pytest.mark.unit
    def test_more_than_mod(self, parse):
        """Test that the inequality becomes the resolution mod"""
        pr = parse("more than 2 hours")

        assert pr.timex_str == "PT2H"
        assert pr.value.mod == Constants.MORE_THAN_MOD

    @pytest.mark.unit
    def test_large_calendar_counts_rejected(self, parse):
        """Test that more than a thousand years, months or weeks is not a duration"""
        pr = parse("1001 years")

        assert pr.value is None
        assert pr.timex_str == ""

    @pytest.mark.unit
    def test_large_time_counts_accepted(self, parse):
        """Test that the count limit applies to calendar units only"""
        pr = parse("1500 minutes")

        assert pr.timex_str == "PT1500M"
        assert pr.value.future_value == 90000
