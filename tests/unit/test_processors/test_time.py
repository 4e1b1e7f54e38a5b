"""
Unit tests for time of day extraction and parsing.
"""

from datetime import datetime

import pytest

from chronotext.processors.core.constants import Constants


class TestTimeExtractor:
    """Test suite for TimeExtractor"""

    @pytest.fixture
    def extractor(self, culture_config):
        return culture_config.time_extractor

    @pytest.mark.unit
    def test_empty_input(self, extractor, reference_date):
        """Test that blank text yields no spans"""
        assert extractor.extract("", reference_date) == []

    @pytest.mark.unit
    def test_at_hour_excludes_connector(self, extractor, reference_date):
        """Test that "at" is not part of the time span"""
        results = extractor.extract("meet at 5 or at 3pm", reference_date)

        assert [r.text for r in results] == ["5", "3pm"]
        assert all(r.type == Constants.SYS_DATETIME_TIME for r in results)

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", [
        ("Doors open at 10am.", "10am"),
        ("Doors open at 10 a.m.", "10 a.m."),
        ("Doors open at 10 PM. Be early.", "10 PM"),
    ])
    def test_sentence_period_after_marker(self, extractor, reference_date, text, expected):
        """Test that a full stop is kept only after a dotted am/pm marker"""
        results = extractor.extract(text, reference_date)

        assert [r.text for r in results] == [expected]

    @pytest.mark.unit
    def test_plain_number_is_not_a_time(self, extractor, reference_date):
        """Test that a number without a time cue is ignored"""
        assert extractor.extract("I have 5 apples", reference_date) == []


class TestTimeParser:
    """Test suite for TimeParser"""

    @pytest.fixture
    def parse(self, culture_config, extract_and_parse, reference_date):
        def _parse(text):
            return extract_and_parse(
                culture_config.time_extractor, culture_config.time_parser, text, reference_date
            )
        return _parse

    @pytest.mark.unit
    @pytest.mark.parametrize("text,timex,hour,minute", [
        ("3pm", "T15", 15, 0),
        ("10 a.m.", "T10", 10, 0),
        ("15:30", "T15:30", 15, 30),
        ("noon", "T12", 12, 0),
        ("midnight", "T00", 0, 0),
        ("quarter to 5 pm", "T16:45", 16, 45),
        ("seven thirty pm", "T19:30", 19, 30),
        ("11 at night", "T23", 23, 0),
        ("3 in the morning", "T03", 3, 0),
    ])
    def test_unambiguous_times(self, parse, text, timex, hour, minute):
        """Test times with a marker or a 24 hour value"""
        pr = parse(text)

        assert pr.timex_str == timex
        assert pr.value.future_value == datetime(2024, 6, 12, hour, minute)
        assert pr.value.comment == ""

    @pytest.mark.unit
    @pytest.mark.parametrize("text,timex", [
        ("half past three", "T03:30"),
        ("5ish", "T05"),
    ])
    def test_ambiguous_times_carry_comment(self, parse, text, timex):
        """Test that unmarked hours in 1-12 are flagged"""
        pr = parse(text)

        assert pr.timex_str == timex
        assert pr.value.comment == Constants.COMMENT_AMPM

    @pytest.mark.unit
    def test_at_hour(self, culture_config, reference_date):
        """Test "at 5" resolves the bare hour"""
        er = culture_config.time_extractor.extract("at 5", reference_date)[0]
        pr = culture_config.time_parser.parse(er, reference_date)

        assert er.text == "5"
        assert pr.timex_str == "T05"
        assert pr.value.comment == Constants.COMMENT_AMPM

    @pytest.mark.unit
    def test_time_resolution(self, parse):
        """Test the time resolution string"""
        pr = parse("3pm")

        assert pr.value.future_resolution == {"time": "15:00:00"}
