"""
Unit tests for single date extraction and parsing.
"""

from datetime import datetime

import pytest

from chronotext.processors.core.constants import Constants
from chronotext.processors.english.configuration import (
    get_swift_day, get_swift_month_or_year, is_cardinal_last
)


class TestDateExtractor:
    """Test suite for DateExtractor"""

    @pytest.fixture
    def extractor(self, culture_config):
        return culture_config.date_extractor

    @pytest.mark.unit
    def test_empty_input(self, extractor, reference_date):
        """Test that blank text yields no spans"""
        assert extractor.extract("", reference_date) == []

    @pytest.mark.unit
    def test_dates_in_sentence(self, extractor, reference_date):
        """Test explicit dates found in running text"""
        results = extractor.extract("I moved on July 4th and left on 10/1/18", reference_date)

        assert [r.text for r in results] == ["July 4th", "10/1/18"]
        assert all(r.type == Constants.SYS_DATETIME_DATE for r in results)

    @pytest.mark.unit
    def test_relative_weekday_span(self, extractor, reference_date):
        """Test that the relative word belongs to the weekday span"""
        results = extractor.extract("see you next week Monday", reference_date)

        assert [r.text for r in results] == ["next week Monday"]

    @pytest.mark.unit
    def test_trailing_year_that_opens_next_date(self, extractor, reference_date):
        """Test that a trailing number opening the next date is not a year"""
        results = extractor.extract("10-1 - 11-7", reference_date)

        assert [r.text for r in results] == ["10-1", "11-7"]

    @pytest.mark.unit
    def test_mixed_separators_rejected(self, extractor, reference_date):
        """Test that a slash and a dot in one number are not a date"""
        assert extractor.extract("30/4.85", reference_date) == []

    @pytest.mark.unit
    @pytest.mark.parametrize("text", [
        "I moved on July 4th and left on 10/1/18",
        "see you next week Monday",
    ])
    def test_extracting_span_again(self, extractor, reference_date, text):
        """Test that each extracted span is found whole when extracted on its own"""
        for er in extractor.extract(text, reference_date):
            again = extractor.extract(er.text, reference_date)

            assert [(r.text, r.type) for r in again] == [(er.text, er.type)]

    @pytest.mark.unit
    def test_ago_span(self, extractor, saturday_reference):
        """Test duration with an ago marker"""
        results = extractor.extract("it happened 3 days ago", saturday_reference)

        assert [r.text for r in results] == ["3 days ago"]


class TestDateParser:
    """Test suite for DateParser"""

    @pytest.fixture
    def parse(self, culture_config, extract_and_parse):
        def _parse(text, reference):
            return extract_and_parse(culture_config.date_extractor, culture_config.date_parser, text, reference)
        return _parse

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", [
        ("today", datetime(2024, 6, 12)),
        ("tomorrow", datetime(2024, 6, 13)),
        ("yesterday", datetime(2024, 6, 11)),
        ("the day after tomorrow", datetime(2024, 6, 14)),
    ])
    def test_special_days(self, parse, reference_date, text, expected):
        """Test day words relative to the reference"""
        pr = parse(text, reference_date)

        assert pr.value.future_value == expected
        assert pr.value.past_value == expected
        assert pr.timex_str == expected.strftime("%Y-%m-%d")
        assert pr.value.future_resolution == {"date": expected.strftime("%Y-%m-%d")}

    @pytest.mark.unit
    def test_next_weekday(self, parse, reference_date):
        """Test that "next Friday" is the upcoming Friday"""
        pr = parse("next Friday", reference_date)

        assert pr.timex_str == "XXXX-WXX-5"
        assert pr.value.future_value == datetime(2024, 6, 14)

    @pytest.mark.unit
    def test_next_week_weekday(self, parse, reference_date):
        """Test weekday inside the following week"""
        pr = parse("next week Monday", reference_date)

        assert pr.timex_str == "2024-06-17"
        assert pr.value.future_value == datetime(2024, 6, 17)

    @pytest.mark.unit
    def test_last_weekday(self, parse, reference_date):
        """Test the most recent earlier Friday"""
        pr = parse("last Friday", reference_date)

        assert pr.timex_str == "XXXX-WXX-5"
        assert pr.value.future_value == datetime(2024, 6, 7)

    @pytest.mark.unit
    def test_bare_weekday_is_ambiguous(self, parse, reference_date):
        """Test future and past occurrences of a bare weekday"""
        pr = parse("Friday", reference_date)

        assert pr.timex_str == "XXXX-WXX-5"
        assert pr.value.future_value == datetime(2024, 6, 14)
        assert pr.value.past_value == datetime(2024, 6, 7)

    @pytest.mark.unit
    def test_days_ago(self, parse, saturday_reference):
        """Test ago resolves to the start of the day"""
        pr = parse("3 days ago", saturday_reference)

        assert pr.timex_str == "2024-06-12"
        assert pr.value.future_value == datetime(2024, 6, 12)

    @pytest.mark.unit
    def test_fractional_days_ago(self, parse, reference_date):
        """Test that a fractional day count still resolves to a whole day"""
        pr = parse("2.5 days ago", reference_date)

        assert pr.timex_str == "2024-06-09"
        assert pr.value.future_value == datetime(2024, 6, 9)

    @pytest.mark.unit
    def test_month_day_without_year(self, parse, reference_date):
        """Test a month and day resolve to both sides of the reference"""
        pr = parse("July 4th", reference_date)

        assert pr.timex_str == "XXXX-07-04"
        assert pr.value.future_value == datetime(2024, 7, 4)
        assert pr.value.past_value == datetime(2023, 7, 4)

    @pytest.mark.unit
    def test_full_date(self, parse, reference_date):
        """Test month name, day and year"""
        pr = parse("March 15, 2024", reference_date)

        assert pr.timex_str == "2024-03-15"
        assert pr.value.future_value == pr.value.past_value == datetime(2024, 3, 15)

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", [
        ("10/1/18", datetime(2018, 10, 1)),
        ("10/1/85", datetime(1985, 10, 1)),
    ])
    def test_two_digit_years(self, parse, reference_date, text, expected):
        """Test two digit year expansion in numeric dates"""
        pr = parse(text, reference_date)

        assert pr.value.future_value == expected
        assert pr.timex_str == expected.strftime("%Y-%m-%d")

    @pytest.mark.unit
    def test_day_of_month_still_ahead(self, parse):
        """Test that "the 27th" stays in the current month while ahead"""
        pr = parse("the 27th", datetime(2024, 6, 10))

        assert pr.timex_str == "XXXX-XX-27"
        assert pr.value.future_value == datetime(2024, 6, 27)
        assert pr.value.past_value == datetime(2024, 6, 27)

    @pytest.mark.unit
    def test_day_of_month_already_passed(self, parse):
        """Test that a passed day moves the future value to next month"""
        pr = parse("the 27th", datetime(2024, 6, 28))

        assert pr.value.future_value == datetime(2024, 7, 27)
        assert pr.value.past_value == datetime(2024, 6, 27)

    @pytest.mark.unit
    def test_weekday_of_month(self, parse, reference_date):
        """Test the nth weekday of a named month"""
        pr = parse("the second Sunday of May", reference_date)

        assert pr.timex_str == "XXXX-05-WXX-7-#2"
        assert pr.value.future_value == datetime(2025, 5, 11)
        assert pr.value.past_value == datetime(2024, 5, 12)

    @pytest.mark.unit
    def test_foreign_type_is_not_parsed(self, culture_config, reference_date):
        """Test that results of another type come back unresolved"""
        er = culture_config.duration_extractor.extract("3 days", reference_date)[0]
        pr = culture_config.date_parser.parse(er, reference_date)

        assert pr.value is None
        assert pr.timex_str == ""


class TestSwiftWords:
    """Test suite for relative word offsets"""

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", [
        ("today", 0),
        ("tomorrow", 1),
        ("the day after tomorrow", 2),
        ("yesterday", -1),
        ("day before yesterday", -2),
    ])
    def test_swift_day(self, text, expected):
        """Test day offsets"""
        assert get_swift_day(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", [
        ("next month", 1),
        ("coming year", 1),
        ("last year", -1),
        ("previous month", -1),
        ("this month", 0),
        ("", 0),
    ])
    def test_swift_month_or_year(self, text, expected):
        """Test month and year offsets"""
        assert get_swift_month_or_year(text) == expected

    @pytest.mark.unit
    def test_cardinal_last(self):
        """Test recognition of the last cardinal"""
        assert is_cardinal_last("last")
        assert not is_cardinal_last("second")
