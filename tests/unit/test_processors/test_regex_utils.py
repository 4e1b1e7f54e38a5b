"""
Unit tests for the structured regex match helpers.
"""

import pytest

from chronotext.processors.core.regex_utils import (
    compile_pattern, exact_match, get_matches, match_after_prefix, match_begin, match_end, search
)


class TestRegexMatch:
    """Test suite for RegexMatch group access"""

    @pytest.fixture
    def date_pattern(self):
        """Pattern with an optional named group"""
        return compile_pattern(r'(?<month>\d{1,2})/(?<day>\d{1,2})(?:/(?<year>\d{4}))?')

    @pytest.mark.unit
    def test_missing_group_reads_as_empty(self, date_pattern):
        """Test that absent and undefined groups are empty strings"""
        match = search(date_pattern, "due 6/12 please")

        assert match.group("month") == "6"
        assert match.group("year") == ""
        assert match.group("undefined") == ""
        assert not match.has_group("year")
        assert match.groups("year").index == -1

    @pytest.mark.unit
    def test_group_positions(self, date_pattern):
        """Test match and group offsets in the source"""
        match = search(date_pattern, "due 6/12/2024")

        assert match.index == 4
        assert match.end == 13
        assert match.groups("year").index == 9
        assert match.groups("year").length == 4

    @pytest.mark.unit
    def test_duplicate_group_captures(self):
        """Test that every capture of a duplicated name is kept"""
        pattern = compile_pattern(r'(?<hour>\d+)\s*-\s*(?<hour>\d+)')
        match = exact_match(pattern, "3 - 5")

        assert match.captures("hour") == ["3", "5"]

    @pytest.mark.unit
    def test_case_insensitive_by_default(self):
        """Test default compile flags"""
        assert search(compile_pattern(r'\bfriday\b'), "See you FRIDAY") is not None


class TestMatchHelpers:
    """Test suite for anchored matching helpers"""

    @pytest.fixture
    def word_pattern(self):
        return compile_pattern(r'\b(?:from|to)\b')

    @pytest.mark.unit
    def test_get_matches_on_empty_source(self, word_pattern):
        """Test that an empty source yields no matches"""
        assert get_matches(word_pattern, "") == []

    @pytest.mark.unit
    def test_exact_match_trims(self, word_pattern):
        """Test whole-string matching with surrounding blanks"""
        match = exact_match(word_pattern, "  from ")
        assert match is not None
        assert match.index == 2
        assert exact_match(word_pattern, "  from ", trim=False) is None
        assert exact_match(word_pattern, "from here") is None

    @pytest.mark.unit
    def test_match_begin_supports_caret(self):
        """Test that patterns anchored with ^ match after leading blanks"""
        pattern = compile_pattern(r'^ago\b')
        match = match_begin(pattern, "   ago and more")

        assert match is not None
        assert match.index == 3
        assert match.end == 6

    @pytest.mark.unit
    def test_match_end_prefers_longest(self):
        """Test that the leftmost match ending at the end is chosen"""
        pattern = compile_pattern(r'(?:the\s+)?past')
        match = match_end(pattern, "over the past ")

        assert match.value == "the past"
        assert match.index == 5

    @pytest.mark.unit
    def test_match_end_requires_end(self, word_pattern):
        """Test that a match must reach the end of the text"""
        assert match_end(word_pattern, "from here") is None

    @pytest.mark.unit
    def test_match_after_prefix(self):
        """Test lookbehind patterns read behind a synthetic prefix"""
        pattern = compile_pattern(r'(?<=\bon\s+)(?<day>\d{1,2})(?:st|nd|rd|th)?')
        match = match_after_prefix(pattern, "on ", "5th")

        assert match is not None
        assert match.group("day") == "5"
        assert match.index == 0
        assert match.groups("day").index == 0
        assert match_after_prefix(pattern, "at ", "5th") is None
