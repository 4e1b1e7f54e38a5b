"""
Unit tests for the token merge step and the result records.
"""

import pytest

from chronotext.processors.core.results import (
    DateTimeParseResult, DateTimeResolutionResult, ExtractResult
)
from chronotext.processors.core.tokens import Token, merge_all_tokens


class TestMergeAllTokens:
    """Test suite for merge_all_tokens"""

    @pytest.mark.unit
    def test_empty_token_list(self):
        """Test that no tokens produce no results"""
        assert merge_all_tokens([], "some text", "date") == []

    @pytest.mark.unit
    def test_overlapping_tokens_are_unioned(self):
        """Test that overlapping spans become one result"""
        source = "see you next friday then"
        tokens = [Token(8, 19), Token(13, 19)]

        results = merge_all_tokens(tokens, source, "date")

        assert len(results) == 1
        assert results[0].text == "next friday"
        assert results[0].start == 8
        assert results[0].length == 11
        assert results[0].type == "date"

    @pytest.mark.unit
    def test_partial_overlap_extends_span(self):
        """Test that a token running past the previous one extends the span"""
        source = "from may 1 to may 7"
        results = merge_all_tokens([Token(5, 10), Token(9, 19)], source, "daterange")

        assert [r.text for r in results] == ["may 1 to may 7"]

    @pytest.mark.unit
    def test_results_never_overlap(self):
        """Test that merged results are disjoint and ordered"""
        source = "a b c d e f g h i j"
        tokens = [Token(10, 13), Token(0, 3), Token(2, 5), Token(12, 15), Token(16, 19)]

        results = merge_all_tokens(tokens, source, "date")

        for first, second in zip(results, results[1:]):
            assert first.end <= second.start
        assert [r.start for r in results] == sorted(r.start for r in results)

    @pytest.mark.unit
    def test_whitespace_is_trimmed(self):
        """Test that leading and trailing blanks are not part of the result"""
        source = "on   monday  "
        results = merge_all_tokens([Token(2, 13)], source, "date")

        assert results[0].text == "monday"
        assert results[0].start == 5

    @pytest.mark.unit
    def test_blank_and_empty_tokens_are_dropped(self):
        """Test that spans without text are discarded"""
        source = "a    b"
        results = merge_all_tokens([Token(1, 4), Token(3, 3)], source, "date")

        assert results == []

    @pytest.mark.unit
    def test_data_kept_only_for_full_span_token(self):
        """Test that token data survives only when one token covers the merge"""
        source = "between monday and friday"
        payload = ["monday", "friday"]

        kept = merge_all_tokens([Token(0, 25, data=payload), Token(8, 14)], source, "daterange")
        assert kept[0].data == payload

        lost = merge_all_tokens([Token(0, 14, data=payload), Token(8, 25)], source, "daterange")
        assert lost[0].data is None


class TestResultRecords:
    """Test suite for ExtractResult and resolution records"""

    @pytest.mark.unit
    def test_extract_result_geometry(self):
        """Test end, overlap and cover helpers"""
        first = ExtractResult(start=0, length=5, text="hello", type="date")
        second = ExtractResult(start=3, length=4, text="lo w", type="time")
        third = ExtractResult(start=5, length=2, text=" w", type="time")

        assert first.end == 5
        assert first.overlaps(second)
        assert not first.overlaps(third)
        assert ExtractResult(0, 10, "x" * 10, "date").covers(second)

    @pytest.mark.unit
    def test_resolved_defaults_past_to_future(self):
        """Test that a single value fills both sides"""
        result = DateTimeResolutionResult.resolved("PT1H", 3600)

        assert result.success
        assert result.future_value == 3600
        assert result.past_value == 3600

    @pytest.mark.unit
    def test_parse_result_is_immutable(self):
        """Test that parse results cannot be modified after construction"""
        er = ExtractResult.from_text("today", "date")
        pr = DateTimeParseResult.from_extract_result(er)

        assert pr.value is None
        assert pr.timex_str == ""
        assert pr.resolution_str == ""
        with pytest.raises(Exception):
            pr.timex_str = "2024-06-12"
