"""Date-time extraction and parsing.

A date followed or preceded by a time ("tomorrow at 5pm", "3pm on
Friday"), "now", and hour/minute/second durations anchored to the
reference ("2 hours ago", "in 30 minutes").
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Mapping, Optional, Pattern, Sequence

from .core.ago_later import (
    AgoLaterMode, DateTimeUtilityConfiguration, extract_duration_with_before_and_after,
    parse_duration_with_ago_and_later
)
from .core.base import BaseDateTimeParser, BaseDateTimeExtractor, ParseStrategy
from .core.constants import Constants, TimeTypeConstants
from .core.regex_utils import exact_match, get_matches, search
from .core.results import DateTimeParseResult, DateTimeResolutionResult, ExtractResult
from .core.timex_utils import format_date_time
from .core.tokens import Token, merge_all_tokens


@dataclass(frozen=True)
class DateTimeExtractorConfiguration:
    date_point_extractor: BaseDateTimeExtractor
    time_point_extractor: BaseDateTimeExtractor
    duration_extractor: BaseDateTimeExtractor
    connector_regex: Pattern
    now_regex: Pattern
    utility_configuration: DateTimeUtilityConfiguration


@dataclass(frozen=True)
class DateTimeParserConfiguration:
    date_extractor: BaseDateTimeExtractor
    date_parser: BaseDateTimeParser
    time_extractor: BaseDateTimeExtractor
    time_parser: BaseDateTimeParser
    duration_extractor: BaseDateTimeExtractor
    duration_parser: BaseDateTimeParser
    connector_regex: Pattern
    now_regex: Pattern
    unit_map: Mapping[str, str]
    unit_regex: Pattern
    utility_configuration: DateTimeUtilityConfiguration


def combine_date_and_time(date_value: datetime, time_value: datetime) -> datetime:
    return datetime(date_value.year, date_value.month, date_value.day,
                    time_value.hour, time_value.minute, time_value.second)


class DateTimeExtractor(BaseDateTimeExtractor):
    """Finds date-time spans."""

    extractor_type_name = Constants.SYS_DATETIME_DATETIME

    def __init__(self, config: DateTimeExtractorConfiguration):
        super().__init__()
        self.config = config

    def extract(self, source: str, reference: Optional[datetime] = None) -> List[ExtractResult]:
        if not source or not source.strip():
            return []

        reference = reference or datetime.now()
        tokens: List[Token] = []
        tokens.extend(self.merge_date_and_time(source, reference))
        tokens.extend(Token(m.index, m.end) for m in get_matches(self.config.now_regex, source))
        tokens.extend(self.time_duration_with_before_and_after(source, reference))

        return merge_all_tokens(tokens, source, self.extractor_type_name)

    def merge_date_and_time(self, source: str, reference: datetime) -> List[Token]:
        """Adjacent date and time in either order, joined by at most a connector."""
        points = sorted(
            self.config.date_point_extractor.extract(source, reference)
            + self.config.time_point_extractor.extract(source, reference),
            key=lambda er: er.start
        )

        tokens = []
        idx = 0
        while idx < len(points) - 1:
            first, second = points[idx], points[idx + 1]
            if first.type != second.type and first.end <= second.start:
                middle = source[first.end:second.start]
                if exact_match(self.config.connector_regex, middle, trim=False):
                    tokens.append(Token(first.start, second.end))
                    idx += 2
                    continue
            idx += 1
        return tokens

    def time_duration_with_before_and_after(self, source: str, reference: datetime) -> List[Token]:
        """"2 hours ago", "in 30 minutes"."""
        tokens = []
        for er in self.config.duration_extractor.extract(source, reference):
            if search(self.config.utility_configuration.time_unit_regex, er.text) is None:
                continue
            token = extract_duration_with_before_and_after(source, er, self.config.utility_configuration)
            if token:
                tokens.append(token)
        return tokens


class DateTimeParser(BaseDateTimeParser):
    """Resolves date-time spans to points in time."""

    parser_type_name = Constants.SYS_DATETIME_DATETIME

    def __init__(self, config: DateTimeParserConfiguration):
        super().__init__()
        self.config = config

    def strategies(self) -> Sequence[ParseStrategy]:
        return (self.parse_now, self.merge_date_and_time, self.parse_ago_later)

    def build_resolution(self, value) -> Dict[str, str]:
        return {TimeTypeConstants.DATETIME: format_date_time(value)}

    def parse_now(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        if exact_match(self.config.now_regex, text) is None:
            return None
        return DateTimeResolutionResult.resolved(Constants.TIMEX_PRESENT_REF, reference)

    def merge_date_and_time(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        date_ers = self.config.date_extractor.extract(text, reference)
        time_ers = self.config.time_extractor.extract(text, reference)
        if len(date_ers) != 1 or len(time_ers) != 1:
            return None

        date_er, time_er = date_ers[0], time_ers[0]
        if date_er.overlaps(time_er):
            return None
        first, second = sorted((date_er, time_er), key=lambda er: er.start)
        if exact_match(self.config.connector_regex, text[first.end:second.start], trim=False) is None:
            return None
        if text[:first.start].strip() or text[second.end:].strip():
            return None

        date_pr = self.config.date_parser.parse(date_er, reference)
        time_pr = self.config.time_parser.parse(time_er, reference)
        if date_pr.value is None or time_pr.value is None:
            return None

        return self._combine(date_pr, time_pr)

    @staticmethod
    def _combine(date_pr: DateTimeParseResult, time_pr: DateTimeParseResult) -> DateTimeResolutionResult:
        time_value = time_pr.value.future_value
        return DateTimeResolutionResult.resolved(
            f"{date_pr.timex_str}{time_pr.timex_str}",
            combine_date_and_time(date_pr.value.future_value, time_value),
            combine_date_and_time(date_pr.value.past_value, time_value),
            comment=time_pr.value.comment,
            sub_date_time_entities=[date_pr, time_pr]
        )

    def parse_ago_later(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        return parse_duration_with_ago_and_later(
            text, reference,
            self.config.duration_extractor,
            self.config.duration_parser,
            self.config.unit_map,
            self.config.unit_regex,
            self.config.utility_configuration,
            AgoLaterMode.DATETIME
        )
