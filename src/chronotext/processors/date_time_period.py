"""Date-time period extraction and parsing.

Covers a date combined with a time range or a part of the day ("Friday
from 3 to 5pm", "tomorrow morning"), "tonight"/"last night", two date-time
points ("from today 9am to tomorrow 5pm") and hour-scale durations around
the reference ("the past 3 hours", "next 30 minutes").
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Mapping, Optional, Pattern, Sequence, Tuple

from .core.ago_later import shift_by_unit
from .core.base import BaseDateTimeExtractor, BaseDateTimeParser, ParseStrategy
from .core.constants import Constants, TimeTypeConstants
from .core.date_utils import add_days, to_date_start
from .core.regex_utils import exact_match, get_matches, match_end, search
from .core.results import DateTimeParseResult, DateTimeResolutionResult, ExtractResult
from .core.timex_utils import format_date_time, generate_seconds_timex, luis_date_from_datetime, luis_date_time
from .core.tokens import Token, merge_all_tokens

SPECIFIC_DAY_SWIFT = {"this": 0, "last": -1, "next": 1}


@dataclass(frozen=True)
class DateTimePeriodExtractorConfiguration:
    date_extractor: BaseDateTimeExtractor
    time_period_extractor: BaseDateTimeExtractor
    date_time_extractor: BaseDateTimeExtractor
    duration_extractor: BaseDateTimeExtractor
    connector_regex: Pattern
    till_regex: Pattern
    range_connector_regex: Pattern
    from_regex: Pattern
    between_regex: Pattern
    specific_time_of_day_regex: Pattern
    past_prefix_regex: Pattern
    future_prefix_regex: Pattern
    time_unit_regex: Pattern


@dataclass(frozen=True)
class DateTimePeriodParserConfiguration:
    date_extractor: BaseDateTimeExtractor
    date_parser: BaseDateTimeParser
    time_period_extractor: BaseDateTimeExtractor
    time_period_parser: BaseDateTimeParser
    date_time_extractor: BaseDateTimeExtractor
    date_time_parser: BaseDateTimeParser
    duration_extractor: BaseDateTimeExtractor
    duration_parser: BaseDateTimeParser
    connector_regex: Pattern
    till_regex: Pattern
    range_connector_regex: Pattern
    specific_time_of_day_regex: Pattern
    past_prefix_regex: Pattern
    future_prefix_regex: Pattern
    unit_regex: Pattern
    unit_map: Mapping[str, str]
    time_of_day_map: Mapping[str, Tuple[str, int, int]]


class DateTimePeriodExtractor(BaseDateTimeExtractor):
    """Finds date-time range spans."""

    extractor_type_name = Constants.SYS_DATETIME_DATETIMEPERIOD

    def __init__(self, config: DateTimePeriodExtractorConfiguration):
        super().__init__()
        self.config = config

    def extract(self, source: str, reference: Optional[datetime] = None) -> List[ExtractResult]:
        if not source or not source.strip():
            return []

        reference = reference or datetime.now()
        tokens: List[Token] = []
        tokens.extend(self.merge_two_time_points(source, reference))
        tokens.extend(self.merge_date_and_time_period(source, reference))
        tokens.extend(Token(m.index, m.end) for m in get_matches(self.config.specific_time_of_day_regex, source))
        tokens.extend(self.match_duration(source, reference))

        return merge_all_tokens(tokens, source, self.extractor_type_name)

    def merge_two_time_points(self, source: str, reference: datetime) -> List[Token]:
        points = self.config.date_time_extractor.extract(source, reference)
        tokens = []
        idx = 0
        while idx < len(points) - 1:
            first, second = points[idx], points[idx + 1]
            middle = source[first.end:second.start]
            before = source[:first.start]

            if search(self.config.till_regex, middle):
                from_match = match_end(self.config.from_regex, before)
                tokens.append(Token(from_match.index if from_match else first.start, second.end,
                                    data=[first, second]))
                idx += 2
                continue

            if search(self.config.range_connector_regex, middle):
                between_match = match_end(self.config.between_regex, before)
                if between_match:
                    tokens.append(Token(between_match.index, second.end, data=[first, second]))
                    idx += 2
                    continue
            idx += 1
        return tokens

    def merge_date_and_time_period(self, source: str, reference: datetime) -> List[Token]:
        """"tomorrow from 3 to 5pm", "friday evening", "the morning of may 5"."""
        points = sorted(
            self.config.date_extractor.extract(source, reference)
            + self.config.time_period_extractor.extract(source, reference),
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

    def match_duration(self, source: str, reference: datetime) -> List[Token]:
        """"the past 3 hours", "within the next 30 minutes"."""
        tokens = []
        for er in self.config.duration_extractor.extract(source, reference):
            if search(self.config.time_unit_regex, er.text) is None:
                continue
            before = source[:er.start]
            prefix = (match_end(self.config.past_prefix_regex, before)
                      or match_end(self.config.future_prefix_regex, before))
            if prefix:
                tokens.append(Token(prefix.index, er.end))
        return tokens


class DateTimePeriodParser(BaseDateTimeParser):
    """Resolves date-time ranges."""

    parser_type_name = Constants.SYS_DATETIME_DATETIMEPERIOD

    def __init__(self, config: DateTimePeriodParserConfiguration):
        super().__init__()
        self.config = config

    def strategies(self) -> Sequence[ParseStrategy]:
        return (
            self.parse_specific_time_of_day,
            self.merge_date_and_time_period,
            self.merge_two_time_points,
            self.parse_duration,
        )

    def build_resolution(self, value) -> Dict[str, str]:
        begin, end = value
        return {
            TimeTypeConstants.START_DATETIME: format_date_time(begin),
            TimeTypeConstants.END_DATETIME: format_date_time(end),
        }

    def parse_specific_time_of_day(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"tonight", "this morning", "last night"."""
        match = exact_match(self.config.specific_time_of_day_regex, text)
        if match is None:
            return None

        if match.group("tonight"):
            day, name = to_date_start(reference), "night"
        else:
            swift = SPECIFIC_DAY_SWIFT[match.group("order").lower()]
            day, name = add_days(to_date_start(reference), swift), match.group("timeOfDay").lower()

        code, begin_hour, end_hour = self.config.time_of_day_map[name]
        begin = day + timedelta(hours=begin_hour)
        end = day + timedelta(hours=end_hour)
        return DateTimeResolutionResult.resolved(f"{luis_date_from_datetime(day)}{code}", (begin, end))

    def merge_date_and_time_period(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        date_ers = self.config.date_extractor.extract(text, reference)
        time_period_ers = self.config.time_period_extractor.extract(text, reference)
        if len(date_ers) != 1 or len(time_period_ers) != 1:
            return None

        date_er, time_period_er = date_ers[0], time_period_ers[0]
        if date_er.overlaps(time_period_er):
            return None
        first, second = sorted((date_er, time_period_er), key=lambda er: er.start)
        if exact_match(self.config.connector_regex, text[first.end:second.start], trim=False) is None:
            return None

        date_pr = self.config.date_parser.parse(date_er, reference)
        time_period_pr = self.config.time_period_parser.parse(time_period_er, reference)
        if date_pr.value is None or time_period_pr.value is None:
            return None

        reference_day = to_date_start(reference)
        begin_offset, end_offset = (value - reference_day for value in time_period_pr.value.future_value)

        def on_day(day: datetime) -> Tuple[datetime, datetime]:
            start = to_date_start(day)
            return start + begin_offset, start + end_offset

        return DateTimeResolutionResult.resolved(
            self._combine_timex(date_pr.timex_str, time_period_pr.timex_str),
            on_day(date_pr.value.future_value),
            on_day(date_pr.value.past_value),
            mod=time_period_pr.value.mod,
            comment=time_period_pr.value.comment,
            sub_date_time_entities=[date_pr, time_period_pr]
        )

    @staticmethod
    def _combine_timex(date_timex: str, time_period_timex: str) -> str:
        """Prefix each time of a time range timex with the date timex."""
        if not time_period_timex.startswith("("):
            return f"{date_timex}{time_period_timex}"
        begin, end, duration = time_period_timex[1:-1].split(",")
        return f"({date_timex}{begin},{date_timex}{end},{duration})"

    def merge_two_time_points(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"from today 9am to tomorrow 5pm"."""
        ers = self.config.date_time_extractor.extract(text, reference)
        if len(ers) != 2:
            return None

        middle = text[ers[0].end:ers[1].start]
        if not (search(self.config.till_regex, middle) or search(self.config.range_connector_regex, middle)):
            return None

        first: DateTimeParseResult = self.config.date_time_parser.parse(ers[0], reference)
        second: DateTimeParseResult = self.config.date_time_parser.parse(ers[1], reference)
        if first.value is None or second.value is None:
            return None

        future_begin, future_end = first.value.future_value, second.value.future_value
        past_begin, past_end = first.value.past_value, second.value.past_value
        if future_begin > future_end:
            future_begin = past_begin
        if past_end < past_begin:
            past_end = future_end
        if future_end <= future_begin:
            return None

        duration = generate_seconds_timex((future_end - future_begin).total_seconds())
        return DateTimeResolutionResult.resolved(
            f"({first.timex_str},{second.timex_str},{duration})",
            (future_begin, future_end), (past_begin, past_end),
            sub_date_time_entities=[first, second]
        )

    def parse_duration(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"the past 3 hours", "the next 30 minutes"."""
        ers = self.config.duration_extractor.extract(text, reference)
        if len(ers) != 1:
            return None

        er = ers[0]
        duration_pr = self.config.duration_parser.parse(er, reference)
        if duration_pr.value is None:
            return None

        unit_match = search(self.config.unit_regex, er.text)
        unit = self.config.unit_map.get(unit_match.group("unit").lower()) if unit_match else None
        if unit not in ("H", "M", "S"):
            return None

        amount = float(duration_pr.value.timex[2:-1])
        before = text[:er.start]
        if match_end(self.config.past_prefix_regex, before):
            begin, end = shift_by_unit(reference, unit, -amount), reference
        elif match_end(self.config.future_prefix_regex, before):
            begin, end = reference, shift_by_unit(reference, unit, amount)
        else:
            return None

        timex = f"({luis_date_time(begin)},{luis_date_time(end)},{duration_pr.value.timex})"
        return DateTimeResolutionResult.resolved(timex, (begin, end), sub_date_time_entities=[duration_pr])
