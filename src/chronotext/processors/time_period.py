"""Time period extraction and parsing.

Hour ranges sharing an am/pm marker ("3-5pm", "between 9 and 11am"), two
times joined by a connector ("from 9:30 am to 11") and named parts of the
day ("morning", "late afternoon", "business hours").
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Mapping, Optional, Pattern, Sequence, Tuple

from .core.base import BaseDateTimeParser, BaseDateTimeExtractor, ParseStrategy
from .core.constants import Constants, TimeTypeConstants
from .core.date_utils import to_date_start
from .core.regex_utils import exact_match, get_matches, match_end, search
from .core.results import DateTimeResolutionResult, ExtractResult
from .core.timex_utils import format_time, generate_seconds_timex, short_time_timex, time_timex
from .core.tokens import Token, merge_all_tokens


@dataclass(frozen=True)
class TimePeriodExtractorConfiguration:
    simple_cases_regexes: Tuple[Pattern, ...]
    time_of_day_regex: Pattern
    till_regex: Pattern
    range_connector_regex: Pattern
    from_regex: Pattern
    between_regex: Pattern
    time_extractor: BaseDateTimeExtractor


@dataclass(frozen=True)
class TimePeriodParserConfiguration:
    simple_cases_regexes: Tuple[Pattern, ...]
    time_of_day_regex: Pattern
    till_regex: Pattern
    range_connector_regex: Pattern
    time_of_day_map: Mapping[str, Tuple[str, int, int]]
    time_extractor: BaseDateTimeExtractor
    time_parser: BaseDateTimeParser


def _at_hour(day: datetime, hour: int) -> datetime:
    """``day`` at ``hour``, where 24 is the following midnight."""
    return day + timedelta(hours=hour)


def time_range_timex(begin: datetime, end: datetime, begin_timex: str = "", end_timex: str = "") -> str:
    """``(Tbegin,Tend,PT<n>H)`` for a resolved time range."""
    begin_timex = begin_timex or short_time_timex(begin)
    end_timex = end_timex or short_time_timex(end)
    return f"({begin_timex},{end_timex},{generate_seconds_timex((end - begin).total_seconds())})"


class TimePeriodExtractor(BaseDateTimeExtractor):
    """Finds time range spans."""

    extractor_type_name = Constants.SYS_DATETIME_TIMEPERIOD

    def __init__(self, config: TimePeriodExtractorConfiguration):
        super().__init__()
        self.config = config

    def extract(self, source: str, reference: Optional[datetime] = None) -> List[ExtractResult]:
        if not source or not source.strip():
            return []

        tokens: List[Token] = []
        for pattern in (*self.config.simple_cases_regexes, self.config.time_of_day_regex):
            tokens.extend(Token(m.index, m.end) for m in get_matches(pattern, source))
        tokens.extend(self.merge_two_time_points(source, reference))

        return merge_all_tokens(tokens, source, self.extractor_type_name)

    def merge_two_time_points(self, source: str, reference: Optional[datetime]) -> List[Token]:
        points = self.config.time_extractor.extract(source, reference)
        tokens = []
        idx = 0
        while idx < len(points) - 1:
            first, second = points[idx], points[idx + 1]
            middle = source[first.end:second.start]
            before = source[:first.start]

            if search(self.config.till_regex, middle):
                begin = first.start
                from_match = match_end(self.config.from_regex, before)
                if from_match:
                    begin = from_match.index
                tokens.append(Token(begin, second.end, data=[first, second]))
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


class TimePeriodParser(BaseDateTimeParser):
    """Resolves time ranges on the reference day."""

    parser_type_name = Constants.SYS_DATETIME_TIMEPERIOD

    def __init__(self, config: TimePeriodParserConfiguration):
        super().__init__()
        self.config = config

    def strategies(self) -> Sequence[ParseStrategy]:
        return (self.parse_simple_cases, self.merge_two_time_points, self.parse_time_of_day)

    def build_resolution(self, value) -> Dict[str, str]:
        begin, end = value
        return {
            TimeTypeConstants.START_TIME: format_time(begin),
            TimeTypeConstants.END_TIME: format_time(end),
        }

    def parse_simple_cases(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"3-5pm", "from 9am to 11am", "between 3 and 5"."""
        match = None
        for pattern in self.config.simple_cases_regexes:
            match = exact_match(pattern, text)
            if match:
                break
        if match is None:
            return None

        hours = [int(hour) for hour in match.captures("hour")]
        if len(hours) != 2:
            return None
        begin_hour, end_hour = hours

        left_desc = match.group("leftDesc").lower()
        right_desc = match.group("rightDesc").lower()

        if right_desc.startswith("p"):
            if end_hour < 12:
                end_hour += 12
            if not left_desc and begin_hour < 12 and begin_hour + 12 <= end_hour:
                begin_hour += 12
        elif right_desc.startswith("a") and end_hour == 12:
            end_hour = 0

        if left_desc.startswith("p") and begin_hour < 12:
            begin_hour += 12
        elif left_desc.startswith("a") and begin_hour == 12:
            begin_hour = 0

        if begin_hour > 24 or end_hour > 24:
            return None

        day = to_date_start(reference)
        begin = _at_hour(day, begin_hour)
        end = _at_hour(day, end_hour)
        if end <= begin:
            end += timedelta(days=1)

        comment = ""
        if not left_desc and not right_desc and begin_hour <= 12 and end_hour <= 12:
            comment = Constants.COMMENT_AMPM

        timex = time_range_timex(begin, end, time_timex(begin_hour % 24), time_timex(end_hour % 24))
        return DateTimeResolutionResult.resolved(timex, (begin, end), comment=comment)

    def merge_two_time_points(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"from 9:30 am to 11", "between noon and 2pm"."""
        ers = self.config.time_extractor.extract(text, reference)
        if len(ers) != 2:
            return None

        middle = text[ers[0].end:ers[1].start]
        if not (search(self.config.till_regex, middle) or search(self.config.range_connector_regex, middle)):
            return None

        first = self.config.time_parser.parse(ers[0], reference)
        second = self.config.time_parser.parse(ers[1], reference)
        if first.value is None or second.value is None:
            return None

        begin = first.value.future_value
        end = second.value.future_value
        first_ambiguous = first.value.comment == Constants.COMMENT_AMPM
        second_ambiguous = second.value.comment == Constants.COMMENT_AMPM

        # "from 3 to 5pm": an unmarked begin follows the marked end
        if first_ambiguous and not second_ambiguous and end.hour >= 12 and begin.hour + 12 <= end.hour:
            begin += timedelta(hours=12)
        # "from 10am to 2": the unmarked end is the later afternoon hour
        elif second_ambiguous and not first_ambiguous and end < begin and end.hour < 12:
            end += timedelta(hours=12)

        if end <= begin:
            end += timedelta(days=1)

        comment = Constants.COMMENT_AMPM if first_ambiguous and second_ambiguous else ""
        timex = time_range_timex(begin, end, short_time_timex(begin), short_time_timex(end))
        return DateTimeResolutionResult.resolved(
            timex, (begin, end), comment=comment, sub_date_time_entities=[first, second]
        )

    def parse_time_of_day(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"morning", "early afternoon", "business hours"."""
        match = exact_match(self.config.time_of_day_regex, text)
        if match is None:
            return None

        name = " ".join(match.group("timeOfDay").lower().split())
        code, begin_hour, end_hour = self.config.time_of_day_map[name]

        mod = ""
        half = (end_hour - begin_hour) // 2
        if match.group("early"):
            end_hour = begin_hour + half
            mod = Constants.EARLY_MOD
        elif match.group("late"):
            begin_hour = begin_hour + half
            mod = Constants.LATE_MOD

        day = to_date_start(reference)
        return DateTimeResolutionResult.resolved(
            code, (_at_hour(day, begin_hour), _at_hour(day, end_hour)), mod=mod
        )
