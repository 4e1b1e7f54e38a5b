"""Date period extraction and parsing.

A date period is an end-exclusive ``[begin, end)`` day interval: "May 1 to
7", "this week", "Q1 2023", "the summer of 2024", "the past 3 weeks",
"from next Friday to the 20th". Ambiguous periods resolve to a future and a
past interval the same way single dates do.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Mapping, Optional, Pattern, Sequence, Tuple

from .core.ago_later import shift_by_unit
from .core.base import BaseDateTimeParser, BaseDateTimeExtractor, ParseStrategy
from .core.constants import Constants, TimeTypeConstants
from .core.date_utils import (
    add_days, add_months, first_weekday_of_month, is_default_value, is_feb_29, iso_week,
    monday_of_iso_week, safe_create_from_min_value, this_weekday, to_date_start
)
from .core.regex_utils import exact_match, get_matches, match_after_prefix, match_begin, match_end, search
from .core.results import DateTimeParseResult, DateTimeResolutionResult, ExtractResult
from .core.timex_utils import (
    format_date, generate_date_period_timex, luis_date, luis_date_from_datetime,
    merge_timex_alternatives
)
from .core.tokens import Token, merge_all_tokens

Period = Tuple[datetime, datetime]


@dataclass(frozen=True)
class DatePeriodExtractorConfiguration:
    simple_cases_regexes: Tuple[Pattern, ...]
    year_regex: Pattern
    illegal_year_regex: Pattern
    till_regex: Pattern
    range_connector_regex: Pattern
    from_regex: Pattern
    between_regex: Pattern
    now_regex: Pattern
    past_prefix_regex: Pattern
    future_prefix_regex: Pattern
    week_of_regex: Pattern
    month_of_regex: Pattern
    month_regex: Pattern
    date_unit_regex: Pattern
    date_point_extractor: BaseDateTimeExtractor
    duration_extractor: BaseDateTimeExtractor


@dataclass(frozen=True)
class DatePeriodParserConfiguration:
    simple_cases_regexes: Tuple[Pattern, ...]
    month_with_year_regex: Pattern
    month_num_with_year_regex: Pattern
    month_range_regex: Pattern
    one_word_period_regex: Pattern
    year_to_date_regex: Pattern
    month_to_date_regex: Pattern
    year_regex: Pattern
    week_of_month_regex: Pattern
    week_of_year_regex: Pattern
    half_year_regex: Pattern
    half_year_relative_regex: Pattern
    quarter_regex: Pattern
    quarter_year_front_regex: Pattern
    relative_quarter_regex: Pattern
    season_regex: Pattern
    which_week_regex: Pattern
    week_of_regex: Pattern
    month_of_regex: Pattern
    month_regex: Pattern
    rest_of_regex: Pattern
    week_with_weekday_range_regex: Pattern
    weekday_search_regex: Pattern
    till_regex: Pattern
    range_connector_regex: Pattern
    now_regex: Pattern
    past_prefix_regex: Pattern
    future_prefix_regex: Pattern
    unit_regex: Pattern
    month_of_year: Mapping[str, int]
    day_of_month: Mapping[str, int]
    day_of_week: Mapping[str, int]
    cardinal_map: Mapping[str, int]
    season_map: Mapping[str, str]
    season_months: Mapping[str, Tuple[int, int]]
    unit_map: Mapping[str, str]
    date_extractor: BaseDateTimeExtractor
    date_parser: BaseDateTimeParser
    duration_extractor: BaseDateTimeExtractor
    duration_parser: BaseDateTimeParser
    get_swift_month_or_year: Callable[[str], int]
    is_cardinal_last: Callable[[str], bool]
    inclusive_end_period: bool = False


def _nearest_year_period(reference_day: datetime, build: Callable[[int], Period]) -> Tuple[Period, Period]:
    """Future and past occurrences of a yearly recurring period.

    The future period is the first one not yet over at the reference day,
    the past period the last one already begun.
    """
    future = past = None
    for year in range(reference_day.year - 1, reference_day.year + 2):
        begin, end = build(year)
        if future is None and end > reference_day:
            future = (begin, end)
        if begin <= reference_day:
            past = (begin, end)
    return future, past


def _week_timex(monday: datetime) -> str:
    year, week = iso_week(monday)
    return f"{year:04d}-W{week:02d}"


class DatePeriodExtractor(BaseDateTimeExtractor):
    """Finds date range spans."""

    extractor_type_name = Constants.SYS_DATETIME_DATEPERIOD

    def __init__(self, config: DatePeriodExtractorConfiguration):
        super().__init__()
        self.config = config

    def extract(self, source: str, reference: Optional[datetime] = None) -> List[ExtractResult]:
        if not source or not source.strip():
            return []

        reference = reference or datetime.now()
        tokens: List[Token] = []
        tokens.extend(self.match_simple_cases(source))
        tokens.extend(self.match_year(source))
        tokens.extend(self.merge_two_time_points(source, reference))
        tokens.extend(self.match_duration(source, reference))
        tokens.extend(self.single_time_point_with_patterns(source, reference))

        return merge_all_tokens(tokens, source, self.extractor_type_name)

    def match_simple_cases(self, source: str) -> List[Token]:
        tokens = []
        for pattern in self.config.simple_cases_regexes:
            tokens.extend(Token(m.index, m.end) for m in get_matches(pattern, source))
        return tokens

    def match_year(self, source: str) -> List[Token]:
        """Bare four digit years, skipping amounts and decimals."""
        tokens = []
        for match in get_matches(self.config.year_regex, source):
            if search(self.config.illegal_year_regex, source[:match.index]):
                continue
            year = int(match.group("year"))
            if Constants.MIN_YEAR_NUM <= year <= Constants.MAX_YEAR_NUM:
                tokens.append(Token(match.index, match.end))
        return tokens

    def merge_two_time_points(self, source: str, reference: datetime) -> List[Token]:
        """Join two dates linked by "to"/"till" or by "between ... and"."""
        points = list(self.config.date_point_extractor.extract(source, reference))
        for match in get_matches(self.config.now_regex, source):
            points.append(ExtractResult(match.index, match.length, match.value, Constants.SYS_DATETIME_DATE))
        points.sort(key=lambda er: er.start)

        tokens = []
        idx = 0
        while idx < len(points) - 1:
            first, second = points[idx], points[idx + 1]
            if first.end >= second.start:
                idx += 1
                continue

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

    def match_duration(self, source: str, reference: datetime) -> List[Token]:
        """"the past 3 weeks", "within the next 2 months"."""
        tokens = []
        for er in self.config.duration_extractor.extract(source, reference):
            if search(self.config.date_unit_regex, er.text) is None:
                continue
            before = source[:er.start]
            prefix = (match_end(self.config.past_prefix_regex, before)
                      or match_end(self.config.future_prefix_regex, before))
            if prefix:
                tokens.append(Token(prefix.index, er.end))
        return tokens

    def single_time_point_with_patterns(self, source: str, reference: datetime) -> List[Token]:
        """"week of July 4th", "month of the 5th", "the month of May"."""
        tokens = []
        for er in self.config.date_point_extractor.extract(source, reference):
            before = source[:er.start]
            for pattern in (self.config.week_of_regex, self.config.month_of_regex):
                match = match_end(pattern, before)
                if match:
                    tokens.append(Token(match.index, er.end))

        for month in get_matches(self.config.month_regex, source):
            match = match_end(self.config.month_of_regex, source[:month.index])
            if match:
                tokens.append(Token(match.index, month.end))
        return tokens


class DatePeriodParser(BaseDateTimeParser):
    """Resolves date ranges to future and past day intervals."""

    parser_type_name = Constants.SYS_DATETIME_DATEPERIOD

    def __init__(self, config: DatePeriodParserConfiguration):
        super().__init__()
        self.config = config

    def strategies(self) -> Sequence[ParseStrategy]:
        return (
            self.parse_month_with_year,
            self.parse_simple_case,
            self.parse_month_range,
            self.parse_one_word_period,
            self.parse_week_with_weekday_range,
            self.merge_two_time_points,
            self.parse_year,
            self.parse_week_of_month,
            self.parse_week_of_year,
            self.parse_half_year,
            self.parse_quarter,
            self.parse_season,
            self.parse_which_week,
            self.parse_week_of_date,
            self.parse_month_of_date,
            self.parse_duration,
        )

    def build_resolution(self, value) -> Dict[str, str]:
        begin, end = value
        return {
            TimeTypeConstants.START_DATE: format_date(begin),
            TimeTypeConstants.END_DATE: format_date(end),
        }

    def resolve(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        result = super().resolve(text, reference)
        if result is None or not self.config.inclusive_end_period:
            return result

        def inclusive(period: Period) -> Period:
            return period[0], add_days(period[1], -1)

        return replace(result, future_value=inclusive(result.future_value),
                       past_value=inclusive(result.past_value))

    def _swift(self, order: str) -> int:
        return self.config.get_swift_month_or_year(order.lower()) if order else 0

    def _cardinal(self, text: str) -> int:
        text = text.lower()
        if self.config.is_cardinal_last(text):
            return Constants.MAX_WEEK_OF_MONTH
        return self.config.cardinal_map[text]

    def parse_month_with_year(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"May 2024", "2024/05", "june of next year"."""
        match = (exact_match(self.config.month_with_year_regex, text)
                 or exact_match(self.config.month_num_with_year_regex, text))
        if match is None:
            return None

        month = self.config.month_of_year.get(match.group("month").lower())
        if month is None:
            return None

        year_text = match.group("year")
        year = int(year_text) if year_text else reference.year + self._swift(match.group("order"))
        begin = datetime(year, month, 1)
        return DateTimeResolutionResult.resolved(f"{year:04d}-{month:02d}", (begin, add_months(begin, 1)))

    def parse_simple_case(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"May 1 to 7", "between the 1st and 7th of next month"."""
        match = None
        for pattern in self.config.simple_cases_regexes:
            match = exact_match(pattern, text)
            if match:
                break
        if match is None:
            return None

        days = match.captures("day")
        if len(days) != 2:
            return None
        begin_day = self.config.day_of_month.get(days[0].lower())
        end_day = self.config.day_of_month.get(days[1].lower())
        if begin_day is None or end_day is None or begin_day > end_day:
            return None

        reference_day = to_date_start(reference)
        no_year = False
        if match.group("month"):
            month = self.config.month_of_year[match.group("month").lower()]
            year_text = match.group("year")
            if year_text:
                year = int(year_text)
            else:
                year = reference_day.year
                no_year = True
        else:
            shifted = add_months(reference_day.replace(day=1), self._swift(match.group("relmonth")))
            month, year = shifted.month, shifted.year

        def build(for_year: int) -> Period:
            return (safe_create_from_min_value(for_year, month, begin_day),
                    safe_create_from_min_value(for_year, month, end_day))

        if no_year:
            future_year = year if build(year)[0] >= reference_day else year + 1
            past_year = year if build(year)[0] <= reference_day else year - 1
            future, past = build(future_year), build(past_year)
        else:
            future = past = build(year)

        if any(is_default_value(value) for value in (*future, *past)):
            return None

        timex_year = -1 if no_year else year
        timex = (f"({luis_date(timex_year, month, begin_day)},{luis_date(timex_year, month, end_day)},"
                 f"P{end_day - begin_day}D)")
        return DateTimeResolutionResult.resolved(timex, future, past)

    def parse_month_range(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"from May to June", "between Nov and Feb 2025".

        Both bounds are month starts. A stated year belongs to the closing
        month, so a range wrapping past December begins the year before.
        """
        match = exact_match(self.config.month_range_regex, text)
        if match is None:
            return None

        months = [self.config.month_of_year.get(name.lower()) for name in match.captures("month")]
        if len(months) != 2 or None in months or months[0] == months[1]:
            return None
        begin_month, end_month = months
        wraps = end_month < begin_month

        def build(year: int) -> Period:
            return datetime(year, begin_month, 1), datetime(year + 1 if wraps else year, end_month, 1)

        year_text = match.group("year")
        if year_text:
            period = build(int(year_text) - 1 if wraps else int(year_text))
            return DateTimeResolutionResult.resolved(generate_date_period_timex(*period, "MON"), period)

        future, past = _nearest_year_period(to_date_start(reference), build)
        timex = generate_date_period_timex(
            future[0], future[1], "MON", luis_date(-1, begin_month, 1), luis_date(-1, end_month, 1)
        )
        return DateTimeResolutionResult.resolved(timex, future, past)

    def parse_one_word_period(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"this week", "next month", "late june", "year to date"."""
        reference_day = to_date_start(reference)

        if exact_match(self.config.year_to_date_regex, text):
            begin = datetime(reference_day.year, 1, 1)
            return DateTimeResolutionResult.resolved(f"{begin.year:04d}", (begin, reference_day))

        if exact_match(self.config.month_to_date_regex, text):
            begin = reference_day.replace(day=1)
            return DateTimeResolutionResult.resolved(f"{begin.year:04d}-{begin.month:02d}",
                                                     (begin, reference_day))

        # A bare "may" is only a month behind a preposition; "in" stays out of the span
        match = (exact_match(self.config.one_word_period_regex, text)
                 or match_after_prefix(self.config.one_word_period_regex, "in ", text))
        if match is None:
            return None

        order = match.group("order").lower()
        swift = self._swift(order)
        month_text = match.group("month").lower()
        unit = match.group("unit").lower()

        if month_text:
            month = self.config.month_of_year[month_text]
            unit = "month"
            if order:
                begin = datetime(reference_day.year + swift, month, 1)
                future = past = (begin, add_months(begin, 1))
                timex = f"{begin.year:04d}-{month:02d}"
            else:
                timex, future, past = self._bare_month(month, reference_day)
        elif unit == "weekend":
            begin = add_days(this_weekday(reference_day, 6), 7 * swift)
            future = past = (begin, add_days(begin, 2))
            timex = f"{_week_timex(this_weekday(begin, 1))}-WE"
        elif unit == "week":
            begin = add_days(this_weekday(reference_day, 1), 7 * swift)
            future = past = (begin, add_days(begin, 7))
            timex = _week_timex(begin)
        elif unit == "month":
            begin = add_months(reference_day.replace(day=1), swift)
            future = past = (begin, add_months(begin, 1))
            timex = f"{begin.year:04d}-{begin.month:02d}"
        elif unit == "year":
            begin = datetime(reference_day.year + swift, 1, 1)
            future = past = (begin, datetime(begin.year + 1, 1, 1))
            timex = f"{begin.year:04d}"
        else:
            return None

        mod = ""
        if match.group("RelEarly") or match.group("RelLate"):
            early = bool(match.group("RelEarly"))
            mod = Constants.REL_EARLY_MOD if early else Constants.REL_LATE_MOD
            future = self._relative_half(future, reference_day, early, unit)
            past = self._relative_half(past, reference_day, early, unit)
        elif match.group("EarlyPrefix"):
            mod = Constants.EARLY_MOD
        elif match.group("LatePrefix"):
            mod = Constants.LATE_MOD
        elif match.group("MidPrefix"):
            mod = Constants.MID_MOD

        if mod in (Constants.EARLY_MOD, Constants.LATE_MOD, Constants.MID_MOD):
            future = self._half(future, unit, mod)
            past = self._half(past, unit, mod)

        return DateTimeResolutionResult.resolved(timex, future, past, mod=mod)

    @staticmethod
    def _bare_month(month: int, reference_day: datetime) -> Tuple[str, Period, Period]:
        def build(year: int) -> Period:
            begin = datetime(year, month, 1)
            return begin, add_months(begin, 1)

        future, past = _nearest_year_period(reference_day, build)
        return f"XXXX-{month:02d}", future, past

    @staticmethod
    def _half(period: Period, unit: str, mod: str) -> Period:
        """The early, middle or late part of a week, month or year."""
        begin, end = period
        if unit == "week":
            bounds = {Constants.EARLY_MOD: (0, 3), Constants.MID_MOD: (1, 4), Constants.LATE_MOD: (3, 7)}
            first, last = bounds[mod]
            return add_days(begin, first), add_days(begin, last)
        if unit == "month":
            if mod == Constants.EARLY_MOD:
                return begin, begin.replace(day=16)
            if mod == Constants.LATE_MOD:
                return begin.replace(day=16), end
            return begin.replace(day=11), begin.replace(day=21)
        if unit == "year":
            if mod == Constants.EARLY_MOD:
                return begin, begin.replace(month=7)
            if mod == Constants.LATE_MOD:
                return begin.replace(month=7), end
            return begin.replace(month=4), begin.replace(month=10)
        return period

    def _relative_half(self, period: Period, reference_day: datetime, early: bool, unit: str) -> Period:
        """"earlier this week" ends at the reference day, "later this week" starts after it."""
        begin, end = period
        if begin <= reference_day < end:
            if early:
                return begin, reference_day
            return add_days(reference_day, 1), end
        return self._half(period, unit, Constants.EARLY_MOD if early else Constants.LATE_MOD)

    def merge_two_time_points(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"from May 5 to June 7", "between Monday and Friday", "from now till Friday"."""
        points = self._extract_points(text, reference)
        if len(points) != 2:
            return None

        first, second = points
        middle = text[first.end:second.start]
        if not (search(self.config.till_regex, middle) or search(self.config.range_connector_regex, middle)):
            return None
        if first.value is None or second.value is None:
            return None

        (begin_value, begin_timex), (end_value, end_timex) = self._apply_shared_year(first, second, text)
        future_begin, past_begin = begin_value
        future_end, past_end = end_value

        # Feb 29 only exists in leap years, keep the other bound in the same year
        if is_feb_29(future_begin) and begin_timex.startswith(Constants.TIMEX_FUZZY_YEAR):
            future_end = safe_create_from_min_value(future_begin.year, future_end.month, future_end.day)
            past_end = safe_create_from_min_value(past_begin.year, past_end.month, past_end.day)
        elif is_feb_29(future_end) and end_timex.startswith(Constants.TIMEX_FUZZY_YEAR):
            future_begin = safe_create_from_min_value(future_end.year, future_begin.month, future_begin.day)
            past_begin = safe_create_from_min_value(past_end.year, past_begin.month, past_begin.day)

        if future_begin > future_end:
            future_begin = past_begin
        if past_end < past_begin:
            past_end = future_end

        if any(is_default_value(value) for value in (future_begin, future_end, past_begin, past_end)):
            return None

        future_timex = generate_date_period_timex(future_begin, future_end, "D", begin_timex, end_timex)
        past_timex = generate_date_period_timex(past_begin, past_end, "D", begin_timex, end_timex)
        comment = ""
        timex = merge_timex_alternatives(future_timex, past_timex)
        if timex != future_timex:
            comment = Constants.COMMENT_DOUBLE_TIMEX

        return DateTimeResolutionResult.resolved(
            timex, (future_begin, future_end), (past_begin, past_end),
            comment=comment, sub_date_time_entities=[first, second]
        )

    def _extract_points(self, text: str, reference: datetime) -> List[DateTimeParseResult]:
        points = [
            self.config.date_parser.parse(er, reference)
            for er in self.config.date_extractor.extract(text, reference)
        ]
        reference_day = to_date_start(reference)
        for match in get_matches(self.config.now_regex, text):
            now = DateTimeResolutionResult.resolved(luis_date_from_datetime(reference_day), reference_day)
            er = ExtractResult(match.index, match.length, match.value, Constants.SYS_DATETIME_DATE)
            points.append(DateTimeParseResult.from_extract_result(er, value=now, timex_str=now.timex))
        return sorted(points, key=lambda pr: pr.start)

    def _apply_shared_year(self, first: DateTimeParseResult, second: DateTimeParseResult,
                           text: str) -> Tuple[Tuple[Period, str], Tuple[Period, str]]:
        """Give a year-less bound the year stated with the other bound or after the range.

        Returns:
            (((future, past), timex) of the begin, ((future, past), timex) of the end)
        """
        begin = (first.value.future_value, first.value.past_value)
        end = (second.value.future_value, second.value.past_value)
        begin_timex, end_timex = first.timex_str, second.timex_str

        begin_fuzzy = first.timex_str.startswith(Constants.TIMEX_FUZZY_YEAR)
        end_fuzzy = second.timex_str.startswith(Constants.TIMEX_FUZZY_YEAR)

        year = None
        trailing = search(self.config.year_regex, text[second.end:])
        if trailing:
            year = int(trailing.group("year"))
        elif begin_fuzzy and not end_fuzzy:
            year = end[0].year
        elif end_fuzzy and not begin_fuzzy:
            year = begin[0].year

        if year is None or not (begin_fuzzy or end_fuzzy):
            return (begin, begin_timex), (end, end_timex)

        if begin_fuzzy and self._is_month_day_timex(first.timex_str):
            value = safe_create_from_min_value(year, begin[0].month, begin[0].day)
            if not end_fuzzy and not is_default_value(value) and value > end[0]:
                value = safe_create_from_min_value(year - 1, value.month, value.day)
            begin = (value, value)
            begin_timex = luis_date_from_datetime(value)
        if end_fuzzy and self._is_month_day_timex(second.timex_str):
            value = safe_create_from_min_value(year, end[0].month, end[0].day)
            if not begin_fuzzy and not is_default_value(value) and value < begin[0]:
                value = safe_create_from_min_value(year + 1, value.month, value.day)
            end = (value, value)
            end_timex = luis_date_from_datetime(value)
        return (begin, begin_timex), (end, end_timex)

    @staticmethod
    def _is_month_day_timex(timex: str) -> bool:
        parts = timex.split("-")
        return len(parts) == 3 and parts[1].isdigit() and parts[2].isdigit()

    def parse_week_with_weekday_range(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"next week Monday to Friday"."""
        match = exact_match(self.config.week_with_weekday_range_regex, text)
        if match is None:
            return None

        weekdays = get_matches(self.config.weekday_search_regex, text[match.groups("week").index
                                                                      + match.groups("week").length:])
        if len(weekdays) != 2:
            return None

        swift = self._swift(match.group("week"))
        monday = add_days(this_weekday(to_date_start(reference), 1), 7 * swift)
        begin = add_days(monday, self.config.day_of_week[weekdays[0].group("weekday").lower()] - 1)
        end = add_days(monday, self.config.day_of_week[weekdays[1].group("weekday").lower()] - 1)
        if begin > end:
            return None
        return DateTimeResolutionResult.resolved(generate_date_period_timex(begin, end, "D"), (begin, end))

    def parse_year(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        match = exact_match(self.config.year_regex, text)
        if match is None:
            return None
        year = int(match.group("year"))
        if not Constants.MIN_YEAR_NUM <= year <= Constants.MAX_YEAR_NUM:
            return None
        return DateTimeResolutionResult.resolved(f"{year:04d}", (datetime(year, 1, 1), datetime(year + 1, 1, 1)))

    def parse_week_of_month(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"the first week of July", "the last week of next month"."""
        match = exact_match(self.config.week_of_month_regex, text)
        if match is None:
            return None

        cardinal = self._cardinal(match.group("cardinal"))
        reference_day = to_date_start(reference)
        no_year = False
        if match.group("relmonth"):
            shifted = add_months(reference_day.replace(day=1), self._swift(match.group("relmonth")))
            month, year = shifted.month, shifted.year
        else:
            month = self.config.month_of_year[match.group("month").lower()]
            year_text = match.group("year")
            no_year = not year_text
            year = int(year_text) if year_text else reference_day.year

        def build(for_year: int) -> Period:
            begin = add_days(first_weekday_of_month(for_year, month, 1), 7 * (cardinal - 1))
            if begin.month != month:
                begin = add_days(begin, -7)
            return begin, add_days(begin, 7)

        future = past = build(year)
        if no_year:
            if future[0] < reference_day:
                future = build(year + 1)
            if past[0] > reference_day:
                past = build(year - 1)

        year_part = Constants.TIMEX_FUZZY_YEAR if no_year else f"{year:04d}"
        timex = f"{year_part}-{month:02d}-W{cardinal:02d}"
        return DateTimeResolutionResult.resolved(timex, future, past)

    def parse_week_of_year(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"the first week of 2024", "the last week of next year"."""
        match = exact_match(self.config.week_of_year_regex, text)
        if match is None:
            return None

        year_text = match.group("year")
        year = int(year_text) if year_text else reference.year + self._swift(match.group("order"))

        # ISO weeks: December 28th always falls in the last week of its year
        cardinal_text = match.group("cardinal").lower()
        if self.config.is_cardinal_last(cardinal_text):
            begin = this_weekday(datetime(year, 12, 28), 1)
        else:
            cardinal = self.config.cardinal_map[cardinal_text]
            begin = add_days(monday_of_iso_week(year, 1), 7 * (cardinal - 1))

        return DateTimeResolutionResult.resolved(_week_timex(begin), (begin, add_days(begin, 7)))

    def parse_half_year(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"H1 2024", "the second half of this year", "next half"."""
        match = exact_match(self.config.half_year_regex, text)
        if match:
            if match.group("number"):
                half = int(match.group("number"))
            else:
                half = self.config.cardinal_map[match.group("cardinal").lower()]
            year_text = match.group("year")
            year = int(year_text) if year_text else reference.year + self._swift(match.group("order"))
        else:
            match = exact_match(self.config.half_year_relative_regex, text)
            if match is None:
                return None
            index = reference.year * 2 + (reference.month - 1) // 6 + self._swift(match.group("orderHalf"))
            year, half = divmod(index, 2)
            half += 1

        begin = datetime(year, 1 + 6 * (half - 1), 1)
        end = add_months(begin, Constants.SEMESTER_MONTH_COUNT)
        return DateTimeResolutionResult.resolved(generate_date_period_timex(begin, end, "MON"), (begin, end))

    def parse_quarter(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"Q1 2023", "the third quarter of next year", "last quarter", "Q3"."""
        reference_day = to_date_start(reference)

        match = exact_match(self.config.relative_quarter_regex, text)
        if match:
            index = reference_day.year * 4 + (reference_day.month - 1) // 3 + self._swift(match.group("orderQuarter"))
            year, quarter = divmod(index, 4)
            begin = datetime(year, quarter * 3 + 1, 1)
            end = add_months(begin, Constants.TRIMESTER_MONTH_COUNT)
            return DateTimeResolutionResult.resolved(generate_date_period_timex(begin, end, "MON"), (begin, end))

        match = (exact_match(self.config.quarter_regex, text)
                 or exact_match(self.config.quarter_year_front_regex, text))
        if match is None:
            return None

        if match.group("number"):
            quarter = int(match.group("number"))
        else:
            quarter = self.config.cardinal_map[match.group("cardinal").lower()]
        if not 1 <= quarter <= Constants.QUARTER_COUNT:
            return None
        first_month = (quarter - 1) * 3 + 1

        def build(year: int) -> Period:
            begin = datetime(year, first_month, 1)
            return begin, add_months(begin, Constants.TRIMESTER_MONTH_COUNT)

        year_text = match.group("year")
        if year_text or match.group("order"):
            year = int(year_text) if year_text else reference_day.year + self._swift(match.group("order"))
            period = build(year)
            return DateTimeResolutionResult.resolved(generate_date_period_timex(*period, "MON"), period)

        future, past = _nearest_year_period(reference_day, build)
        end_month = first_month + Constants.TRIMESTER_MONTH_COUNT
        timex = generate_date_period_timex(
            future[0], future[1], "MON",
            luis_date(-1, first_month, 1), luis_date(-1, (end_month - 1) % 12 + 1, 1)
        )
        return DateTimeResolutionResult.resolved(timex, future, past)

    def parse_season(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"summer", "the winter of 2023", "next spring"."""
        match = exact_match(self.config.season_regex, text)
        if match is None:
            return None

        code = self.config.season_map[match.group("seas").lower()]
        first_month, month_count = self.config.season_months[code]

        def build(year: int) -> Period:
            begin = datetime(year, first_month, 1)
            return begin, add_months(begin, month_count)

        year_text = match.group("year")
        order = match.group("order")
        if year_text or order:
            year = int(year_text) if year_text else reference.year + self._swift(order)
            period = build(year)
            return DateTimeResolutionResult.resolved(f"{year:04d}-{code}", period)

        future, past = _nearest_year_period(to_date_start(reference), build)
        return DateTimeResolutionResult.resolved(code, future, past)

    def parse_which_week(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"week 23" of the reference year."""
        match = exact_match(self.config.which_week_regex, text)
        if match is None:
            return None

        week = int(match.group("number"))
        begin = monday_of_iso_week(reference.year, week)
        return DateTimeResolutionResult.resolved(_week_timex(begin), (begin, add_days(begin, 7)))

    def parse_week_of_date(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"the week of July 4th"."""
        date_pr = self._prefixed_date(self.config.week_of_regex, text, reference)
        if date_pr is None:
            return None

        future_begin = this_weekday(date_pr.value.future_value, 1)
        past_begin = this_weekday(date_pr.value.past_value, 1)
        return DateTimeResolutionResult.resolved(
            _week_timex(future_begin),
            (future_begin, add_days(future_begin, 7)),
            (past_begin, add_days(past_begin, 7)),
            comment=Constants.COMMENT_WEEK_OF
        )

    def parse_month_of_date(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"the month of the 5th", "the month of May"."""
        date_pr = self._prefixed_date(self.config.month_of_regex, text, reference)
        if date_pr is None:
            return self._month_of_month_name(text, reference)

        future_begin = date_pr.value.future_value.replace(day=1)
        past_begin = date_pr.value.past_value.replace(day=1)
        year_part = (Constants.TIMEX_FUZZY_YEAR if date_pr.timex_str.startswith(Constants.TIMEX_FUZZY_YEAR)
                     else f"{future_begin.year:04d}")
        return DateTimeResolutionResult.resolved(
            f"{year_part}-{future_begin.month:02d}",
            (future_begin, add_months(future_begin, 1)),
            (past_begin, add_months(past_begin, 1)),
            comment=Constants.COMMENT_MONTH_OF
        )

    def _month_of_month_name(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        prefix = match_begin(self.config.month_of_regex, text)
        if prefix is None:
            return None
        match = exact_match(self.config.month_regex, text[prefix.end:])
        if match is None:
            return None

        month = self.config.month_of_year[match.group("month").lower()]
        timex, future, past = self._bare_month(month, to_date_start(reference))
        return DateTimeResolutionResult.resolved(timex, future, past)

    def _prefixed_date(self, prefix_regex: Pattern, text: str,
                       reference: datetime) -> Optional[DateTimeParseResult]:
        prefix = match_begin(prefix_regex, text)
        if prefix is None:
            return None
        remainder = text[prefix.end:]
        ers = self.config.date_extractor.extract(remainder, reference)
        if len(ers) != 1 or remainder[ers[0].end:].strip():
            return None
        date_pr = self.config.date_parser.parse(ers[0], reference)
        return date_pr if date_pr.value is not None else None

    def parse_duration(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"the past 3 weeks", "the next 2 months", "rest of the week"."""
        reference_day = to_date_start(reference)

        match = exact_match(self.config.rest_of_regex, text)
        if match:
            unit = match.group("duration").lower()
            if unit == "week":
                end = add_days(this_weekday(reference_day, 1), 7)
            elif unit == "month":
                end = add_months(reference_day.replace(day=1), 1)
            else:
                end = datetime(reference_day.year + 1, 1, 1)
            return DateTimeResolutionResult.resolved(
                generate_date_period_timex(reference_day, end, "D"), (reference_day, end)
            )

        ers = self.config.duration_extractor.extract(text, reference)
        if len(ers) != 1:
            return None
        er = ers[0]
        duration_pr = self.config.duration_parser.parse(er, reference)
        if duration_pr.value is None:
            return None

        unit_match = search(self.config.unit_regex, er.text)
        unit = self.config.unit_map.get(unit_match.group("unit").lower()) if unit_match else None
        if unit not in ("Y", "MON", "W", "D"):
            return None

        amount = float(duration_pr.value.timex[1:-1])
        before = text[:er.start]
        if match_end(self.config.past_prefix_regex, before):
            begin, end = shift_by_unit(reference_day, unit, -amount), reference_day
        elif match_end(self.config.future_prefix_regex, before):
            begin = add_days(reference_day, 1)
            end = shift_by_unit(begin, unit, amount)
        else:
            return None

        if end - begin < timedelta(days=1):
            return None
        return DateTimeResolutionResult.resolved(
            generate_date_period_timex(begin, end, unit), (begin, end),
            sub_date_time_entities=[duration_pr]
        )
