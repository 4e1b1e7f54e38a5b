"""Date extraction and parsing.

Handles explicit calendar dates ("March 15, 2024", "10/1/2018"), relative
days ("tomorrow", "next Friday"), weekday-of-month forms ("the second
Sunday of May"), bare days of month ("the 27th") and date-unit
durations anchored to the reference ("3 days ago", "in 2 weeks").
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Mapping, Optional, Pattern, Sequence, Tuple

from .core.ago_later import (
    AgoLaterMode, DateTimeUtilityConfiguration, extract_duration_with_before_and_after,
    parse_duration_with_ago_and_later
)
from .core.base import (
    BaseDateTimeParser, BaseDateTimeExtractor, NumberExtractor, NumberParser, ParseStrategy
)
from .core.constants import Constants, TimeTypeConstants
from .core.date_utils import (
    add_days, add_months, first_weekday_of_month, generate_dates, generate_month_day_dates,
    is_default_value, last_weekday, nearest_weekday_pair, next_weekday, previous_weekday,
    resolve_two_digit_year, safe_create_from_min_value, this_weekday, to_date_start,
    upcoming_weekday
)
from .core.regex_utils import (
    RegexMatch, exact_match, get_matches, match_after_prefix, match_begin, match_end, search
)
from .core.results import DateTimeResolutionResult, ExtractResult
from .core.timex_utils import format_date, luis_date, luis_date_from_datetime
from .core.tokens import Token, merge_all_tokens

DATE_SEPARATORS = "/\\-."


@dataclass(frozen=True)
class DateExtractorConfiguration:
    date_regex_list: Tuple[Pattern, ...]
    implicit_date_list: Tuple[Pattern, ...]
    month_end: Pattern
    of_month: Pattern
    relative_month_regex: Pattern
    week_day_start: Pattern
    for_the_regex: Pattern
    week_day_and_day_of_month_regex: Pattern
    strict_relative_regex: Pattern
    invalid_day_number_prefix: Pattern
    range_connector_symbol_regex: Pattern
    date_unit_regex: Pattern
    day_of_week: Mapping[str, int]
    ordinal_extractor: NumberExtractor
    integer_extractor: NumberExtractor
    number_parser: NumberParser
    duration_extractor: BaseDateTimeExtractor
    utility_configuration: DateTimeUtilityConfiguration


@dataclass(frozen=True)
class DateParserConfiguration:
    date_regex_list: Tuple[Pattern, ...]
    on_regex: Pattern
    special_day_regex: Pattern
    special_day_with_num_regex: Pattern
    relative_week_day_regex: Pattern
    next_regex: Pattern
    this_regex: Pattern
    last_regex: Pattern
    week_day_regex: Pattern
    week_day_of_month_regex: Pattern
    for_the_regex: Pattern
    week_day_and_day_of_month_regex: Pattern
    month_regex: Pattern
    relative_month_regex: Pattern
    week_day_search_regex: Pattern
    strict_relative_regex: Pattern
    day_of_month: Mapping[str, int]
    month_of_year: Mapping[str, int]
    day_of_week: Mapping[str, int]
    cardinal_map: Mapping[str, int]
    unit_map: Mapping[str, str]
    unit_regex: Pattern
    ordinal_extractor: NumberExtractor
    integer_extractor: NumberExtractor
    number_parser: NumberParser
    duration_extractor: BaseDateTimeExtractor
    duration_parser: BaseDateTimeParser
    utility_configuration: DateTimeUtilityConfiguration
    get_swift_day: Callable[[str], int]
    get_swift_month_or_year: Callable[[str], int]
    is_cardinal_last: Callable[[str], bool]
    min_two_digit_year_past_num: int = 40
    max_two_digit_year_future_num: int = 40


class DateExtractor(BaseDateTimeExtractor):
    """Finds single-day spans."""

    extractor_type_name = Constants.SYS_DATETIME_DATE

    def __init__(self, config: DateExtractorConfiguration):
        super().__init__()
        self.config = config

    def extract(self, source: str, reference: Optional[datetime] = None) -> List[ExtractResult]:
        if not source or not source.strip():
            return []

        reference = reference or datetime.now()
        tokens: List[Token] = []
        tokens.extend(self.basic_regex_match(source))
        tokens.extend(self.implicit_date(source))
        tokens.extend(self.number_with_month(source, reference))
        tokens.extend(self.duration_with_before_and_after(source, reference))

        return merge_all_tokens(tokens, source, self.extractor_type_name)

    def basic_regex_match(self, source: str) -> List[Token]:
        tokens = []
        for pattern in self.config.date_regex_list:
            for match in get_matches(pattern, source):
                if not self._validate_match(match, source):
                    continue

                relative = match_end(self.config.strict_relative_regex, source[:match.index])
                if relative and not match.has_group("year"):
                    tokens.append(Token(relative.index, match.end))
                else:
                    tokens.append(Token(match.index, match.end))
        return tokens

    def implicit_date(self, source: str) -> List[Token]:
        tokens = []
        for pattern in self.config.implicit_date_list:
            tokens.extend(Token(m.index, m.end) for m in get_matches(pattern, source))
        return tokens

    def number_with_month(self, source: str, reference: datetime) -> List[Token]:
        """Day numbers anchored by a nearby month, weekday or relative month."""
        tokens = []
        ers = (self.config.ordinal_extractor.extract(source)
               + self.config.integer_extractor.extract(source))

        for er in ers:
            parsed = self.config.number_parser.parse(er)
            if parsed is None or not parsed.number.is_integer():
                continue
            num = int(parsed.number)
            if num < 1 or num > 31:
                continue

            front = source[:er.start]
            suffix = source[er.end:]
            if search(self.config.invalid_day_number_prefix, front):
                continue

            match = search(self.config.month_end, front)
            if match:
                tokens.append(Token(match.index, er.end))
                continue

            for match in get_matches(self.config.for_the_regex, source):
                day_group = match.groups("DayOfMonth")
                if day_group.index == er.start and day_group.value == er.text:
                    tokens.append(Token(match.index, match.end - len(match.group("end"))))

            for match in get_matches(self.config.week_day_and_day_of_month_regex, source):
                day_group = match.groups("DayOfMonth")
                if day_group.index != er.start or day_group.value != er.text:
                    continue
                weekday = self.config.day_of_week.get(match.group("weekday").lower())
                candidate = safe_create_from_min_value(reference.year, reference.month, num)
                if weekday and not is_default_value(candidate) and candidate.isoweekday() == weekday:
                    tokens.append(Token(match.index, er.end))

            match = match_begin(self.config.relative_month_regex, suffix)
            if match:
                tokens.append(Token(er.start, er.end + match.end))
                continue

            if er.type == Constants.SYS_NUM_ORDINAL and num <= 5:
                match = match_begin(self.config.week_day_start, suffix)
                if match:
                    tokens.append(Token(er.start, er.end + match.end))
                    continue

            match = match_begin(self.config.of_month, suffix, trim=False)
            if match:
                tokens.append(Token(er.start, er.end + match.end))

        return tokens

    def duration_with_before_and_after(self, source: str, reference: datetime) -> List[Token]:
        """"3 days ago", "in 2 weeks"; time-unit durations belong to date-time."""
        tokens = []
        for er in self.config.duration_extractor.extract(source, reference):
            if search(self.config.date_unit_regex, er.text) is None:
                continue
            token = extract_duration_with_before_and_after(
                source, er, self.config.utility_configuration
            )
            if token:
                tokens.append(token)
        return tokens

    def starts_with_basic_date(self, text: str) -> bool:
        return any(match_begin(pattern, text) for pattern in self.config.date_regex_list)

    def _validate_match(self, match: RegexMatch, source: str) -> bool:
        """Reject a match whose trailing year more likely opens the next date.

        "10-1-2018-10-2-2018" keeps "10-1-2018" because the text after its
        year still starts a date, while "10-1 - 11-7" drops "10-1 - 11"
        whose "11" begins "11-7".
        """
        year_group = match.groups("year")
        if not year_group.matched:
            return True

        is_valid = True
        if year_group.index + year_group.length == match.end:
            if self.starts_with_basic_date(source[year_group.index:]):
                following = source[year_group.index + year_group.length:].strip()
                connector = match_begin(self.config.range_connector_symbol_regex, following)
                if connector:
                    following = following[connector.end:]
                is_valid = self.starts_with_basic_date(following)

        if is_valid:
            is_valid = not self._has_mixed_separators(match)
        return is_valid

    @staticmethod
    def _has_mixed_separators(match: RegexMatch) -> bool:
        """"30/4.85" mixes two separators and is not a date."""
        remaining = list(match.value)
        for name in ("year", "month", "day"):
            group = match.groups(name)
            if not group.matched:
                continue
            begin = group.index - match.index
            for position in range(begin, begin + group.length):
                remaining[position] = " "

        separators = {char for char in remaining if char in DATE_SEPARATORS}
        return len(separators) > 1


class DateParser(BaseDateTimeParser):
    """Resolves single-day expressions to future and past dates."""

    parser_type_name = Constants.SYS_DATETIME_DATE

    def __init__(self, config: DateParserConfiguration):
        super().__init__()
        self.config = config

    def strategies(self) -> Sequence[ParseStrategy]:
        return (
            self.parse_basic_regex_match,
            self.parse_implicit_date,
            self.parse_weekday_of_month,
            self.parse_ago_later,
            self.parse_number_with_month,
            self.parse_single_number,
        )

    def build_resolution(self, value) -> Dict[str, str]:
        return {TimeTypeConstants.DATE: format_date(value)}

    def parse_basic_regex_match(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        for pattern in self.config.date_regex_list:
            match = exact_match(pattern, text)
            if match:
                return self._match_to_date(match, reference, "")

        relative = match_begin(self.config.strict_relative_regex, text)
        if relative:
            remainder = text[relative.end:]
            for pattern in self.config.date_regex_list:
                match = exact_match(pattern, remainder)
                if match:
                    return self._match_to_date(match, reference, relative.group("order"))

        return None

    def _match_to_date(self, match: RegexMatch, reference: datetime,
                       relative: str) -> Optional[DateTimeResolutionResult]:
        month = self.config.month_of_year.get(match.group("month").lower())
        day = self.config.day_of_month.get(match.group("day").lower())
        if month is None or day is None:
            return None

        year_text = match.group("year")
        no_year = False
        if year_text:
            year = resolve_two_digit_year(
                int(year_text),
                self.config.min_two_digit_year_past_num,
                self.config.max_two_digit_year_future_num
            )
        elif relative:
            year = reference.year + self.config.get_swift_month_or_year(relative.lower())
        else:
            year = reference.year
            no_year = True

        future_date, past_date = generate_dates(no_year, reference, year, month, day)
        if is_default_value(future_date) or is_default_value(past_date):
            return None

        timex = luis_date(-1 if no_year else year, month, day)
        return DateTimeResolutionResult.resolved(timex, future_date, past_date)

    def parse_implicit_date(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        reference_day = to_date_start(reference)

        # "on 5th"
        match = match_after_prefix(self.config.on_regex, "on ", text)
        if match:
            day = self.config.day_of_month.get(match.group("day").lower())
            if day is None:
                return None
            future_date, past_date = generate_month_day_dates(reference_day, day)
            if is_default_value(future_date) or is_default_value(past_date):
                return None
            return DateTimeResolutionResult.resolved(luis_date(-1, -1, day), future_date, past_date)

        # "today", "the day after tomorrow"
        match = exact_match(self.config.special_day_regex, text)
        if match:
            value = add_days(reference_day, self.config.get_swift_day(match.value.lower()))
            return DateTimeResolutionResult.resolved(luis_date_from_datetime(value), value)

        # "two days from tomorrow"
        match = exact_match(self.config.special_day_with_num_regex, text)
        if match:
            number = self._parse_integer(match.group("number"))
            if number is None:
                return None
            swift = self.config.get_swift_day(match.group("day").lower())
            value = add_days(reference_day, number + swift)
            return DateTimeResolutionResult.resolved(luis_date_from_datetime(value), value)

        # "two sundays from now"
        match = exact_match(self.config.relative_week_day_regex, text)
        if match:
            number = self._parse_integer(match.group("number"))
            if number is None or number < 1:
                return None
            weekday = self.config.day_of_week[match.group("weekday").lower()]
            value = add_days(upcoming_weekday(reference_day, weekday), 7 * (number - 1))
            return DateTimeResolutionResult.resolved(luis_date_from_datetime(value), value)

        # "next friday", "next week friday"
        match = exact_match(self.config.next_regex, text)
        if match:
            weekday = self.config.day_of_week[match.group("weekday").lower()]
            if match.group("week"):
                value = next_weekday(reference_day, weekday)
                return DateTimeResolutionResult.resolved(luis_date_from_datetime(value), value)
            value = upcoming_weekday(reference_day, weekday)
            return DateTimeResolutionResult.resolved(self._weekday_timex(weekday), value)

        # "this friday"
        match = exact_match(self.config.this_regex, text)
        if match:
            weekday = self.config.day_of_week[match.group("weekday").lower()]
            value = this_weekday(reference_day, weekday)
            return DateTimeResolutionResult.resolved(self._weekday_timex(weekday), value)

        # "last friday", "last week friday"
        match = exact_match(self.config.last_regex, text)
        if match:
            weekday = self.config.day_of_week[match.group("weekday").lower()]
            if match.group("week"):
                value = last_weekday(reference_day, weekday)
                return DateTimeResolutionResult.resolved(luis_date_from_datetime(value), value)
            value = previous_weekday(reference_day, weekday)
            return DateTimeResolutionResult.resolved(self._weekday_timex(weekday), value)

        # "friday"
        match = exact_match(self.config.week_day_regex, text)
        if match:
            weekday = self.config.day_of_week[match.group("weekday").lower()]
            future_date, past_date = nearest_weekday_pair(reference_day, weekday)
            return DateTimeResolutionResult.resolved(self._weekday_timex(weekday), future_date, past_date)

        # "for the 27th", "on the twenty-first"
        match = (match_after_prefix(self.config.for_the_regex, "for ", text)
                 or match_after_prefix(self.config.for_the_regex, "on ", text))
        if match:
            day = self._parse_integer(match.group("DayOfMonth"))
            return self._month_day(reference_day, day)

        # "friday the 21st"
        match = exact_match(self.config.week_day_and_day_of_month_regex, text)
        if match:
            day = self._parse_integer(match.group("DayOfMonth"))
            if day is None:
                return None
            value = safe_create_from_min_value(reference_day.year, reference_day.month, day)
            if is_default_value(value):
                return None
            return DateTimeResolutionResult.resolved(
                luis_date(value.year, value.month, value.day), value
            )

        return None

    def parse_weekday_of_month(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"the second sunday of may", "the last friday of next month"."""
        match = exact_match(self.config.week_day_of_month_regex, text)
        if match is None:
            return None

        cardinal_text = match.group("cardinal").lower()
        if self.config.is_cardinal_last(cardinal_text):
            cardinal = 5
        else:
            cardinal = self.config.cardinal_map[cardinal_text]
        weekday = self.config.day_of_week[match.group("weekday").lower()]
        month_text = match.group("month").lower()
        reference_day = to_date_start(reference)

        no_year = bool(month_text)
        if no_year:
            month = self.config.month_of_year[month_text]
            year = reference_day.year
        else:
            swift = self.config.get_swift_month_or_year(match.group("relmonth").lower())
            shifted = add_months(reference_day.replace(day=1), swift)
            month, year = shifted.month, shifted.year

        value, cardinal = self._compute_weekday_of_month(cardinal, weekday, month, year)
        future_date = past_date = value
        if no_year:
            if future_date < reference_day:
                future_date, _ = self._compute_weekday_of_month(cardinal, weekday, month, year + 1)
            if past_date > reference_day:
                past_date, _ = self._compute_weekday_of_month(cardinal, weekday, month, year - 1)

        year_part = "XXXX" if no_year else f"{year:04d}"
        timex = f"{year_part}-{month:02d}-WXX-{weekday}-#{cardinal}"
        return DateTimeResolutionResult.resolved(timex, future_date, past_date)

    @staticmethod
    def _compute_weekday_of_month(cardinal: int, weekday: int, month: int, year: int) -> Tuple[datetime, int]:
        """The nth weekday of the month; a missing fifth falls back to the fourth."""
        value = add_days(first_weekday_of_month(year, month, weekday), 7 * (cardinal - 1))
        if value.month != month:
            cardinal -= 1
            value = add_days(value, -7)
        return value, cardinal

    def parse_ago_later(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        return parse_duration_with_ago_and_later(
            text, reference,
            self.config.duration_extractor,
            self.config.duration_parser,
            self.config.unit_map,
            self.config.unit_regex,
            self.config.utility_configuration,
            AgoLaterMode.DATE
        )

    def parse_number_with_month(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"5th of may", "the 25th of next month", "second sunday"."""
        ers = self.config.ordinal_extractor.extract(text) or self.config.integer_extractor.extract(text)
        if not ers:
            return None

        er = ers[0]
        num = self._parse_integer(er.text)
        if num is None:
            return None

        reference_day = to_date_start(reference)
        month_match = search(self.config.month_regex, text)
        if month_match:
            month = self.config.month_of_year[month_match.group("month").lower()]
            future_date, past_date = generate_dates(True, reference_day, reference_day.year, month, num)
            if is_default_value(future_date) or is_default_value(past_date):
                return None
            return DateTimeResolutionResult.resolved(luis_date(-1, month, num), future_date, past_date)

        relative_match = search(self.config.relative_month_regex, text)
        if relative_match:
            swift = self.config.get_swift_month_or_year(relative_match.group("order").lower())
            shifted = add_months(reference_day.replace(day=1), swift)
            value = safe_create_from_min_value(shifted.year, shifted.month, num)
        else:
            weekday_match = search(self.config.week_day_search_regex, text)
            if weekday_match is None or er.type != Constants.SYS_NUM_ORDINAL or num > 5:
                return None
            weekday = self.config.day_of_week[weekday_match.group("weekday").lower()]
            value = add_days(
                first_weekday_of_month(reference_day.year, reference_day.month, weekday), 7 * (num - 1)
            )
            if value.month != reference_day.month:
                return None

        if is_default_value(value):
            return None
        return DateTimeResolutionResult.resolved(luis_date(value.year, value.month, value.day), value)

    def parse_single_number(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"the 27th": this month while still ahead, otherwise next month."""
        ers = self.config.ordinal_extractor.extract(text) or self.config.integer_extractor.extract(text)
        if not ers:
            return None
        return self._month_day(to_date_start(reference), self._parse_integer(ers[0].text))

    def _month_day(self, reference_day: datetime, day: Optional[int]) -> Optional[DateTimeResolutionResult]:
        if day is None or not 1 <= day <= 31:
            return None
        future_date, past_date = generate_month_day_dates(reference_day, day, collapse_current_month=True)
        if is_default_value(future_date) or is_default_value(past_date):
            return None
        return DateTimeResolutionResult.resolved(luis_date(-1, -1, day), future_date, past_date)

    def _parse_integer(self, text: str) -> Optional[int]:
        if not text:
            return None
        ers = self.config.ordinal_extractor.extract(text) or self.config.integer_extractor.extract(text)
        if not ers:
            return None
        parsed = self.config.number_parser.parse(ers[0])
        if parsed is None or not parsed.number.is_integer():
            return None
        return int(parsed.number)

    @staticmethod
    def _weekday_timex(weekday: int) -> str:
        return f"XXXX-WXX-{weekday}"
