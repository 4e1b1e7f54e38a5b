"""English culture configuration.

Compiles the resource patterns once and assembles the frozen extractor and
parser configurations of every entity kind. Lower level components (numbers,
durations, dates, times) are built first and handed to the composite ones.
"""

from typing import Optional, Tuple

from ...core.config_manager import ResolutionConfig
from ...core.logging_manager import LoggingManager
from ..core.ago_later import DateTimeUtilityConfiguration
from ..core.regex_utils import compile_pattern
from ..date import DateExtractor, DateExtractorConfiguration, DateParser, DateParserConfiguration
from ..date_period import (
    DatePeriodExtractor, DatePeriodExtractorConfiguration, DatePeriodParser, DatePeriodParserConfiguration
)
from ..date_time import (
    DateTimeExtractor, DateTimeExtractorConfiguration, DateTimeParser, DateTimeParserConfiguration
)
from ..date_time_period import (
    DateTimePeriodExtractor, DateTimePeriodExtractorConfiguration, DateTimePeriodParser,
    DateTimePeriodParserConfiguration
)
from ..duration import (
    DurationExtractor, DurationExtractorConfiguration, DurationParser, DurationParserConfiguration
)
from ..time import TimeExtractor, TimeExtractorConfiguration, TimeParser, TimeParserConfiguration
from ..time_period import (
    TimePeriodExtractor, TimePeriodExtractorConfiguration, TimePeriodParser, TimePeriodParserConfiguration
)
from . import resources as res
from .numbers import EnglishNumberExtractor, EnglishNumberParser

NEXT_WORDS = ("next", "following", "upcoming", "coming")
LAST_WORDS = ("last", "past", "previous")


def get_swift_day(text: str) -> int:
    """Day offset of "today", "tomorrow", "the day after tomorrow" ..."""
    trimmed = " ".join(text.strip().lower().split())
    if trimmed.endswith("day after tomorrow"):
        return 2
    if trimmed.endswith("day before yesterday"):
        return -2
    if trimmed in ("tomorrow", "tmr", "tmrw") or trimmed.endswith("next day"):
        return 1
    if trimmed == "yesterday":
        return -1
    return 0


def get_swift_month_or_year(text: str) -> int:
    """+1 for "next ...", -1 for "last ...", 0 for "this ..." or nothing."""
    words = text.strip().lower().split()
    if not words:
        return 0
    if words[0] in NEXT_WORDS:
        return 1
    if words[0] in LAST_WORDS:
        return -1
    return 0


def is_cardinal_last(text: str) -> bool:
    return text.strip().lower() == "last"


def _compile_all(patterns) -> Tuple:
    return tuple(compile_pattern(pattern) for pattern in patterns)


class EnglishCultureConfiguration:
    """Every English extractor and parser, wired together.

    Args:
        resolution_config: Two digit year thresholds and period end policy
    """

    culture = "en-us"

    def __init__(self, resolution_config: Optional[ResolutionConfig] = None):
        self.logger = LoggingManager.get_logger(__name__)
        self.resolution_config = resolution_config or ResolutionConfig()

        self.cardinal_extractor = EnglishNumberExtractor("cardinal")
        self.integer_extractor = EnglishNumberExtractor("integer")
        self.ordinal_extractor = EnglishNumberExtractor("ordinal")
        self.number_parser = EnglishNumberParser()

        self.utility_configuration = DateTimeUtilityConfiguration(
            ago_regex=compile_pattern(res.AGO_REGEX),
            later_regex=compile_pattern(res.LATER_REGEX),
            in_connector_regex=compile_pattern(res.IN_CONNECTOR_REGEX),
            time_unit_regex=compile_pattern(res.TIME_UNIT_REGEX),
            date_unit_regex=compile_pattern(res.DATE_UNIT_REGEX)
        )

        self._build_duration()
        self._build_date()
        self._build_time()
        self._build_date_period()
        self._build_time_period()
        self._build_date_time()
        self._build_date_time_period()

        self.logger.debug(f"Built {self.culture} culture configuration")

    def _build_duration(self):
        followed_unit = compile_pattern(res.DURATION_FOLLOWED_UNIT)
        number_combined_with_unit = compile_pattern(res.NUMBER_COMBINED_WITH_UNIT)
        an_unit_regex = compile_pattern(res.AN_UNIT_REGEX)
        inexact_number_unit_regex = compile_pattern(res.INEXACT_NUMBER_UNIT_REGEX)
        suffix_and_regex = compile_pattern(res.SUFFIX_AND_REGEX)
        all_regex = compile_pattern(res.ALL_REGEX)
        half_regex = compile_pattern(res.HALF_REGEX)
        relative_duration_unit_regex = compile_pattern(res.RELATIVE_DURATION_UNIT_REGEX)

        self.duration_unit_regex = compile_pattern(res.DURATION_UNIT_REGEX)
        self.duration_extractor = DurationExtractor(DurationExtractorConfiguration(
            cardinal_extractor=self.cardinal_extractor,
            followed_unit=followed_unit,
            number_combined_with_unit=number_combined_with_unit,
            an_unit_regex=an_unit_regex,
            inexact_number_unit_regex=inexact_number_unit_regex,
            suffix_and_regex=suffix_and_regex,
            all_regex=all_regex,
            half_regex=half_regex,
            relative_duration_unit_regex=relative_duration_unit_regex,
            more_than_regex=compile_pattern(res.MORE_THAN_REGEX),
            less_than_regex=compile_pattern(res.LESS_THAN_REGEX)
        ))
        self.duration_parser = DurationParser(DurationParserConfiguration(
            cardinal_extractor=self.cardinal_extractor,
            number_parser=self.number_parser,
            followed_unit=followed_unit,
            suffix_and_regex=suffix_and_regex,
            number_combined_with_unit=number_combined_with_unit,
            an_unit_regex=an_unit_regex,
            inexact_number_unit_regex=inexact_number_unit_regex,
            all_regex=all_regex,
            half_regex=half_regex,
            relative_duration_unit_regex=relative_duration_unit_regex,
            duration_unit_regex=self.duration_unit_regex,
            unit_map=res.UNIT_MAP,
            unit_value_map=res.UNIT_VALUE_MAP,
            double_numbers=res.DOUBLE_NUMBERS
        ))

    def _build_date(self):
        date_regex_list = _compile_all(res.DATE_REGEX_LIST)
        for_the_regex = compile_pattern(res.FOR_THE_REGEX)
        week_day_and_day_of_month_regex = compile_pattern(res.WEEKDAY_AND_DAY_OF_MONTH_REGEX)
        strict_relative_regex = compile_pattern(res.STRICT_RELATIVE_REGEX)

        self.date_extractor = DateExtractor(DateExtractorConfiguration(
            date_regex_list=date_regex_list,
            implicit_date_list=_compile_all(res.DATE_IMPLICIT_LIST),
            month_end=compile_pattern(res.MONTH_END_REGEX),
            of_month=compile_pattern(res.OF_MONTH_REGEX),
            relative_month_regex=compile_pattern(res.RELATIVE_MONTH_REGEX),
            week_day_start=compile_pattern(res.WEEKDAY_START_REGEX),
            for_the_regex=for_the_regex,
            week_day_and_day_of_month_regex=week_day_and_day_of_month_regex,
            strict_relative_regex=strict_relative_regex,
            invalid_day_number_prefix=compile_pattern(res.INVALID_DAY_NUMBER_PREFIX),
            range_connector_symbol_regex=compile_pattern(res.RANGE_CONNECTOR_SYMBOL_REGEX),
            date_unit_regex=self.utility_configuration.date_unit_regex,
            day_of_week=res.DAY_OF_WEEK,
            ordinal_extractor=self.ordinal_extractor,
            integer_extractor=self.integer_extractor,
            number_parser=self.number_parser,
            duration_extractor=self.duration_extractor,
            utility_configuration=self.utility_configuration
        ))
        self.date_parser = DateParser(DateParserConfiguration(
            date_regex_list=date_regex_list,
            on_regex=compile_pattern(res.ON_REGEX),
            special_day_regex=compile_pattern(res.SPECIAL_DAY_REGEX),
            special_day_with_num_regex=compile_pattern(res.SPECIAL_DAY_WITH_NUM_REGEX),
            relative_week_day_regex=compile_pattern(res.RELATIVE_WEEKDAY_REGEX),
            next_regex=compile_pattern(res.NEXT_REGEX),
            this_regex=compile_pattern(res.THIS_REGEX),
            last_regex=compile_pattern(res.LAST_REGEX),
            week_day_regex=compile_pattern(res.SINGLE_WEEKDAY_REGEX),
            week_day_of_month_regex=compile_pattern(res.WEEKDAY_OF_MONTH_REGEX),
            for_the_regex=for_the_regex,
            week_day_and_day_of_month_regex=week_day_and_day_of_month_regex,
            month_regex=compile_pattern(res.MONTH_SEARCH_REGEX),
            relative_month_regex=compile_pattern(res.RELATIVE_MONTH_SEARCH_REGEX),
            week_day_search_regex=compile_pattern(res.WEEKDAY_SEARCH_REGEX),
            strict_relative_regex=strict_relative_regex,
            day_of_month=res.DAY_OF_MONTH,
            month_of_year=res.MONTH_OF_YEAR,
            day_of_week=res.DAY_OF_WEEK,
            cardinal_map=res.CARDINAL_MAP,
            unit_map=res.UNIT_MAP,
            unit_regex=self.duration_unit_regex,
            ordinal_extractor=self.ordinal_extractor,
            integer_extractor=self.integer_extractor,
            number_parser=self.number_parser,
            duration_extractor=self.duration_extractor,
            duration_parser=self.duration_parser,
            utility_configuration=self.utility_configuration,
            get_swift_day=get_swift_day,
            get_swift_month_or_year=get_swift_month_or_year,
            is_cardinal_last=is_cardinal_last,
            min_two_digit_year_past_num=self.resolution_config.min_two_digit_year_past_num,
            max_two_digit_year_future_num=self.resolution_config.max_two_digit_year_future_num
        ))

    def _build_time(self):
        time_regex_list = _compile_all(res.TIME_REGEX_LIST)
        at_regex = compile_pattern(res.AT_REGEX)
        ish_regex = compile_pattern(res.ISH_REGEX)

        self.time_extractor = TimeExtractor(TimeExtractorConfiguration(
            time_regex_list=time_regex_list,
            at_regex=at_regex,
            ish_regex=ish_regex
        ))
        self.time_parser = TimeParser(TimeParserConfiguration(
            time_regex_list=time_regex_list,
            at_regex=at_regex,
            ish_regex=ish_regex,
            am_suffix_regex=compile_pattern(res.AM_SUFFIX_REGEX),
            pm_suffix_regex=compile_pattern(res.PM_SUFFIX_REGEX),
            numbers=res.TIME_NUMBERS,
            time_token_prefix=res.TIME_TOKEN_PREFIX
        ))

    def _build_date_period(self):
        self.range_connector_regex = compile_pattern(res.RANGE_CONNECTOR_REGEX)
        self.from_regex = compile_pattern(res.FROM_REGEX)
        self.between_regex = compile_pattern(res.BETWEEN_REGEX)
        self.past_prefix_regex = compile_pattern(res.PAST_PREFIX_REGEX)
        self.future_prefix_regex = compile_pattern(res.FUTURE_PREFIX_REGEX)

        simple_cases_regexes = _compile_all(res.DATE_PERIOD_SIMPLE_CASES)
        year_regex = compile_pattern(res.YEAR_REGEX)
        till_regex = compile_pattern(res.DATE_PERIOD_TILL_REGEX)
        now_regex = compile_pattern(res.NOW_REGEX)
        week_of_regex = compile_pattern(res.WEEK_OF_REGEX)
        month_of_regex = compile_pattern(res.MONTH_OF_REGEX)
        month_regex = compile_pattern(res.MONTH_SEARCH_REGEX)

        self.date_period_extractor = DatePeriodExtractor(DatePeriodExtractorConfiguration(
            simple_cases_regexes=_compile_all(res.DATE_PERIOD_SIMPLE_CASE_LIST),
            year_regex=year_regex,
            illegal_year_regex=compile_pattern(res.ILLEGAL_YEAR_REGEX),
            till_regex=till_regex,
            range_connector_regex=self.range_connector_regex,
            from_regex=self.from_regex,
            between_regex=self.between_regex,
            now_regex=now_regex,
            past_prefix_regex=self.past_prefix_regex,
            future_prefix_regex=self.future_prefix_regex,
            week_of_regex=week_of_regex,
            month_of_regex=month_of_regex,
            month_regex=month_regex,
            date_unit_regex=self.utility_configuration.date_unit_regex,
            date_point_extractor=self.date_extractor,
            duration_extractor=self.duration_extractor
        ))
        self.date_period_parser = DatePeriodParser(DatePeriodParserConfiguration(
            simple_cases_regexes=simple_cases_regexes,
            month_with_year_regex=compile_pattern(res.MONTH_WITH_YEAR_REGEX),
            month_num_with_year_regex=compile_pattern(res.MONTH_NUM_WITH_YEAR_REGEX),
            month_range_regex=compile_pattern(res.MONTH_RANGE_REGEX),
            one_word_period_regex=compile_pattern(res.ONE_WORD_PERIOD_REGEX),
            year_to_date_regex=compile_pattern(res.YEAR_TO_DATE_REGEX),
            month_to_date_regex=compile_pattern(res.MONTH_TO_DATE_REGEX),
            year_regex=year_regex,
            week_of_month_regex=compile_pattern(res.WEEK_OF_MONTH_REGEX),
            week_of_year_regex=compile_pattern(res.WEEK_OF_YEAR_REGEX),
            half_year_regex=compile_pattern(res.HALF_YEAR_REGEX),
            half_year_relative_regex=compile_pattern(res.HALF_YEAR_RELATIVE_REGEX),
            quarter_regex=compile_pattern(res.QUARTER_REGEX),
            quarter_year_front_regex=compile_pattern(res.QUARTER_YEAR_FRONT_REGEX),
            relative_quarter_regex=compile_pattern(res.RELATIVE_QUARTER_REGEX),
            season_regex=compile_pattern(res.SEASON_REGEX),
            which_week_regex=compile_pattern(res.WHICH_WEEK_REGEX),
            week_of_regex=week_of_regex,
            month_of_regex=month_of_regex,
            month_regex=month_regex,
            rest_of_regex=compile_pattern(res.REST_OF_REGEX),
            week_with_weekday_range_regex=compile_pattern(res.WEEK_WITH_WEEKDAY_RANGE_REGEX),
            weekday_search_regex=compile_pattern(res.WEEKDAY_SEARCH_REGEX),
            till_regex=till_regex,
            range_connector_regex=self.range_connector_regex,
            now_regex=now_regex,
            past_prefix_regex=self.past_prefix_regex,
            future_prefix_regex=self.future_prefix_regex,
            unit_regex=self.duration_unit_regex,
            month_of_year=res.MONTH_OF_YEAR,
            day_of_month=res.DAY_OF_MONTH,
            day_of_week=res.DAY_OF_WEEK,
            cardinal_map=res.CARDINAL_MAP,
            season_map=res.SEASON_MAP,
            season_months=res.SEASON_MONTHS,
            unit_map=res.UNIT_MAP,
            date_extractor=self.date_extractor,
            date_parser=self.date_parser,
            duration_extractor=self.duration_extractor,
            duration_parser=self.duration_parser,
            get_swift_month_or_year=get_swift_month_or_year,
            is_cardinal_last=is_cardinal_last,
            inclusive_end_period=self.resolution_config.inclusive_end_period
        ))

    def _build_time_period(self):
        simple_cases_regexes = _compile_all(res.TIME_PERIOD_SIMPLE_CASES)
        time_of_day_regex = compile_pattern(res.TIME_OF_DAY_REGEX)
        till_regex = compile_pattern(res.TIME_PERIOD_TILL_REGEX)

        self.time_period_extractor = TimePeriodExtractor(TimePeriodExtractorConfiguration(
            simple_cases_regexes=simple_cases_regexes,
            time_of_day_regex=time_of_day_regex,
            till_regex=till_regex,
            range_connector_regex=self.range_connector_regex,
            from_regex=self.from_regex,
            between_regex=self.between_regex,
            time_extractor=self.time_extractor
        ))
        self.time_period_parser = TimePeriodParser(TimePeriodParserConfiguration(
            simple_cases_regexes=simple_cases_regexes,
            time_of_day_regex=time_of_day_regex,
            till_regex=till_regex,
            range_connector_regex=self.range_connector_regex,
            time_of_day_map=res.TIME_OF_DAY_MAP,
            time_extractor=self.time_extractor,
            time_parser=self.time_parser
        ))

    def _build_date_time(self):
        connector_regex = compile_pattern(res.DATE_TIME_CONNECTOR_REGEX)
        now_regex = compile_pattern(res.NOW_TIME_REGEX)

        self.date_time_extractor = DateTimeExtractor(DateTimeExtractorConfiguration(
            date_point_extractor=self.date_extractor,
            time_point_extractor=self.time_extractor,
            duration_extractor=self.duration_extractor,
            connector_regex=connector_regex,
            now_regex=now_regex,
            utility_configuration=self.utility_configuration
        ))
        self.date_time_parser = DateTimeParser(DateTimeParserConfiguration(
            date_extractor=self.date_extractor,
            date_parser=self.date_parser,
            time_extractor=self.time_extractor,
            time_parser=self.time_parser,
            duration_extractor=self.duration_extractor,
            duration_parser=self.duration_parser,
            connector_regex=connector_regex,
            now_regex=now_regex,
            unit_map=res.UNIT_MAP,
            unit_regex=self.duration_unit_regex,
            utility_configuration=self.utility_configuration
        ))

    def _build_date_time_period(self):
        connector_regex = compile_pattern(res.DATE_TIME_PERIOD_CONNECTOR_REGEX)
        till_regex = compile_pattern(res.DATE_TIME_PERIOD_TILL_REGEX)
        specific_time_of_day_regex = compile_pattern(res.SPECIFIC_TIME_OF_DAY_REGEX)

        self.date_time_period_extractor = DateTimePeriodExtractor(DateTimePeriodExtractorConfiguration(
            date_extractor=self.date_extractor,
            time_period_extractor=self.time_period_extractor,
            date_time_extractor=self.date_time_extractor,
            duration_extractor=self.duration_extractor,
            connector_regex=connector_regex,
            till_regex=till_regex,
            range_connector_regex=self.range_connector_regex,
            from_regex=self.from_regex,
            between_regex=self.between_regex,
            specific_time_of_day_regex=specific_time_of_day_regex,
            past_prefix_regex=self.past_prefix_regex,
            future_prefix_regex=self.future_prefix_regex,
            time_unit_regex=self.utility_configuration.time_unit_regex
        ))
        self.date_time_period_parser = DateTimePeriodParser(DateTimePeriodParserConfiguration(
            date_extractor=self.date_extractor,
            date_parser=self.date_parser,
            time_period_extractor=self.time_period_extractor,
            time_period_parser=self.time_period_parser,
            date_time_extractor=self.date_time_extractor,
            date_time_parser=self.date_time_parser,
            duration_extractor=self.duration_extractor,
            duration_parser=self.duration_parser,
            connector_regex=connector_regex,
            till_regex=till_regex,
            range_connector_regex=self.range_connector_regex,
            specific_time_of_day_regex=specific_time_of_day_regex,
            past_prefix_regex=self.past_prefix_regex,
            future_prefix_regex=self.future_prefix_regex,
            unit_regex=self.duration_unit_regex,
            unit_map=res.UNIT_MAP,
            time_of_day_map=res.TIME_OF_DAY_MAP
        ))

    def extractors(self):
        """(extractor, parser) pairs in recognizer priority order."""
        return (
            (self.date_time_period_extractor, self.date_time_period_parser),
            (self.date_period_extractor, self.date_period_parser),
            (self.date_time_extractor, self.date_time_parser),
            (self.time_period_extractor, self.time_period_parser),
            (self.date_extractor, self.date_parser),
            (self.time_extractor, self.time_parser),
            (self.duration_extractor, self.duration_parser),
        )
