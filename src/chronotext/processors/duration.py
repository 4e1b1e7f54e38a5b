"""Duration extraction and parsing.

Recognizes quantity + unit spans ("3 days", "half an hour", "a few weeks",
"2.5hrs", "all day") and resolves them to a number of seconds and a ``P``
timex.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Dict, List, Mapping, Optional, Pattern, Sequence

from .core.base import (
    BaseDateTimeParser, BaseDateTimeExtractor, NumberExtractor, NumberParser, ParseStrategy
)
from .core.constants import Constants, TimeTypeConstants
from .core.regex_utils import exact_match, get_matches, match_begin, match_end, search
from .core.results import DateTimeParseResult, DateTimeResolutionResult, ExtractResult
from .core.timex_utils import format_number, generate_duration_timex
from .core.tokens import Token, merge_all_tokens

CALENDAR_UNITS = ("Y", "MON", "W")


@dataclass(frozen=True)
class DurationExtractorConfiguration:
    cardinal_extractor: NumberExtractor
    followed_unit: Pattern
    number_combined_with_unit: Pattern
    an_unit_regex: Pattern
    inexact_number_unit_regex: Pattern
    suffix_and_regex: Pattern
    all_regex: Pattern
    half_regex: Pattern
    relative_duration_unit_regex: Pattern
    more_than_regex: Pattern
    less_than_regex: Pattern


@dataclass(frozen=True)
class DurationParserConfiguration:
    cardinal_extractor: NumberExtractor
    number_parser: NumberParser
    followed_unit: Pattern
    suffix_and_regex: Pattern
    number_combined_with_unit: Pattern
    an_unit_regex: Pattern
    inexact_number_unit_regex: Pattern
    all_regex: Pattern
    half_regex: Pattern
    relative_duration_unit_regex: Pattern
    duration_unit_regex: Pattern
    unit_map: Mapping[str, str]
    unit_value_map: Mapping[str, int]
    double_numbers: Mapping[str, float]


class DurationExtractor(BaseDateTimeExtractor):
    """Finds duration spans."""

    extractor_type_name = Constants.SYS_DATETIME_DURATION

    def __init__(self, config: DurationExtractorConfiguration):
        super().__init__()
        self.config = config

    def extract(self, source: str, reference: Optional[datetime] = None) -> List[ExtractResult]:
        if not source or not source.strip():
            return []

        tokens: List[Token] = []
        tokens.extend(self._number_with_unit(source))
        tokens.extend(self._regex_tokens(source, self.config.number_combined_with_unit))
        tokens.extend(self._regex_tokens(source, self.config.an_unit_regex))
        tokens.extend(self._regex_tokens(source, self.config.inexact_number_unit_regex))
        tokens.extend(self._number_with_unit_and_suffix(source, tokens))
        tokens.extend(self._implicit_duration(source))

        results = merge_all_tokens(tokens, source, self.extractor_type_name)
        return self._tag_inequality_prefix(source, results)

    def _number_with_unit(self, source: str) -> List[Token]:
        """Cardinal numbers directly followed by a unit."""
        tokens = []
        for er in self.config.cardinal_extractor.extract(source):
            match = match_begin(self.config.followed_unit, source[er.end:], trim=False)
            if match:
                tokens.append(Token(er.start, er.end + match.end))
        return tokens

    def _number_with_unit_and_suffix(self, source: str, tokens: List[Token]) -> List[Token]:
        """Extend spans over a trailing "and a half"."""
        extended = []
        for token in tokens:
            match = match_begin(self.config.suffix_and_regex, source[token.end:], trim=False)
            if match:
                extended.append(Token(token.start, token.end + match.end))
        return extended

    def _implicit_duration(self, source: str) -> List[Token]:
        """"all day", "half year", the unit in "next year"."""
        tokens = []
        for pattern in (self.config.all_regex, self.config.half_regex,
                        self.config.relative_duration_unit_regex):
            tokens.extend(self._regex_tokens(source, pattern))
        return tokens

    @staticmethod
    def _regex_tokens(source: str, pattern: Pattern) -> List[Token]:
        return [Token(match.index, match.end) for match in get_matches(pattern, source)]

    def _tag_inequality_prefix(self, source: str, results: List[ExtractResult]) -> List[ExtractResult]:
        """Absorb a "more than"/"less than" prefix and record it as the result data."""
        tagged = []
        for er in results:
            before = source[:er.start]
            mod = None
            match = match_end(self.config.more_than_regex, before)
            if match:
                mod = Constants.MORE_THAN_MOD
            else:
                match = match_end(self.config.less_than_regex, before)
                if match:
                    mod = Constants.LESS_THAN_MOD

            if mod is None:
                tagged.append(er)
                continue

            self.logger.debug(f"Duration '{er.text}' carries inequality modifier '{mod}'")
            tagged.append(ExtractResult(
                start=match.index,
                length=er.end - match.index,
                text=source[match.index:er.end],
                type=er.type,
                data=mod
            ))
        return tagged


class DurationParser(BaseDateTimeParser):
    """Resolves durations to seconds."""

    parser_type_name = Constants.SYS_DATETIME_DURATION

    def __init__(self, config: DurationParserConfiguration):
        super().__init__()
        self.config = config

    def strategies(self) -> Sequence[ParseStrategy]:
        return (
            self.parse_number_space_unit,
            self.parse_number_combined_unit,
            self.parse_an_unit,
            self.parse_inexact_number_unit,
            self.parse_implicit_duration,
        )

    def build_resolution(self, value) -> Dict[str, str]:
        return {TimeTypeConstants.DURATION: format_number(value)}

    def parse(self, er: ExtractResult, reference: Optional[datetime] = None) -> DateTimeParseResult:
        pr = super().parse(er, reference)
        if pr.value is not None and er.data in (Constants.MORE_THAN_MOD, Constants.LESS_THAN_MOD):
            pr = replace(pr, value=replace(pr.value, mod=er.data))
        return pr

    def _resolve(self, number: float, unit_text: str) -> Optional[DateTimeResolutionResult]:
        unit_text = unit_text.lower()
        unit = self.config.unit_map.get(unit_text)
        if unit is None:
            return None

        if unit in CALENDAR_UNITS and number > Constants.MAX_DURATION_UNIT_COUNT:
            self.logger.debug(f"Rejecting duration of {number} {unit_text}")
            return None

        seconds = number * self.config.unit_value_map[unit_text]
        if float(seconds).is_integer():
            seconds = int(seconds)
        return DateTimeResolutionResult.resolved(generate_duration_timex(number, unit), seconds)

    def _suffix_value(self, suffix_num: str) -> float:
        return self.config.double_numbers.get(suffix_num.lower(), 0) if suffix_num else 0

    def parse_number_space_unit(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"3 days", "three and a half hours"."""
        ers = self.config.cardinal_extractor.extract(text)
        if len(ers) != 1:
            return None

        er = ers[0]
        parsed = self.config.number_parser.parse(er)
        if parsed is None:
            return None

        match = match_begin(self.config.followed_unit, text[er.end:], trim=False)
        if match is None:
            return None

        number = parsed.number + self._suffix_value(match.group("suffix_num"))
        return self._resolve(number, match.group("unit"))

    def parse_number_combined_unit(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"3h", "2.5hrs", "10-day"."""
        match = search(self.config.number_combined_with_unit, text)
        if match is None:
            return None
        return self._resolve(float(match.group("num")), match.group("unit"))

    def parse_an_unit(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"an hour", "half a day", "a week and a half"."""
        match = search(self.config.an_unit_regex, text)
        if match is None:
            return None

        number = 0.5 if match.group("half") else 1.0
        suffix = match_begin(self.config.suffix_and_regex, text[match.end:], trim=False)
        if suffix:
            number += self._suffix_value(suffix.group("suffix_num"))
        return self._resolve(number, match.group("unit"))

    def parse_inexact_number_unit(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"a couple of days" is 2, "a few weeks" is 3."""
        match = search(self.config.inexact_number_unit_regex, text)
        if match is None:
            return None
        number = 2.0 if match.group("NumTwoTerm") else 3.0
        return self._resolve(number, match.group("unit"))

    def parse_implicit_duration(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"all day", "half year", "year" in "next year"."""
        match = search(self.config.all_regex, text)
        if match:
            return self._resolve(1.0, match.group("unit"))

        match = search(self.config.half_regex, text)
        if match:
            return self._resolve(0.5, match.group("unit"))

        match = search(self.config.relative_duration_unit_regex, text)
        if match:
            return self._resolve(1.0, match.group("unit"))

        # The unit alone, as extracted after "next"/"last"/"this"
        match = exact_match(self.config.duration_unit_regex, text)
        if match:
            return self._resolve(1.0, match.group("unit"))

        return None
