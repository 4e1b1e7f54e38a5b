"""Time of day extraction and parsing.

Covers clock forms ("15:30", "3pm"), spoken forms ("seven thirty",
"half past three", "quarter to five"), noon and midnight, "at 5" and
approximate times ("5ish").
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Mapping, Optional, Pattern, Sequence, Tuple

from .core.base import BaseDateTimeParser, BaseDateTimeExtractor, ParseStrategy
from .core.constants import Constants, TimeTypeConstants
from .core.regex_utils import RegexMatch, exact_match, get_matches, match_after_prefix, search
from .core.results import DateTimeResolutionResult, ExtractResult
from .core.timex_utils import format_time, time_timex
from .core.tokens import Token, merge_all_tokens

MID_HOURS = {"midnight": 0, "midmorning": 10, "midafternoon": 14, "midday": 12}


@dataclass(frozen=True)
class TimeExtractorConfiguration:
    time_regex_list: Tuple[Pattern, ...]
    at_regex: Pattern
    ish_regex: Pattern


@dataclass(frozen=True)
class TimeParserConfiguration:
    time_regex_list: Tuple[Pattern, ...]
    at_regex: Pattern
    ish_regex: Pattern
    am_suffix_regex: Pattern
    pm_suffix_regex: Pattern
    numbers: Mapping[str, int]
    time_token_prefix: str = "at "


@dataclass
class _TimeParts:
    hour: int
    minute: int = 0
    second: int = 0
    has_minute: bool = False
    has_second: bool = False
    has_am: bool = False
    has_pm: bool = False
    has_mid: bool = False


class TimeExtractor(BaseDateTimeExtractor):
    """Finds time-of-day spans."""

    extractor_type_name = Constants.SYS_DATETIME_TIME

    def __init__(self, config: TimeExtractorConfiguration):
        super().__init__()
        self.config = config

    def extract(self, source: str, reference: Optional[datetime] = None) -> List[ExtractResult]:
        if not source or not source.strip():
            return []

        tokens: List[Token] = []
        for pattern in (*self.config.time_regex_list, self.config.at_regex, self.config.ish_regex):
            tokens.extend(Token(m.index, m.end) for m in get_matches(pattern, source))

        return merge_all_tokens(tokens, source, self.extractor_type_name)


class TimeParser(BaseDateTimeParser):
    """Resolves time spans to a time on the reference day."""

    parser_type_name = Constants.SYS_DATETIME_TIME

    def __init__(self, config: TimeParserConfiguration):
        super().__init__()
        self.config = config

    def strategies(self) -> Sequence[ParseStrategy]:
        return (self.parse_basic_regex_match, self.parse_ish)

    def build_resolution(self, value) -> Dict[str, str]:
        return {TimeTypeConstants.TIME: format_time(value)}

    def parse_basic_regex_match(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        for pattern in self.config.time_regex_list:
            match = exact_match(pattern, text)
            if match:
                return self._match_to_time(match, reference)

        # "5" as extracted from "at 5"
        match = (exact_match(self.config.at_regex, text)
                 or match_after_prefix(self.config.at_regex, self.config.time_token_prefix, text))
        if match:
            return self._match_to_time(match, reference)

        return None

    def parse_ish(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """"5ish", "noonish"."""
        match = exact_match(self.config.ish_regex, text)
        if match is None:
            return None

        hour_text = match.group("hour")
        hour = int(hour_text) if hour_text else 12
        if hour > 23:
            hour = 0
        value = datetime(reference.year, reference.month, reference.day, hour)
        comment = Constants.COMMENT_AMPM if hour_text and 0 < hour <= 12 else ""
        return DateTimeResolutionResult.resolved(time_timex(hour), value, comment=comment)

    def _match_to_time(self, match: RegexMatch, reference: datetime) -> Optional[DateTimeResolutionResult]:
        parts = self._read_parts(match)
        if parts is None:
            return None

        self._adjust_by_prefix(match.group("prefix").lower(), match, parts)
        self._adjust_by_suffix(match.group("suffix").lower(), parts)
        self._adjust_by_desc(match.group("desc").lower(), parts)

        if parts.hour == 24:
            parts.hour = 0
        if not (0 <= parts.hour <= 23 and 0 <= parts.minute <= 59 and 0 <= parts.second <= 59):
            self.logger.debug(f"Out of range time {parts.hour}:{parts.minute}:{parts.second}")
            return None

        if parts.has_second:
            timex = time_timex(parts.hour, parts.minute, parts.second)
        elif parts.has_minute:
            timex = time_timex(parts.hour, parts.minute)
        else:
            timex = time_timex(parts.hour)

        comment = ""
        if not (parts.has_am or parts.has_pm or parts.has_mid) and 0 < parts.hour <= 12:
            comment = Constants.COMMENT_AMPM

        value = datetime(reference.year, reference.month, reference.day,
                         parts.hour, parts.minute, parts.second)
        return DateTimeResolutionResult.resolved(timex, value, comment=comment)

    def _read_parts(self, match: RegexMatch) -> Optional[_TimeParts]:
        if match.group("mid"):
            for name, hour in MID_HOURS.items():
                if match.group(name):
                    return _TimeParts(hour=hour, has_mid=True)
            return None

        hour_text = match.group("hour")
        if hour_text:
            hour = int(hour_text)
        else:
            hour = self._word_value(match.group("hournum"))
            if hour is None:
                return None
        parts = _TimeParts(hour=hour)

        if match.group("min"):
            parts.minute = int(match.group("min"))
            parts.has_minute = True
        elif match.group("tens") or match.group("minnum"):
            tens = self._word_value(match.group("tens")) or 0
            units = self._word_value(match.group("minnum")) or 0
            parts.minute = tens + units
            parts.has_minute = True

        if match.group("sec"):
            parts.second = int(match.group("sec"))
            parts.has_second = True

        return parts

    def _adjust_by_prefix(self, prefix: str, match: RegexMatch, parts: _TimeParts) -> None:
        """"half past", "quarter to", "ten past"."""
        if not prefix:
            return

        if prefix.startswith("half"):
            delta = 30
        elif prefix.startswith("three quarter"):
            delta = 45
        elif "quarter" in prefix:
            delta = 15
        elif match.group("deltamin"):
            delta = int(match.group("deltamin"))
        else:
            delta = self._word_value(match.group("deltaminnum")) or 0

        if any(word in prefix.split() for word in ("to", "before")):
            delta = -delta

        parts.minute += delta
        if parts.minute < 0:
            parts.minute += 60
            parts.hour = (parts.hour - 1) % 24
        elif parts.minute >= 60:
            parts.minute -= 60
            parts.hour += 1
        parts.has_minute = True

    def _adjust_by_suffix(self, suffix: str, parts: _TimeParts) -> None:
        if not suffix:
            return

        if search(self.config.am_suffix_regex, suffix):
            if parts.hour >= 12:
                parts.hour -= 12
            parts.has_am = True
        elif search(self.config.pm_suffix_regex, suffix):
            if parts.hour < 12:
                parts.hour += 12
            parts.has_pm = True

    @staticmethod
    def _adjust_by_desc(desc: str, parts: _TimeParts) -> None:
        if not desc:
            return

        if desc.startswith("a"):
            if parts.hour >= 12:
                parts.hour -= 12
            parts.has_am = True
        elif desc.startswith("p"):
            if parts.hour < 12:
                parts.hour += 12
            parts.has_pm = True

    def _word_value(self, text: str) -> Optional[int]:
        """Sum of number words such as "twenty five"."""
        if not text:
            return None
        total = 0
        for word in text.lower().replace("-", " ").split():
            if word not in self.config.numbers:
                return None
            total += self.config.numbers[word]
        return total
