"""English number extraction and parsing.

Covers digits, decimals, digit ordinals ("21st") and number words up to
ninety-nine ("twenty one", "thirty-first"), which is the range the temporal
parsers need.
"""

from typing import List, Optional

from ..core.base import NumberExtractor, NumberParseResult, NumberParser
from ..core.constants import Constants
from ..core.regex_utils import compile_pattern, get_matches
from ..core.results import ExtractResult
from ..core.timex_utils import format_number

CARDINAL_UNITS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5, "six": 6,
    "seven": 7, "eight": 8, "nine": 9, "ten": 10, "eleven": 11, "twelve": 12,
    "thirteen": 13, "fourteen": 14, "fifteen": 15, "sixteen": 16,
    "seventeen": 17, "eighteen": 18, "nineteen": 19,
}

CARDINAL_TENS = {
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50, "sixty": 60,
    "seventy": 70, "eighty": 80, "ninety": 90,
}

ORDINAL_UNITS = {
    "first": 1, "second": 2, "third": 3, "fourth": 4, "fifth": 5, "sixth": 6,
    "seventh": 7, "eighth": 8, "ninth": 9, "tenth": 10, "eleventh": 11,
    "twelfth": 12, "thirteenth": 13, "fourteenth": 14, "fifteenth": 15,
    "sixteenth": 16, "seventeenth": 17, "eighteenth": 18, "nineteenth": 19,
}

ORDINAL_TENS = {
    "twentieth": 20, "thirtieth": 30, "fortieth": 40, "fiftieth": 50,
    "sixtieth": 60, "seventieth": 70, "eightieth": 80, "ninetieth": 90,
}

WORD_VALUES = {**CARDINAL_UNITS, **CARDINAL_TENS, **ORDINAL_UNITS, **ORDINAL_TENS}


def _alternation(words) -> str:
    return "|".join(sorted(words, key=len, reverse=True))


_SINGLE_UNITS = _alternation(w for w, v in CARDINAL_UNITS.items() if 1 <= v <= 9)
_SINGLE_ORDINALS = _alternation(w for w, v in ORDINAL_UNITS.items() if v <= 9)
_TENS = _alternation(CARDINAL_TENS)

CARDINAL_WORDS = rf'(?:(?:{_TENS})(?:[\s-]+(?:{_SINGLE_UNITS}))?|{_alternation(CARDINAL_UNITS)})'
ORDINAL_WORDS = (
    rf'(?:(?:{_TENS})[\s-]+(?:{_SINGLE_ORDINALS})|{_alternation(ORDINAL_TENS)}|{_alternation(ORDINAL_UNITS)})'
)

INTEGER_DIGITS_REGEX = compile_pattern(r'(?<![\d.,])\b\d+\b(?![.,]\d)')
DECIMAL_DIGITS_REGEX = compile_pattern(r'(?<![\d.])\b\d+\.\d+\b(?!\.\d)')
ORDINAL_DIGITS_REGEX = compile_pattern(r'\b\d+(?:st|nd|rd|th)\b')
CARDINAL_WORDS_REGEX = compile_pattern(rf'\b{CARDINAL_WORDS}\b')
ORDINAL_WORDS_REGEX = compile_pattern(rf'\b{ORDINAL_WORDS}\b')
WORD_SPLIT_REGEX = compile_pattern(r'[\s-]+')


def parse_number_text(text: str) -> Optional[float]:
    """Numeric value of a digit, decimal, ordinal or number word string."""
    trimmed = text.strip().lower()
    if not trimmed:
        return None

    for suffix in ("st", "nd", "rd", "th"):
        if trimmed.endswith(suffix) and trimmed[:-2].isdigit():
            return float(trimmed[:-2])

    try:
        return float(trimmed)
    except ValueError:
        pass

    total = 0
    for word in WORD_SPLIT_REGEX.split(trimmed):
        if word not in WORD_VALUES:
            return None
        total += WORD_VALUES[word]
    return float(total)


class EnglishNumberExtractor(NumberExtractor):
    """Number extractor in ``integer``, ``cardinal`` or ``ordinal`` mode."""

    MODES = ("integer", "cardinal", "ordinal")

    def __init__(self, mode: str = "cardinal"):
        if mode not in self.MODES:
            raise ValueError(f"Unknown number extractor mode: {mode}")
        self.mode = mode

    def extract(self, source: str) -> List[ExtractResult]:
        if not source or not source.strip():
            return []

        if self.mode == "ordinal":
            patterns = [(ORDINAL_DIGITS_REGEX, Constants.SYS_NUM_ORDINAL),
                        (ORDINAL_WORDS_REGEX, Constants.SYS_NUM_ORDINAL)]
        else:
            patterns = [(INTEGER_DIGITS_REGEX, Constants.SYS_NUM_INTEGER),
                        (CARDINAL_WORDS_REGEX, Constants.SYS_NUM_INTEGER)]
            if self.mode == "cardinal":
                patterns.append((DECIMAL_DIGITS_REGEX, Constants.SYS_NUM_DOUBLE))

        results: List[ExtractResult] = []
        for pattern, type_name in patterns:
            for match in get_matches(pattern, source):
                if any(r.start < match.end and match.index < r.end for r in results):
                    continue
                value = parse_number_text(match.value)
                if value is None:
                    continue
                results.append(ExtractResult(
                    start=match.index,
                    length=match.length,
                    text=match.value,
                    type=type_name,
                    data=format_number(value)
                ))

        return sorted(results, key=lambda r: r.start)


class EnglishNumberParser(NumberParser):
    """Reads the numeric value of an English number span."""

    def parse(self, er: ExtractResult) -> Optional[NumberParseResult]:
        if isinstance(er.data, str) and er.data:
            value = er.data
        else:
            number = parse_number_text(er.text)
            if number is None:
                return None
            value = format_number(number)

        return NumberParseResult(start=er.start, length=er.length, text=er.text, value=value)
