"""Building blocks shared by every temporal processor."""

from .base import BaseDateTimeExtractor, BaseDateTimeParser
from .constants import Constants, TimeTypeConstants
from .results import DateTimeParseResult, DateTimeResolutionResult, ExtractResult
from .tokens import Token, merge_all_tokens

__all__ = [
    "BaseDateTimeExtractor",
    "BaseDateTimeParser",
    "Constants",
    "TimeTypeConstants",
    "DateTimeParseResult",
    "DateTimeResolutionResult",
    "ExtractResult",
    "Token",
    "merge_all_tokens"
]
