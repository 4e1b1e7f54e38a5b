"""Temporal Processing Module

Extractors and parsers for every temporal entity kind, the English culture
configuration wiring them together and the recognizer façade.
"""

from .date import DateExtractor, DateParser
from .time import TimeExtractor, TimeParser
from .duration import DurationExtractor, DurationParser
from .date_period import DatePeriodExtractor, DatePeriodParser
from .time_period import TimePeriodExtractor, TimePeriodParser
from .date_time import DateTimeExtractor, DateTimeParser
from .date_time_period import DateTimePeriodExtractor, DateTimePeriodParser
from .english.configuration import EnglishCultureConfiguration
from .recognizer import DateTimeRecognizer, ModelCache, RecognizedEntity, recognize_datetime

__all__ = [
    "DateExtractor",
    "DateParser",
    "TimeExtractor",
    "TimeParser",
    "DurationExtractor",
    "DurationParser",
    "DatePeriodExtractor",
    "DatePeriodParser",
    "TimePeriodExtractor",
    "TimePeriodParser",
    "DateTimeExtractor",
    "DateTimeParser",
    "DateTimePeriodExtractor",
    "DateTimePeriodParser",
    "EnglishCultureConfiguration",
    "DateTimeRecognizer",
    "ModelCache",
    "RecognizedEntity",
    "recognize_datetime"
]
