"""ChronoText - Temporal Expression Recognizer

Finds dates, times, durations and ranges in English text and resolves them
to concrete values and timex strings against a reference date.
"""

__version__ = "0.1.0"
__author__ = "ChronoText Team"
__description__ = "Temporal Expression Recognizer"

from .processors.recognizer import DateTimeRecognizer, ModelCache, RecognizedEntity, recognize_datetime

__all__ = ["DateTimeRecognizer", "ModelCache", "RecognizedEntity", "recognize_datetime"]
