"""Extractor and parser interfaces shared by every temporal entity kind."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from ...core.logging_manager import LoggingManager
from .results import DateTimeParseResult, DateTimeResolutionResult, ExtractResult

ParseStrategy = Callable[[str, datetime], Optional[DateTimeResolutionResult]]


@dataclass(frozen=True)
class NumberParseResult:
    """Parsed number; ``value`` keeps the numeric string form."""
    start: int
    length: int
    text: str
    value: str

    @property
    def number(self) -> float:
        return float(self.value)


class NumberExtractor(ABC):
    """Finds cardinal, ordinal or integer spans."""

    @abstractmethod
    def extract(self, source: str) -> List[ExtractResult]:
        ...


class NumberParser(ABC):
    """Turns a number span into its numeric value."""

    @abstractmethod
    def parse(self, er: ExtractResult) -> Optional[NumberParseResult]:
        ...


class BaseDateTimeExtractor(ABC):
    """Finds spans of one temporal entity kind."""

    extractor_type_name: str = ""

    def __init__(self):
        self.logger = LoggingManager.get_logger(self.__class__.__module__)

    @abstractmethod
    def extract(self, source: str, reference: Optional[datetime] = None) -> List[ExtractResult]:
        """Find entity spans.

        Args:
            source: Text to search
            reference: Anchor for relative expressions, defaults to now

        Returns:
            Non-overlapping results ordered by start
        """


class BaseDateTimeParser(ABC):
    """Runs an ordered list of resolution strategies, first success wins."""

    parser_type_name: str = ""

    def __init__(self):
        self.logger = LoggingManager.get_logger(self.__class__.__module__)

    @abstractmethod
    def strategies(self) -> Sequence[ParseStrategy]:
        """Resolution strategies in priority order."""

    @abstractmethod
    def build_resolution(self, value) -> Dict[str, str]:
        """Resolution map for one future or past value."""

    def resolve(self, text: str, reference: datetime) -> Optional[DateTimeResolutionResult]:
        """Resolve raw text with the strategy chain, ``None`` on a miss."""
        trimmed = text.strip()
        if not trimmed:
            return None

        for strategy in self.strategies():
            result = strategy(trimmed, reference)
            if result is not None and result.success:
                self.logger.debug(f"{strategy.__name__} resolved '{trimmed}' to {result.timex}")
                return result

        return None

    def parse(self, er: ExtractResult, reference: Optional[datetime] = None) -> DateTimeParseResult:
        """Parse an extract result of this parser's type.

        Results of another type, and texts no strategy resolves, come back
        with ``value=None`` and empty timex.
        """
        if er.type != self.parser_type_name:
            return DateTimeParseResult.from_extract_result(er)

        reference = reference or datetime.now()
        inner = self.resolve(er.text, reference)
        if inner is None:
            self.logger.debug(f"No strategy resolved '{er.text}'")
            return DateTimeParseResult.from_extract_result(er)

        inner = replace(
            inner,
            future_resolution=self.build_resolution(inner.future_value),
            past_resolution=self.build_resolution(inner.past_value)
        )
        return DateTimeParseResult.from_extract_result(er, value=inner, timex_str=inner.timex)
