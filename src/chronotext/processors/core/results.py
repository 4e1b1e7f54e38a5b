"""Result records passed between extractors, parsers and callers."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ExtractResult:
    """A typed span found in the source text."""
    start: int
    length: int
    text: str
    type: str
    data: Optional[Any] = None

    @property
    def end(self) -> int:
        return self.start + self.length

    @classmethod
    def from_text(cls, text: str, type_name: str = "") -> 'ExtractResult':
        """Wrap a whole string as a result starting at 0."""
        return cls(start=0, length=len(text), text=text, type=type_name)

    def overlaps(self, other: 'ExtractResult') -> bool:
        return self.start < other.end and other.start < self.end

    def covers(self, other: 'ExtractResult') -> bool:
        return self.start <= other.start and self.end >= other.end


@dataclass
class DateTimeResolutionResult:
    """Resolved value of one temporal expression.

    ``future_value`` and ``past_value`` hold a ``datetime`` for points, a
    ``(begin, end)`` tuple for periods and a number of seconds for durations.
    """
    timex: str = ""
    success: bool = False
    future_value: Optional[Any] = None
    past_value: Optional[Any] = None
    mod: str = ""
    comment: str = ""
    sub_date_time_entities: List['DateTimeParseResult'] = field(default_factory=list)
    future_resolution: Dict[str, str] = field(default_factory=dict)
    past_resolution: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def resolved(cls, timex: str, future_value: Any, past_value: Optional[Any] = None,
                 **kwargs) -> 'DateTimeResolutionResult':
        """Successful resolution; ``past_value`` defaults to ``future_value``."""
        return cls(
            timex=timex,
            success=True,
            future_value=future_value,
            past_value=future_value if past_value is None else past_value,
            **kwargs
        )


@dataclass(frozen=True)
class DateTimeParseResult:
    """Parser output, one per ``ExtractResult``."""
    start: int
    length: int
    text: str
    type: str
    data: Optional[Any] = None
    value: Optional[DateTimeResolutionResult] = None
    timex_str: str = ""
    resolution_str: str = ""

    @property
    def end(self) -> int:
        return self.start + self.length

    @classmethod
    def from_extract_result(cls, er: ExtractResult,
                            value: Optional[DateTimeResolutionResult] = None,
                            timex_str: str = "",
                            resolution_str: str = "") -> 'DateTimeParseResult':
        return cls(
            start=er.start,
            length=er.length,
            text=er.text,
            type=er.type,
            data=er.data,
            value=value,
            timex_str=timex_str,
            resolution_str=resolution_str
        )
