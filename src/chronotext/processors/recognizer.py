"""Date-Time Recognizer for ChronoText

Runs every entity extractor over a sentence, keeps the best candidate where
spans of different kinds overlap, parses the survivors and flattens the
future/past resolutions into plain value maps. Built recognizers are kept in
a thread safe cache keyed by culture, model type and options.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

from ..core.config_manager import SUPPORTED_CULTURES, ResolutionConfig
from ..core.error_handler import ConfigurationError
from ..core.logging_manager import LoggingManager
from .core.constants import Constants, TimeTypeConstants
from .core.results import DateTimeParseResult, ExtractResult
from .english.configuration import EnglishCultureConfiguration

DATETIME_MODEL = "datetime"

# Tie breaker when two spans of different kinds have the same length
TYPE_PRIORITY = (
    Constants.SYS_DATETIME_DATETIMEPERIOD,
    Constants.SYS_DATETIME_DATEPERIOD,
    Constants.SYS_DATETIME_DATETIME,
    Constants.SYS_DATETIME_TIMEPERIOD,
    Constants.SYS_DATETIME_DATE,
    Constants.SYS_DATETIME_TIME,
    Constants.SYS_DATETIME_DURATION,
)

VALUE_KEYS = {
    TimeTypeConstants.DATE: "value",
    TimeTypeConstants.TIME: "value",
    TimeTypeConstants.DATETIME: "value",
    TimeTypeConstants.DURATION: "value",
    TimeTypeConstants.START_DATE: "start",
    TimeTypeConstants.START_TIME: "start",
    TimeTypeConstants.START_DATETIME: "start",
    TimeTypeConstants.END_DATE: "end",
    TimeTypeConstants.END_TIME: "end",
    TimeTypeConstants.END_DATETIME: "end",
}


@dataclass
class RecognizedEntity:
    """One recognized temporal expression."""
    start: int
    end: int
    text: str
    type_name: str
    timex: str
    resolution: List[Dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "text": self.text,
            "type": f"builtin.datetimeV2.{self.type_name}",
            "timex": self.timex,
            "resolution": self.resolution,
        }


def _options_key(options: Any) -> Hashable:
    if options is None:
        return None
    if isinstance(options, ResolutionConfig):
        options = options.model_dump()
    if isinstance(options, dict):
        return tuple(sorted(options.items()))
    return options


class ModelCache:
    """Builds each recognizer once per (culture, model type, options)."""

    def __init__(self):
        self.logger = LoggingManager.get_logger(__name__)
        self._models: Dict[Tuple[str, str, Hashable], Any] = {}
        self._lock = threading.RLock()

    def get_or_create(self, culture: str, model_type: str, options: Any,
                      factory: Callable[[], Any]) -> Any:
        """Return the cached model, building it with ``factory`` on a miss."""
        key = (culture.lower(), model_type, _options_key(options))
        with self._lock:
            if key not in self._models:
                self.logger.debug(f"Building {model_type} model for {culture}")
                self._models[key] = factory()
            return self._models[key]

    def clear(self):
        with self._lock:
            self._models.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._models)


class DateTimeRecognizer:
    """Finds and resolves every temporal expression in a sentence.

    Args:
        culture: Culture code, only ``en-us`` ships resources
        resolution_config: Resolution thresholds handed to the culture configuration
    """

    def __init__(self, culture: str = "en-us", resolution_config: Optional[ResolutionConfig] = None):
        self.logger = LoggingManager.get_logger(__name__)
        self.culture = culture.strip().lower()
        if self.culture not in SUPPORTED_CULTURES:
            raise ConfigurationError(
                f"Unsupported culture '{culture}', expected one of {', '.join(SUPPORTED_CULTURES)}"
            )
        self.configuration = EnglishCultureConfiguration(resolution_config)
        self._parsers = {
            extractor.extractor_type_name: parser
            for extractor, parser in self.configuration.extractors()
        }

    def extract(self, text: str, reference: Optional[datetime] = None) -> List[ExtractResult]:
        """Candidates of every kind with cross kind overlaps removed."""
        if not text or not text.strip():
            return []

        reference = reference or datetime.now()
        candidates: List[ExtractResult] = []
        for extractor, _ in self.configuration.extractors():
            candidates.extend(extractor.extract(text, reference))

        ranked = sorted(
            candidates,
            key=lambda er: (-er.length, TYPE_PRIORITY.index(er.type), er.start)
        )
        kept: List[ExtractResult] = []
        for er in ranked:
            if any(er.overlaps(other) for other in kept):
                self.logger.debug(f"Dropping {er.type} '{er.text}', overlapped by a better span")
                continue
            kept.append(er)

        return sorted(kept, key=lambda er: er.start)

    def recognize(self, text: str, reference: Optional[datetime] = None) -> List[RecognizedEntity]:
        """Extract, parse and resolve every temporal expression in ``text``."""
        reference = reference or datetime.now()
        entities = []
        for er in self.extract(text, reference):
            pr = self._parsers[er.type].parse(er, reference)
            if pr.value is None:
                continue
            entities.append(RecognizedEntity(
                start=pr.start,
                end=pr.end,
                text=pr.text,
                type_name=pr.type,
                timex=pr.timex_str,
                resolution=self.build_values(pr)
            ))

        self.logger.info(f"Recognized {len(entities)} temporal entities in {len(text or '')} characters")
        return entities

    @staticmethod
    def build_values(pr: DateTimeParseResult) -> List[Dict[str, str]]:
        """Flatten the future and past resolutions into value maps.

        Ambiguous expressions yield two maps, the past one first. A double
        timex ``future|past`` is split between them.
        """
        value = pr.value
        future_timex, _, past_timex = pr.timex_str.partition(Constants.TIMEX_ALTERNATIVE_SEPARATOR)
        past_timex = past_timex or future_timex

        def to_entry(timex: str, resolution: Dict[str, str]) -> Dict[str, str]:
            entry = {"timex": timex, "type": pr.type}
            for key, item in resolution.items():
                entry[VALUE_KEYS.get(key, key)] = item
            if value.mod:
                entry[TimeTypeConstants.MOD] = value.mod
            return entry

        future_entry = to_entry(future_timex, value.future_resolution)
        past_entry = to_entry(past_timex, value.past_resolution)
        if future_entry == past_entry:
            return [future_entry]
        return [past_entry, future_entry]


_default_cache = ModelCache()


def recognize_datetime(text: str, culture: str = "en-us", reference: Optional[datetime] = None,
                       cache: Optional[ModelCache] = None,
                       resolution_config: Optional[ResolutionConfig] = None) -> List[RecognizedEntity]:
    """Recognize temporal expressions with a cached recognizer.

    Args:
        text: Sentence to search
        culture: Culture code
        reference: Anchor for relative expressions, defaults to now
        cache: Model cache, defaults to the process wide one
        resolution_config: Resolution thresholds, part of the cache key

    Returns:
        Recognized entities ordered by position

    Raises:
        ConfigurationError: The culture is not supported
    """
    cache = cache if cache is not None else _default_cache
    recognizer = cache.get_or_create(
        culture, DATETIME_MODEL, resolution_config,
        lambda: DateTimeRecognizer(culture, resolution_config)
    )
    return recognizer.recognize(text, reference)
