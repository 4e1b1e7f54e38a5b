"""Structured access to regex matches.

Culture patterns rely on duplicate and optional named groups, so matching is
done with the third party ``regex`` engine and every match is wrapped in a
``RegexMatch`` whose missing groups read as empty strings.
"""

from typing import List, NamedTuple, Optional, Pattern

import regex as re

DEFAULT_FLAGS = re.IGNORECASE


class MatchGroup(NamedTuple):
    """Captured text of one named group; ``index`` is -1 when absent."""
    value: str
    index: int
    length: int
    captures: List[str]

    @property
    def matched(self) -> bool:
        return self.index >= 0


_EMPTY_GROUP = MatchGroup("", -1, 0, [])


class RegexMatch:
    """Named-group view over a ``regex`` match object."""

    def __init__(self, match, offset: int = 0):
        self._match = match
        self._offset = offset

    @property
    def value(self) -> str:
        return self._match.group(0)

    @property
    def index(self) -> int:
        return self._match.start() + self._offset

    @property
    def length(self) -> int:
        return self._match.end() - self._match.start()

    @property
    def end(self) -> int:
        return self._match.end() + self._offset

    def has_group(self, name: str) -> bool:
        """True when the pattern defines ``name`` and it took part in the match."""
        return self.groups(name).matched

    def groups(self, name: str) -> MatchGroup:
        if name not in self._match.re.groupindex:
            return _EMPTY_GROUP
        if self._match.start(name) < 0:
            return _EMPTY_GROUP
        return MatchGroup(
            value=self._match.group(name),
            index=self._match.start(name) + self._offset,
            length=self._match.end(name) - self._match.start(name),
            captures=list(self._match.captures(name))
        )

    def group(self, name: str) -> str:
        """Text of a named group, ``""`` when missing."""
        return self.groups(name).value

    def captures(self, name: str) -> List[str]:
        """Every capture of a repeated or duplicated named group, in order."""
        return self.groups(name).captures

    def __repr__(self) -> str:
        return f"RegexMatch({self.value!r}, index={self.index})"


def compile_pattern(pattern: str, flags: int = DEFAULT_FLAGS) -> Pattern:
    return re.compile(pattern, flags)


def get_matches(pattern: Pattern, source: str) -> List[RegexMatch]:
    """All non-overlapping matches in ``source``."""
    if not source:
        return []
    return [RegexMatch(m) for m in pattern.finditer(source)]


def search(pattern: Pattern, source: str) -> Optional[RegexMatch]:
    """First match anywhere in ``source``."""
    m = pattern.search(source)
    return RegexMatch(m) if m else None


def exact_match(pattern: Pattern, source: str, trim: bool = True) -> Optional[RegexMatch]:
    """Match covering the whole (optionally trimmed) ``source``."""
    offset = len(source) - len(source.lstrip()) if trim else 0
    text = source.strip() if trim else source
    m = pattern.fullmatch(text)
    return RegexMatch(m, offset) if m else None


def match_begin(pattern: Pattern, source: str, trim: bool = True) -> Optional[RegexMatch]:
    """Match starting at the beginning of ``source``, after leading blanks if ``trim``."""
    offset = len(source) - len(source.lstrip()) if trim else 0
    m = pattern.match(source[offset:])
    return RegexMatch(m, offset) if m else None


def match_end(pattern: Pattern, source: str, trim: bool = True) -> Optional[RegexMatch]:
    """Last match ending at the end of ``source``, before trailing blanks if ``trim``."""
    end = len(source.rstrip()) if trim else len(source)
    best = None
    for m in pattern.finditer(source[:end], overlapped=True):
        if m.end() == end and (best is None or m.start() < best.start()):
            best = m
    return RegexMatch(best) if best else None


def match_after_prefix(pattern: Pattern, prefix: str, source: str) -> Optional[RegexMatch]:
    """Match covering ``source`` when read behind ``prefix``.

    Lets patterns anchored by a lookbehind ("on", "at", "for") resolve a span
    extracted without its leading word. Indices refer to ``source``.
    """
    text = prefix + source.strip()
    for m in pattern.finditer(text):
        if m.start() == len(prefix) and m.end() == len(text):
            return RegexMatch(m, -len(prefix))
    return None
