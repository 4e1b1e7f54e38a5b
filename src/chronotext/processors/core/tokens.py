"""Span tokens and the merge step shared by every extractor."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from .results import ExtractResult


@dataclass
class Token:
    """Half open interval ``[start, end)`` over the source text."""
    start: int
    end: int
    data: Optional[Any] = None

    @property
    def length(self) -> int:
        return max(self.end - self.start, 0)


def merge_all_tokens(tokens: Iterable[Token], source: str, type_name: str) -> List[ExtractResult]:
    """Merge overlapping or touching tokens into non-overlapping results.

    Overlapping tokens are unioned into one span. Each span is trimmed of
    surrounding whitespace and dropped when nothing is left. A token's
    ``data`` survives only when that token alone covers the merged span.

    Args:
        tokens: Candidate spans, in any order
        source: The text the spans index into
        type_name: Entity type stamped on every result

    Returns:
        Results ordered by start offset
    """
    ordered = sorted(
        (token for token in tokens if token is not None and token.length > 0),
        key=lambda token: (token.start, -token.end)
    )

    groups: List[List[Token]] = []
    for token in ordered:
        if groups and token.start <= max(t.end for t in groups[-1]):
            groups[-1].append(token)
        else:
            groups.append([token])

    results: List[ExtractResult] = []
    for group in groups:
        start = group[0].start
        end = max(token.end for token in group)
        data = None
        for token in group:
            if token.start == start and token.end == end and token.data is not None:
                data = token.data
                break

        text = source[start:end]
        stripped = text.strip()
        if not stripped:
            continue

        start += len(text) - len(text.lstrip())
        results.append(ExtractResult(
            start=start,
            length=len(stripped),
            text=stripped,
            type=type_name,
            data=data
        ))

    return results
