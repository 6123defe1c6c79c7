"""Knowledge-base lookup combining exact, edit-distance and substring matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .distance import edit_distance
from .knowledge_base import KNOWLEDGE_BASE
from .normalize import canonicalize


@dataclass(frozen=True)
class MatchResult:
    key: str
    edit_distance: int
    normalized_input: str


def find_best_match(
    raw: Any, knowledge_base: Mapping[str, str] = KNOWLEDGE_BASE
) -> Optional[MatchResult]:
    """Return the knowledge-base key that best fits ``raw``.

    The lookup runs in three stages:

    1. An exact canonical key returns immediately with distance ``0``.
    2. Otherwise every key is scored by edit distance in iteration order;
       the first key reaching the lowest distance is kept.
    3. Finally the first key (again in iteration order) that contains the
       input, or is contained in it, replaces the stage two winner with
       distance ``0``.  This can override a closer key found in stage two.

    ``None`` is returned only for an empty canonical key or an empty
    knowledge base.
    """

    normalized = canonicalize(raw)
    if not normalized:
        return None

    if normalized in knowledge_base:
        return MatchResult(key=normalized, edit_distance=0, normalized_input=normalized)

    best_key: str | None = None
    best_distance: int | None = None
    for key in knowledge_base:
        distance = edit_distance(normalized, key)
        if best_distance is None or distance < best_distance:
            best_key, best_distance = key, distance

    for key in knowledge_base:
        if key in normalized or normalized in key:
            best_key = key
            best_distance = min(best_distance, 0) if best_distance is not None else 0
            break

    if best_key is None or best_distance is None:
        return None
    return MatchResult(
        key=best_key, edit_distance=best_distance, normalized_input=normalized
    )


def match_confidence(match: MatchResult) -> float:
    """Score ``match`` in ``[0, 1]`` from its edit distance relative to the input length."""

    length = max(len(match.normalized_input), 1)
    score = 1 - match.edit_distance / length
    return min(max(score, 0.0), 1.0)


__all__ = ["MatchResult", "find_best_match", "match_confidence"]
