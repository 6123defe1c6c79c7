"""Resolve a free-text query into a response payload.

Resolution runs through fixed stages and stops at the first one that
produces an answer: navigation intent, knowledge-base match, specialist
keyword heuristic, generic fallback.  Nothing here performs I/O or keeps
state between calls.
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from . import navigation
from .knowledge_base import EMERGENCY_KEYS, KNOWLEDGE_BASE, PHARMACY_KEYS
from .match import MatchResult, find_best_match, match_confidence
from .pages import (
    BODY_SECTIONS_PAGE,
    DEFAULT_HEALTH_PAGES,
    HOTLINES_PAGE,
    PHARMACIES_PAGE,
    SPECIALISTS_PAGE,
)
from .specialists import suggest_specialist

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE_THRESHOLD = 0.65
DEFAULT_MIN_MATCH_CONFIDENCE = 0.5

PROMPT_TEXT = (
    "Please ask about a symptom, 'pharmacy', 'hotlines' or "
    "'which specialist to see.'"
)
FALLBACK_TEXT = (
    "I couldn't find an exact match. Try 'pharmacy', 'hotlines', a symptom "
    "(e.g., 'headache'), or ask which specialist to see."
)

SOURCE_PROMPT = "prompt"
SOURCE_NAVIGATION = "navigation"
SOURCE_KNOWLEDGE = "knowledge"
SOURCE_SPECIALIST = "specialist"
SOURCE_FALLBACK = "fallback"

# intent label -> (knowledge-base key for the text, default text, anchor page)
_NAVIGATION_RESPONSES: Dict[str, Tuple[Optional[str], str, str]] = {
    navigation.PHARMACY: ("pharmacy", "Open Pharmacies page.", PHARMACIES_PAGE),
    navigation.HOTLINES: ("emergency", "See Hotlines page.", HOTLINES_PAGE),
    navigation.BODY: (
        None,
        "Open Body Sections to select an area for quick guidance.",
        BODY_SECTIONS_PAGE,
    ),
    navigation.SPECIALISTS: (
        None,
        "Open Specialists to browse doctors and common problems.",
        SPECIALISTS_PAGE,
    ),
    navigation.PHARMACY_DELIVERY: (
        "delivery",
        "Delivery info on Pharmacies page.",
        PHARMACIES_PAGE,
    ),
    navigation.PHARMACY_24: (
        "247",
        "24/7 options available in Pharmacies.",
        PHARMACIES_PAGE,
    ),
}

# Checked in order; every rule whose key set holds the matched key adds its
# page ahead of the default health pages.
ANCHOR_RULES: Tuple[Tuple[frozenset, str], ...] = (
    (EMERGENCY_KEYS, HOTLINES_PAGE),
    (PHARMACY_KEYS, PHARMACIES_PAGE),
)


@dataclass(frozen=True)
class ResponsePayload:
    text: str
    anchors: Tuple[str, ...] = field(default_factory=tuple)
    confidence: Optional[float] = None
    source: str = SOURCE_FALLBACK
    matched_key: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the public ``{text, anchors, confidence?}`` shape."""

        data: Dict[str, Any] = {"text": self.text, "anchors": list(self.anchors)}
        if self.confidence is not None:
            data["confidence"] = self.confidence
        return data


def build_anchors(key: str) -> Tuple[str, ...]:
    """Return the anchor pages for a knowledge-base answer keyed by ``key``."""

    anchors = [page for keys, page in ANCHOR_RULES if key in keys]
    anchors.extend(DEFAULT_HEALTH_PAGES)
    return tuple(anchors)


def _navigation_payload(intent: str) -> ResponsePayload:
    kb_key, default_text, page = _NAVIGATION_RESPONSES[intent]
    text = KNOWLEDGE_BASE.get(kb_key, default_text) if kb_key else default_text
    return ResponsePayload(text=text, anchors=(page,), source=SOURCE_NAVIGATION)


def _knowledge_payload(
    match: MatchResult, confidence: float, confidence_threshold: float
) -> ResponsePayload:
    text = KNOWLEDGE_BASE[match.key]
    if confidence < confidence_threshold:
        text = f'Did you mean "{match.key}"? {text}'
    return ResponsePayload(
        text=text,
        anchors=build_anchors(match.key),
        confidence=confidence,
        source=SOURCE_KNOWLEDGE,
        matched_key=match.key,
    )


def answer(
    raw: Any,
    *,
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
    min_match_confidence: float = DEFAULT_MIN_MATCH_CONFIDENCE,
) -> ResponsePayload:
    """Resolve ``raw`` into a :class:`ResponsePayload`.

    Parameters
    ----------
    raw:
        The user's query.  ``None``, empty and whitespace-only values yield
        the prompt payload.
    confidence_threshold:
        Knowledge matches scoring below this value are prefixed with a
        "Did you mean" clarification.
    min_match_confidence:
        Knowledge matches scoring below this value are discarded and the
        specialist heuristic is consulted instead.
    """

    if not raw or not str(raw).strip():
        return ResponsePayload(text=PROMPT_TEXT, source=SOURCE_PROMPT)
    query = str(raw)

    intent = navigation.detect_intent(query)
    if intent:
        logger.debug("Query %r routed to navigation intent %s", query, intent)
        return _navigation_payload(intent)

    match = find_best_match(query)
    if match is not None and match.key in KNOWLEDGE_BASE:
        confidence = match_confidence(match)
        if confidence >= min_match_confidence:
            logger.debug(
                "Query %r matched %r (distance=%d, confidence=%.2f)",
                query,
                match.key,
                match.edit_distance,
                confidence,
            )
            return _knowledge_payload(match, confidence, confidence_threshold)
        logger.info(
            "Discarding match %r for %r: confidence %.2f below %.2f",
            match.key,
            query,
            confidence,
            min_match_confidence,
        )

    suggestion = suggest_specialist(query)
    if suggestion is not None:
        logger.debug(
            "Query %r mapped to %s via keyword %r",
            query,
            suggestion.specialty,
            suggestion.keyword,
        )
        return ResponsePayload(
            text=f"Suggested specialist: {suggestion.specialty}. See Specialists page.",
            anchors=(suggestion.page,),
            source=SOURCE_SPECIALIST,
        )

    logger.debug("No resolution stage matched %r", query)
    return ResponsePayload(text=FALLBACK_TEXT, source=SOURCE_FALLBACK)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Answer assistant queries")
    parser.add_argument("queries", nargs="+", help="One or more queries to resolve")
    parser.add_argument(
        "--confidence-threshold",
        type=float,
        default=DEFAULT_CONFIDENCE_THRESHOLD,
        help="Confidence below which answers are hedged",
    )
    parser.add_argument(
        "--min-match-confidence",
        type=float,
        default=DEFAULT_MIN_MATCH_CONFIDENCE,
        help="Confidence below which knowledge-base matches are ignored",
    )
    args = parser.parse_args(argv)

    for query in args.queries:
        payload = answer(
            query,
            confidence_threshold=args.confidence_threshold,
            min_match_confidence=args.min_match_confidence,
        )
        print(json.dumps({"query": query, **payload.to_dict()}))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())


__all__ = ["ANCHOR_RULES", "ResponsePayload", "answer", "build_anchors", "main"]
