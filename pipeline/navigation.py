"""Detect requests that should be routed straight to one of the assistant pages.

Rules are evaluated top to bottom and the first rule that fires wins, so a
query mentioning both a pharmacy and an emergency is a pharmacy request.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Optional, Tuple

PHARMACY = "pharmacy"
HOTLINES = "hotlines"
BODY = "body"
SPECIALISTS = "specialists"
PHARMACY_DELIVERY = "pharmacy-delivery"
PHARMACY_24 = "pharmacy-24"

_PHARMACY_WORD = re.compile(r"\bpharm(acy|acies|)\b")
_HOTLINE_WORD = re.compile(r"\bhot(lines|line)?\b")
_BODY_WORD = re.compile(r"\b(body|head|chest|abdomen|limb|skin)\b")
_SPECIALIST_WORD = re.compile(
    r"\b(specialist|cardio|neuro|ortho|derma|pediatric|psychiatrist"
    r"|ophthalmologist|gastro|ent)\b"
)


def _is_pharmacy(text: str) -> bool:
    if _PHARMACY_WORD.search(text):
        return True
    return "nearest" in text and "pharm" in text


def _is_hotline(text: str) -> bool:
    return bool(_HOTLINE_WORD.search(text)) or "ambulance" in text or "emergency" in text


def _is_body(text: str) -> bool:
    return bool(_BODY_WORD.search(text))


def _is_specialist(text: str) -> bool:
    return bool(_SPECIALIST_WORD.search(text))


def _is_delivery(text: str) -> bool:
    return "delivery" in text


def _is_open_24(text: str) -> bool:
    return "24/7" in text or "247" in text or "open 24" in text


NavigationRule = Tuple[Callable[[str], bool], str]

NAVIGATION_RULES: Tuple[NavigationRule, ...] = (
    (_is_pharmacy, PHARMACY),
    (_is_hotline, HOTLINES),
    (_is_body, BODY),
    (_is_specialist, SPECIALISTS),
    (_is_delivery, PHARMACY_DELIVERY),
    (_is_open_24, PHARMACY_24),
)

INTENT_LABELS = tuple(label for _, label in NAVIGATION_RULES)


def detect_intent(raw: Any) -> Optional[str]:
    """Return the navigation intent label for ``raw`` or ``None``."""

    text = str(raw).lower() if raw else ""
    if not text:
        return None
    for matches, label in NAVIGATION_RULES:
        if matches(text):
            return label
    return None


__all__ = [
    "BODY",
    "HOTLINES",
    "INTENT_LABELS",
    "NAVIGATION_RULES",
    "PHARMACY",
    "PHARMACY_24",
    "PHARMACY_DELIVERY",
    "SPECIALISTS",
    "detect_intent",
]
