"""Utilities for describing the assistant's static knowledge and active settings."""

from __future__ import annotations

from typing import Any, Dict

from pipeline.knowledge_base import KNOWLEDGE_BASE
from pipeline.navigation import INTENT_LABELS
from pipeline.specialists import SPECIALIST_RULES

from .deps import get_settings


def build_knowledge_summary() -> Dict[str, Any]:
    """Return a serialisable summary of the knowledge base and rule tables."""

    settings = get_settings()
    summary: Dict[str, Any] = {
        "entry_count": len(KNOWLEDGE_BASE),
        "keys": list(KNOWLEDGE_BASE),
        "navigation_intents": list(INTENT_LABELS),
        "specialties": [rule.specialty for rule in SPECIALIST_RULES],
        "thresholds": {
            "confidence_threshold": settings.confidence_threshold,
            "min_match_confidence": settings.min_match_confidence,
        },
    }
    return summary
