"""Keyword fallback that suggests which specialist a user should see."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .pages import SPECIALISTS_PAGE


@dataclass(frozen=True)
class SpecialistRule:
    keywords: Tuple[str, ...]
    specialty: str
    page: str = SPECIALISTS_PAGE


@dataclass(frozen=True)
class SpecialistSuggestion:
    specialty: str
    page: str
    keyword: str


SPECIALIST_RULES: Tuple[SpecialistRule, ...] = (
    SpecialistRule(("headache", "dizzy", "migraine", "seizure"), "Neurologist"),
    SpecialistRule(
        ("chest", "palpit", "heart", "shortness of breath", "sob"), "Cardiologist"
    ),
    SpecialistRule(("stomach", "abdomen", "nausea", "vomit"), "Gastroenterologist"),
    SpecialistRule(("joint", "sprain", "fracture", "back"), "Orthopedist"),
    SpecialistRule(("skin", "rash", "acne", "eczema", "burn"), "Dermatologist"),
    SpecialistRule(("eye", "vision", "red eye", "blurry"), "Ophthalmologist"),
    SpecialistRule(("throat", "ear", "nose", "sinus"), "ENT"),
    SpecialistRule(("child", "baby", "pediatric"), "Pediatrician"),
)


def suggest_specialist(raw: Any) -> Optional[SpecialistSuggestion]:
    """Return the specialty tied to the first keyword found in ``raw``.

    Keywords are plain substrings, so ``"ear"`` also fires on ``"heart"``;
    rule order decides which specialty such overlaps resolve to.
    """

    text = str(raw).lower() if raw else ""
    if not text:
        return None
    for rule in SPECIALIST_RULES:
        for keyword in rule.keywords:
            if keyword in text:
                return SpecialistSuggestion(
                    specialty=rule.specialty, page=rule.page, keyword=keyword
                )
    return None


__all__ = ["SPECIALIST_RULES", "SpecialistRule", "SpecialistSuggestion", "suggest_specialist"]
