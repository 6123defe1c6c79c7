"""Static advisory knowledge base keyed by canonical phrase.

The mapping is built once at import time and exposed read-only through
:class:`types.MappingProxyType`.  Iteration order matters: the matcher walks
keys in this order and the first qualifying key wins ties.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_ENTRIES = (
    (
        "headache",
        "Rest in a quiet dark room, hydrate. Use OTC pain relief if appropriate. "
        "Seek urgent care for sudden severe headache, neck stiffness, fever, or "
        "neurological signs.",
    ),
    (
        "migraine",
        "Migraine: rest, reduce light/noise, antiemetic for nausea, specific "
        "migraine meds if prescribed.",
    ),
    (
        "dizziness",
        "Sit or lie down; hydrate. If recurrent or with fainting, seek medical "
        "review.",
    ),
    (
        "chest pain",
        "Chest pain can be serious. If severe, crushing, or with "
        "breathlessness/collapse, call emergency services immediately.",
    ),
    (
        "seizure",
        "Protect from injury, do not restrain. Place on side if breathing. Call "
        "emergency if first seizure or >5 minutes.",
    ),
    (
        "fever",
        "Rest, fluids, antipyretics for comfort; seek urgent care for very high "
        "fever, confusion, or infants.",
    ),
    (
        "rash",
        "Remove irritant, wash area, apply emollients. Seek a dermatologist if "
        "spreading, painful, or with systemic symptoms.",
    ),
    (
        "allergy",
        "Antihistamines for mild allergy. For facial/throat swelling or breathing "
        "difficulty use epinephrine if available and call emergency.",
    ),
    (
        "pharmacy",
        "Open the Pharmacies page to search nearby pharmacies, see 24/7 options "
        "and delivery.",
    ),
    (
        "delivery",
        "Some pharmacies offer delivery. Use the Pharmacies page and call the "
        "number shown to confirm.",
    ),
    (
        "247",
        "Certain pharmacies operate 24/7. Use the Pharmacies page to view demo "
        "24/7 listings.",
    ),
    (
        "emergency",
        "Emergency numbers are on the Hotlines page. Call emergency services for "
        "life-threatening events.",
    ),
    (
        "nausea",
        "Sip clear fluids, try ginger or antiemetic if available. Seek help if "
        "prolonged or with dehydration.",
    ),
    (
        "stomach ache",
        "Rest, hydrate, avoid solid food for a few hours. Seek care for severe "
        "pain, vomiting, fever or blood in stool.",
    ),
    (
        "joint pain",
        "Rest, ice, compression and elevation for acute injury. See orthopedist "
        "for persistent or mechanical pain.",
    ),
    (
        "fracture",
        "Immobilize, avoid movement and seek emergency care or orthopedics.",
    ),
    (
        "red eye",
        "Avoid rubbing, use lubricating drops; urgent eye care if vision changes "
        "or severe pain.",
    ),
    (
        "blurry vision",
        "Rest eyes and seek prompt eye assessment if sudden or persistent.",
    ),
)

KNOWLEDGE_BASE: Mapping[str, str] = MappingProxyType(dict(_ENTRIES))

# Keys whose answers should also point at the pharmacy locator.
PHARMACY_KEYS = frozenset({"pharmacy", "delivery", "247"})

# Keys whose answers should also point at the hotline directory.  Several of
# these have no entry yet; the set is kept whole so anchors stay stable when
# they are added.
EMERGENCY_KEYS = frozenset(
    {
        "emergency",
        "poison",
        "mental health",
        "blood bank",
        "child helpline",
        "women helpline",
    }
)


__all__ = ["KNOWLEDGE_BASE", "PHARMACY_KEYS", "EMERGENCY_KEYS"]
