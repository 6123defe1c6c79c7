"""Static specialist directory and demo pharmacy listings."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from app.models.schemas import (
    Pharmacy,
    PharmacySearchResponse,
    SpecialistDetail,
    SpecialistProblem,
    SpecialistSummary,
)

logger = logging.getLogger(__name__)

DEMO_NOTE = "Demo results — replace with real API for live data."
SERVICE_24_7 = "24/7"
SERVICE_DELIVERY = "delivery"
SUPPORTED_SERVICES = (SERVICE_24_7, SERVICE_DELIVERY)

_SPECIALISTS: Tuple[SpecialistDetail, ...] = (
    SpecialistDetail(
        key="neurologist",
        name="Neurologist (Brain & Nerves)",
        problems=[
            SpecialistProblem(name="Seizure", solution="Ensure safety; call emergency if prolonged."),
            SpecialistProblem(
                name="Stroke symptoms",
                solution="Call emergency immediately; note time of onset.",
            ),
        ],
    ),
    SpecialistDetail(
        key="cardiologist",
        name="Cardiologist (Heart)",
        problems=[
            SpecialistProblem(
                name="Chest pain", solution="Severe chest pain needs emergency assessment."
            ),
            SpecialistProblem(
                name="Palpitations",
                solution="Rest and arrange cardiology review if recurrent.",
            ),
        ],
    ),
    SpecialistDetail(
        key="gastroenterologist",
        name="Gastroenterologist (Digestive)",
        problems=[
            SpecialistProblem(
                name="Abdominal pain",
                solution="See gastroenterology if recurrent or severe.",
            ),
        ],
    ),
    SpecialistDetail(
        key="orthopedist",
        name="Orthopedist (Bones & Joints)",
        problems=[
            SpecialistProblem(name="Fracture", solution="Immobilize and seek urgent care."),
        ],
    ),
    SpecialistDetail(
        key="dermatologist",
        name="Dermatologist (Skin)",
        problems=[
            SpecialistProblem(
                name="Rash", solution="Topical care; see dermatologist if spreading."
            ),
        ],
    ),
    SpecialistDetail(
        key="pediatrician",
        name="Pediatrician (Children)",
        problems=[
            SpecialistProblem(
                name="High fever in child",
                solution="Seek urgent review for infants or very high fever.",
            ),
        ],
    ),
    SpecialistDetail(
        key="psychiatrist",
        name="Psychiatrist (Mental Health)",
        problems=[
            SpecialistProblem(
                name="Depression",
                solution="Seek mental health support; urgent if suicidal.",
            ),
        ],
    ),
    SpecialistDetail(
        key="ophthalmologist",
        name="Ophthalmologist (Eyes)",
        problems=[
            SpecialistProblem(
                name="Eye injury",
                solution="Cover and seek immediate ophthalmology care.",
            ),
        ],
    ),
    SpecialistDetail(
        key="ent",
        name="ENT (Ear Nose Throat)",
        problems=[
            SpecialistProblem(
                name="Severe sore throat",
                solution="Assess for airway compromise; see ENT/GP.",
            ),
        ],
    ),
)

_SPECIALISTS_BY_KEY: Dict[str, SpecialistDetail] = {spec.key: spec for spec in _SPECIALISTS}

_PHARMACIES: Tuple[Pharmacy, ...] = (
    Pharmacy(
        name="HealthPlus Pharmacy",
        distance_km=0.5,
        services=["24/7", "Delivery", "Cold-chain handling"],
        phone="01234567890",
        map_url="https://maps.google.com/?q=HealthPlus+Pharmacy",
    ),
    Pharmacy(
        name="CityCare Pharmacy",
        distance_km=1.2,
        services=["24/7", "Home delivery"],
        phone="01122334455",
    ),
    Pharmacy(name="Al-Ahram Pharmacy", services=["24/7"]),
)


def list_specialists() -> List[SpecialistSummary]:
    return [SpecialistSummary(key=spec.key, name=spec.name) for spec in _SPECIALISTS]


def get_specialist(key: str) -> Optional[SpecialistDetail]:
    """Return the directory entry for ``key`` (case-insensitive) if known."""

    spec = _SPECIALISTS_BY_KEY.get((key or "").strip().lower())
    if spec is None:
        logger.warning("Unknown specialist requested: %r", key)
        return None
    return spec.model_copy(deep=True)


def get_specialist_problem(key: str, index: int) -> Optional[SpecialistProblem]:
    spec = get_specialist(key)
    if spec is None or not 0 <= index < len(spec.problems):
        return None
    return spec.problems[index]


def _offers(pharmacy: Pharmacy, service: str) -> bool:
    service = service.lower()
    return any(service in offered.lower() for offered in pharmacy.services)


def _format_location(lat: float | None, lon: float | None) -> str | None:
    if lat is None or lon is None:
        return None
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        logger.warning("Ignoring out-of-range coordinates lat=%s lon=%s", lat, lon)
        return None
    return f"{lat:.4f}, {lon:.4f} (demo)"


def search_pharmacies(
    service: str | None = None,
    *,
    lat: float | None = None,
    lon: float | None = None,
) -> PharmacySearchResponse:
    """Return demo pharmacy listings, optionally filtered by ``service``.

    Raises
    ------
    ValueError
        If ``service`` is not one of :data:`SUPPORTED_SERVICES`.
    """

    if service is not None and service.lower() not in SUPPORTED_SERVICES:
        raise ValueError(
            f"Unsupported service {service!r}. Expected one of {SUPPORTED_SERVICES}."
        )

    pharmacies = [pharmacy.model_copy(deep=True) for pharmacy in _PHARMACIES]
    if service is None:
        # Nearby search only lists pharmacies with a known distance.
        pharmacies = [pharmacy for pharmacy in pharmacies if pharmacy.distance_km is not None]
    else:
        pharmacies = [pharmacy for pharmacy in pharmacies if _offers(pharmacy, service)]

    location = _format_location(lat, lon)
    note = DEMO_NOTE
    if (lat is not None or lon is not None) and location is None:
        note = f"Unable to get location — showing demo. {DEMO_NOTE}"
    return PharmacySearchResponse(pharmacies=pharmacies, location=location, note=note)


__all__ = [
    "SUPPORTED_SERVICES",
    "get_specialist",
    "get_specialist_problem",
    "list_specialists",
    "search_pharmacies",
]
