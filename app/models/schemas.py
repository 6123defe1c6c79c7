from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel


class AskRequest(BaseModel):
    query: Optional[str] = None


class AskResponse(BaseModel):
    text: str
    anchors: List[str]
    confidence: Optional[float] = None
    source: str
    matched_key: Optional[str] = None


class HistoryTurn(BaseModel):
    role: Literal["user", "assistant"]
    text: str
    timestamp: datetime


class SpecialistProblem(BaseModel):
    name: str
    solution: str


class SpecialistSummary(BaseModel):
    key: str
    name: str


class SpecialistDetail(SpecialistSummary):
    problems: List[SpecialistProblem]


class Pharmacy(BaseModel):
    name: str
    distance_km: Optional[float] = None
    services: List[str]
    phone: Optional[str] = None
    map_url: Optional[str] = None


class PharmacySearchResponse(BaseModel):
    pharmacies: List[Pharmacy]
    location: Optional[str] = None
    note: str


class KnowledgeSummary(BaseModel):
    entry_count: int
    keys: List[str]
    navigation_intents: List[str]
    specialties: List[str]
    thresholds: Dict[str, float]
