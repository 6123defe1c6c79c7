from typing import Optional

from fastapi import APIRouter, HTTPException

from ..directory import search_pharmacies
from ..models.schemas import PharmacySearchResponse

router = APIRouter()


@router.get("/", response_model=PharmacySearchResponse)
async def read_pharmacies(
    service: Optional[str] = None,
    lat: Optional[float] = None,
    lon: Optional[float] = None,
) -> PharmacySearchResponse:
    try:
        return search_pharmacies(service, lat=lat, lon=lon)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
