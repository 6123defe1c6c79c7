from typing import List

from fastapi import APIRouter, HTTPException

from ..directory import get_specialist, get_specialist_problem, list_specialists
from ..models.schemas import SpecialistDetail, SpecialistProblem, SpecialistSummary

router = APIRouter()


@router.get("/", response_model=List[SpecialistSummary])
async def read_specialists() -> List[SpecialistSummary]:
    return list_specialists()


@router.get("/{key}", response_model=SpecialistDetail)
async def read_specialist(key: str) -> SpecialistDetail:
    spec = get_specialist(key)
    if spec is None:
        raise HTTPException(status_code=404, detail="Specialist not found")
    return spec


@router.get("/{key}/problems/{index}", response_model=SpecialistProblem)
async def read_specialist_problem(key: str, index: int) -> SpecialistProblem:
    problem = get_specialist_problem(key, index)
    if problem is None:
        raise HTTPException(status_code=404, detail="Problem not found")
    return problem
