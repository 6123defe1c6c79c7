"""Metadata endpoints for surface-level application information."""

from __future__ import annotations

from fastapi import APIRouter

from ..metadata import build_knowledge_summary
from ..models.schemas import KnowledgeSummary

router = APIRouter()


@router.get("/knowledge-summary", response_model=KnowledgeSummary)
async def read_knowledge_summary() -> KnowledgeSummary:
    """Return information about the knowledge base and routing rules."""

    summary = build_knowledge_summary()
    return KnowledgeSummary(**summary)
