from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..history import EXPORT_FILENAME, ConversationHistory, get_history
from ..models.schemas import HistoryTurn

router = APIRouter()


@router.get("/", response_model=List[HistoryTurn])
async def read_history(history: ConversationHistory = Depends(get_history)):
    return history.turns()


@router.get("/export", response_class=PlainTextResponse)
async def export_history(history: ConversationHistory = Depends(get_history)):
    return PlainTextResponse(
        history.export_text(),
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.delete("/", status_code=204)
async def clear_history(history: ConversationHistory = Depends(get_history)) -> None:
    history.clear()
