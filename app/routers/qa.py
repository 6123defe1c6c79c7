from fastapi import APIRouter, Depends

from pipeline.pipeline import answer

from ..deps import Settings, get_settings
from ..history import ASSISTANT, USER, ConversationHistory, format_assistant_turn, get_history
from ..models.schemas import AskRequest, AskResponse

router = APIRouter()


@router.post("/", response_model=AskResponse)
async def ask(
    body: AskRequest,
    settings: Settings = Depends(get_settings),
    history: ConversationHistory = Depends(get_history),
):
    payload = answer(
        body.query,
        confidence_threshold=settings.confidence_threshold,
        min_match_confidence=settings.min_match_confidence,
    )

    # Empty queries get the prompt back but are not recorded
    if body.query and body.query.strip():
        history.push(USER, body.query.strip())
        history.push(ASSISTANT, format_assistant_turn(payload.text, payload.anchors))

    return AskResponse(
        text=payload.text,
        anchors=list(payload.anchors),
        confidence=payload.confidence,
        source=payload.source,
        matched_key=payload.matched_key,
    )
