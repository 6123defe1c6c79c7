"""In-memory conversation history shared by the assistant endpoints."""

from __future__ import annotations

import threading
from collections import deque
from datetime import datetime, timezone
from functools import lru_cache
from typing import Deque, List, Sequence

from app.deps import get_settings
from app.models.schemas import HistoryTurn

USER = "user"
ASSISTANT = "assistant"
EXPORT_FILENAME = "QuadMedics_companion_history.txt"


class ConversationHistory:
    """Append-only log of ``{role, text, timestamp}`` turns.

    Only the most recent ``limit`` turns are kept.
    """

    def __init__(self, limit: int | None = None) -> None:
        self._turns: Deque[HistoryTurn] = deque(maxlen=limit)
        self._lock = threading.Lock()

    def push(self, role: str, text: str) -> HistoryTurn:
        turn = HistoryTurn(role=role, text=text, timestamp=datetime.now(timezone.utc))
        with self._lock:
            self._turns.append(turn)
        return turn

    def turns(self) -> List[HistoryTurn]:
        with self._lock:
            return list(self._turns)

    def clear(self) -> None:
        with self._lock:
            self._turns.clear()

    def export_text(self) -> str:
        """Render the history as plain text, one blank-line separated block per turn."""

        return "\n\n".join(
            f"{turn.timestamp.isoformat()} [{turn.role}]: {turn.text}"
            for turn in self.turns()
        )


def format_assistant_turn(text: str, anchors: Sequence[str]) -> str:
    """Return the history text for an assistant reply, listing anchors when present."""

    if not anchors:
        return text
    return f"{text} · See: {', '.join(anchors)}"


@lru_cache(maxsize=1)
def get_history() -> ConversationHistory:
    """Return the process-wide conversation history."""

    limit = get_settings().history_limit
    return ConversationHistory(limit=limit if limit > 0 else None)


__all__ = [
    "ASSISTANT",
    "EXPORT_FILENAME",
    "USER",
    "ConversationHistory",
    "format_assistant_turn",
    "get_history",
]
