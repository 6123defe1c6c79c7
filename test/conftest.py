from __future__ import annotations

import pytest

from app.deps import get_settings
from app.history import get_history


def _reset_caches() -> None:
    get_history().clear()
    get_history.cache_clear()
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def fresh_state():
    """Start every test with default settings and an empty conversation log."""

    _reset_caches()
    try:
        yield
    finally:
        _reset_caches()
