"""Utilities for turning raw user text into comparable canonical keys.

Every lookup in the assistant goes through :func:`canonicalize`.  Two
queries are treated as the same question when their canonical keys are
equal, so the transform is intentionally blunt: lower-case the text, drop
anything that is not an ASCII letter, digit or space, and trim the result.
The transform is idempotent, which lets callers canonicalize defensively
without worrying about double application.
"""

from __future__ import annotations

import re
from typing import Any

_NON_KEY_CHARS = re.compile(r"[^a-z0-9 ]")


def _coerce_text(raw: Any) -> str:
    """Return ``raw`` as a string, mapping ``None`` and other falsy values to ``""``."""

    if not raw:
        return ""
    if isinstance(raw, str):
        return raw
    # Fallback: convert any other types to string for consistency
    return str(raw)


def canonicalize(raw: Any) -> str:
    """Normalize ``raw`` into a canonical knowledge-base key.

    Parameters
    ----------
    raw:
        Free text typed by the user.  ``None`` is accepted and yields ``""``.

    Returns
    -------
    str
        Lower-case text containing only ``[a-z0-9 ]`` with surrounding
        spaces removed.
    """

    text = _coerce_text(raw).lower()
    return _NON_KEY_CHARS.sub("", text).strip()


__all__ = ["canonicalize"]
