"""Levenshtein edit distance used for typo-tolerant knowledge-base lookups."""

from __future__ import annotations


def edit_distance(a: str, b: str) -> int:
    """Return the minimum number of single-character edits turning ``a`` into ``b``.

    Insertions, deletions and substitutions all cost one.  Only two rows of
    the dynamic-programming table are kept, sized to the shorter string.
    """

    if a == b:
        return 0
    a = a or ""
    b = b or ""
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Keep the rows as short as possible; distance is symmetric.
    if len(b) > len(a):
        a, b = b, a

    previous = list(range(len(b) + 1))
    current = [0] * (len(b) + 1)
    for i, char_a in enumerate(a):
        current[0] = i + 1
        for j, char_b in enumerate(b):
            cost = 0 if char_a == char_b else 1
            current[j + 1] = min(
                current[j] + 1,
                previous[j + 1] + 1,
                previous[j] + cost,
            )
        previous, current = current, previous
    return previous[len(b)]


__all__ = ["edit_distance"]
