"""Helper exports for evaluation utilities."""

from .eval import (
    anchors_match,
    answer_exact_match,
    compute_metrics,
    evaluate_examples,
    load_examples,
    normalize_answer,
)

__all__ = [
    "anchors_match",
    "answer_exact_match",
    "compute_metrics",
    "evaluate_examples",
    "load_examples",
    "normalize_answer",
]
