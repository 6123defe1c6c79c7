"""Evaluation utilities for the QuadMedics Companion ask API."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence, TextIO

from fastapi.testclient import TestClient

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from app.history import get_history
from app.main import app

DEFAULT_TESTSET_PATH = Path("eval/testset.sample.jsonl")


def load_examples(path: Path) -> List[Dict[str, Any]]:
    """Load evaluation examples from a JSONL file."""

    examples: List[Dict[str, Any]] = []
    with path.open("r", encoding="utf-8") as handle:
        for raw_line in handle:
            line = raw_line.strip()
            if not line:
                continue
            examples.append(json.loads(line))
    return examples


def normalize_answer(text: Any) -> str:
    """Return a normalized string representation suitable for comparison."""

    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return " ".join(text.strip().lower().split())


def answer_exact_match(prediction: Any, gold_answers: Sequence[Any]) -> bool:
    """Check if ``prediction`` matches any gold answer after normalization."""

    if not gold_answers:
        return False
    normalized_prediction = normalize_answer(prediction)
    if not normalized_prediction:
        return False
    return any(normalized_prediction == normalize_answer(ans) for ans in gold_answers)


def anchors_match(anchors: Sequence[str], expected_anchors: Sequence[str] | None) -> bool:
    """Verify the returned anchors equal the expected ones, order included.

    ``None`` means the example does not check anchors.
    """

    if expected_anchors is None:
        return True
    return list(anchors) == list(expected_anchors)


def evaluate_examples(
    client: TestClient,
    examples: Sequence[Dict[str, Any]],
    *,
    verbose: bool = False,
    output_stream: TextIO | None = None,
) -> List[Dict[str, Any]]:
    """Call the ask endpoint for each example and capture predictions."""

    if output_stream is None:
        output_stream = sys.stdout

    records: List[Dict[str, Any]] = []
    total_examples = len(examples)
    for index, example in enumerate(examples, start=1):
        query = example.get("query")
        gold_answers = example.get("answers") or []
        expected_anchors = example.get("anchors")

        prefix = f"[{index}/{total_examples}] "

        def log(message: str, *, indent: bool = False) -> None:
            if not verbose:
                return
            formatted = f"  {message}" if indent else message
            print(f"{prefix}{formatted}", file=output_stream, flush=True)

        record: Dict[str, Any] = {
            "query": query,
            "gold_answers": gold_answers,
            "expected_anchors": expected_anchors,
        }
        log(f"Query: {(query or '').strip() or '<empty query>'}")

        response = client.post("/ask/", json={"query": query})
        record["status_code"] = response.status_code

        data: Dict[str, Any] | None = None
        error_message: str | None = None
        if response.status_code != 200:
            error_message = response.text
        else:
            try:
                data = response.json()
            except ValueError as exc:  # pragma: no cover - unexpected response format
                error_message = str(exc)

        if data is None:
            record.update(
                {
                    "text": None,
                    "anchors": [],
                    "error": error_message or "Unexpected response",
                    "answer_exact_match": False,
                    "anchor_match": False,
                }
            )
            log(
                f"Result: ERROR (status {record['status_code']}) - {record['error']}",
                indent=True,
            )
            records.append(record)
            continue

        text = data.get("text", "")
        anchors = data.get("anchors") or []
        if not isinstance(anchors, list):
            anchors = []

        record.update(
            {
                "text": text,
                "anchors": anchors,
                "confidence": data.get("confidence"),
                "source": data.get("source"),
                "answer_exact_match": answer_exact_match(text, gold_answers),
                "anchor_match": anchors_match(anchors, expected_anchors),
            }
        )
        answer_match = "yes" if record["answer_exact_match"] else "no"
        if expected_anchors is not None:
            anchor_match = "yes" if record["anchor_match"] else "no"
        else:
            anchor_match = "n/a"
        log(
            f"Result: source {record['source']}, "
            f"answer match: {answer_match}, "
            f"anchor match: {anchor_match}",
            indent=True,
        )
        records.append(record)

    return records


def compute_metrics(records: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """Aggregate accuracy metrics from evaluated examples."""

    total = len(records)
    answer_correct = sum(1 for record in records if record.get("answer_exact_match"))
    anchor_applicable = sum(
        1 for record in records if record.get("expected_anchors") is not None
    )
    anchor_correct = sum(
        1
        for record in records
        if record.get("expected_anchors") is not None and record.get("anchor_match")
    )
    error_count = sum(1 for record in records if record.get("error"))

    sources: Dict[str, int] = {}
    for record in records:
        source = record.get("source")
        if source:
            sources[source] = sources.get(source, 0) + 1

    metrics = {
        "total_examples": total,
        "answer_exact_match": {
            "correct": answer_correct,
            "total": total,
            "accuracy": (answer_correct / total) if total else None,
        },
        "anchor_match": {
            "correct": anchor_correct,
            "total": anchor_applicable,
            "accuracy": (
                (anchor_correct / anchor_applicable) if anchor_applicable else None
            ),
        },
        "sources": sources,
        "error_count": error_count,
    }
    return metrics


def print_summary(metrics: Dict[str, Any]) -> None:
    """Emit a concise console summary of evaluation metrics."""

    total = metrics.get("total_examples", 0)
    answers = metrics.get("answer_exact_match", {})
    anchors = metrics.get("anchor_match", {})

    print(f"Evaluated {total} examples")
    answer_accuracy = answers.get("accuracy")
    if answer_accuracy is not None:
        print(
            "Answer exact match: "
            f"{answers.get('correct', 0)}/{answers.get('total', 0)} "
            f"({answer_accuracy:.1%})"
        )
    else:
        print("Answer exact match: n/a")

    anchor_total = anchors.get("total", 0)
    anchor_accuracy = anchors.get("accuracy")
    if anchor_total and anchor_accuracy is not None:
        print(
            "Anchor match: "
            f"{anchors.get('correct', 0)}/{anchor_total} "
            f"({anchor_accuracy:.1%})"
        )
    else:
        print("Anchor match: n/a (no expected anchors)")

    sources = metrics.get("sources") or {}
    if sources:
        breakdown = ", ".join(f"{name}={count}" for name, count in sorted(sources.items()))
        print(f"Resolved by: {breakdown}")

    errors = metrics.get("error_count", 0)
    if errors:
        print(f"Errors encountered: {errors}")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "dataset",
        nargs="?",
        default=str(DEFAULT_TESTSET_PATH),
        help="Path to the evaluation dataset (JSONL).",
    )
    parser.add_argument(
        "--json-report",
        dest="json_report",
        type=str,
        help="Optional file path to write the JSON report to.",
    )
    parser.add_argument(
        "--quiet",
        dest="quiet",
        action="store_true",
        help="Suppress per-example progress output.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    dataset_path = Path(args.dataset)

    if not dataset_path.exists():
        raise SystemExit(f"Dataset not found: {dataset_path}")

    examples = load_examples(dataset_path)
    verbose = not getattr(args, "quiet", False)

    if verbose:
        print(f"Loaded {len(examples)} examples from {dataset_path}")
        print("Starting evaluation run...")

    with TestClient(app) as client:
        records = evaluate_examples(client, examples, verbose=verbose)
    # Evaluation queries should not linger in the shared conversation log
    get_history().clear()

    metrics = compute_metrics(records)
    report = {
        "dataset": str(dataset_path),
        "metrics": metrics,
        "examples": records,
    }

    print_summary(metrics)

    report_json = json.dumps(report, indent=2, sort_keys=True)
    if args.json_report:
        report_path = Path(args.json_report)
        report_path.write_text(report_json + "\n", encoding="utf-8")
        print(f"Wrote JSON report to {report_path}")
    else:
        print(report_json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
