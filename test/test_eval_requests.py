from __future__ import annotations

import io
from typing import Any, Dict, List

from eval.eval import evaluate_examples


class DummyResponse:
    def __init__(
        self,
        status_code: int,
        json_payload: Dict[str, Any] | None = None,
        *,
        text: str = "",
    ) -> None:
        self.status_code = status_code
        self._json_payload = json_payload or {}
        self.text = text

    def json(self) -> Dict[str, Any]:
        return self._json_payload


class DummyClient:
    def __init__(self, responses: List[DummyResponse]) -> None:
        self._responses = responses
        self.requests: List[Dict[str, Any]] = []

    def post(self, url: str, json: Dict[str, Any]) -> DummyResponse:
        if len(self.requests) >= len(self._responses):
            raise AssertionError("No more responses configured for DummyClient")
        self.requests.append({"url": url, "json": json})
        return self._responses[len(self.requests) - 1]


def make_example(**overrides: Any) -> Dict[str, Any]:
    example = {
        "query": "fever",
        "answers": ["Rest, fluids"],
        "anchors": ["body-sections.html", "specialists.html"],
    }
    example.update(overrides)
    return example


def test_evaluate_examples_records_matches() -> None:
    client = DummyClient(
        [
            DummyResponse(
                200,
                {
                    "text": "Rest, fluids",
                    "anchors": ["body-sections.html", "specialists.html"],
                    "confidence": 1.0,
                    "source": "knowledge",
                },
            )
        ]
    )

    records = evaluate_examples(client, [make_example()])  # type: ignore[arg-type]

    assert client.requests == [{"url": "/ask/", "json": {"query": "fever"}}]
    record = records[0]
    assert record["answer_exact_match"] is True
    assert record["anchor_match"] is True
    assert record["confidence"] == 1.0
    assert record["source"] == "knowledge"
    assert "error" not in record


def test_evaluate_examples_flags_anchor_mismatch() -> None:
    client = DummyClient(
        [DummyResponse(200, {"text": "Rest, fluids", "anchors": "not-a-list"})]
    )

    records = evaluate_examples(client, [make_example()])  # type: ignore[arg-type]

    assert records[0]["anchors"] == []
    assert records[0]["answer_exact_match"] is True
    assert records[0]["anchor_match"] is False


def test_evaluate_examples_records_http_errors() -> None:
    client = DummyClient([DummyResponse(500, text="boom")])
    stream = io.StringIO()

    records = evaluate_examples(
        client, [make_example()], verbose=True, output_stream=stream  # type: ignore[arg-type]
    )

    record = records[0]
    assert record["status_code"] == 500
    assert record["error"] == "boom"
    assert record["answer_exact_match"] is False
    assert record["anchor_match"] is False
    output = stream.getvalue()
    assert "[1/1] Query: fever" in output
    assert "Result: ERROR (status 500) - boom" in output
