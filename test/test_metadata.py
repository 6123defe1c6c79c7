from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def test_knowledge_summary_reports_tables_and_thresholds(monkeypatch):
    monkeypatch.setenv("MIN_MATCH_CONFIDENCE", "0.4")

    response = client.get("/metadata/knowledge-summary")
    assert response.status_code == 200
    data = response.json()

    assert data["entry_count"] == 18
    assert data["keys"][:3] == ["headache", "migraine", "dizziness"]
    assert data["keys"][-1] == "blurry vision"
    assert data["navigation_intents"][0] == "pharmacy"
    assert "Gastroenterologist" in data["specialties"]
    assert data["thresholds"] == {
        "confidence_threshold": 0.65,
        "min_match_confidence": 0.4,
    }
