import pytest

from pipeline import navigation
from pipeline.navigation import INTENT_LABELS, detect_intent


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("nearest pharmacy", navigation.PHARMACY),
        ("Pharmacies open now", navigation.PHARMACY),
        ("where is the nearest pharm", navigation.PHARMACY),
        ("nearest pharmaceutical store", navigation.PHARMACY),
        ("hotline numbers", navigation.HOTLINES),
        ("call an AMBULANCE", navigation.HOTLINES),
        ("this is an emergency", navigation.HOTLINES),
        ("my head is spinning", navigation.BODY),
        ("itchy skin", navigation.BODY),
        ("find a specialist", navigation.SPECIALISTS),
        ("see an ent doctor", navigation.SPECIALISTS),
        ("home delivery options", navigation.PHARMACY_DELIVERY),
        ("anything 24/7", navigation.PHARMACY_24),
        ("open 24 hours", navigation.PHARMACY_24),
    ],
)
def test_detect_intent(query, expected):
    assert detect_intent(query) == expected


@pytest.mark.parametrize("query", [None, "", "headache", "pharmaceutical", "photo", "parent"])
def test_detect_intent_returns_none_without_a_rule(query):
    assert detect_intent(query) is None


def test_pharmacy_rule_wins_over_emergency():
    assert detect_intent("emergency pharmacy near the hospital") == navigation.PHARMACY


def test_hotline_rule_wins_over_body_and_delivery():
    assert detect_intent("ambulance for chest injury") == navigation.HOTLINES
    assert detect_intent("emergency delivery") == navigation.HOTLINES


def test_first_matching_rule_short_circuits(monkeypatch):
    calls = []

    def _record(label, result):
        def _rule(text):
            calls.append(label)
            return result

        return _rule

    rules = (
        (_record("first", False), "first"),
        (_record("second", True), "second"),
        (_record("third", True), "third"),
    )
    monkeypatch.setattr(navigation, "NAVIGATION_RULES", rules)

    assert detect_intent("anything") == "second"
    assert calls == ["first", "second"]


def test_intent_labels_follow_rule_priority():
    assert INTENT_LABELS == (
        "pharmacy",
        "hotlines",
        "body",
        "specialists",
        "pharmacy-delivery",
        "pharmacy-24",
    )
