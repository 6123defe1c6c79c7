import pytest

from pipeline.normalize import canonicalize


def test_canonicalize_lowercases_and_strips_punctuation():
    assert canonicalize("  Chest-Pain?! ") == "chestpain"
    assert canonicalize("Red Eye") == "red eye"
    assert canonicalize("Open 24/7") == "open 247"


@pytest.mark.parametrize("raw", [None, "", "   ", "?!."])
def test_canonicalize_empty_inputs(raw):
    assert canonicalize(raw) == ""


def test_canonicalize_drops_non_ascii_letters():
    assert canonicalize("Fièvre") == "fivre"


@pytest.mark.parametrize(
    "raw",
    ["headache", "  Stomach Ache!! ", "Ça va?", "multiple   spaces ", "24/7 PHARMACY"],
)
def test_canonicalize_is_idempotent(raw):
    once = canonicalize(raw)
    assert canonicalize(once) == once
