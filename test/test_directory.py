import pytest
from fastapi.testclient import TestClient

from app import directory
from app.main import app

client = TestClient(app)


def test_list_specialists_returns_all_entries():
    response = client.get("/specialists/")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 9
    assert data[0] == {"key": "neurologist", "name": "Neurologist (Brain & Nerves)"}
    assert {"key", "name"} == set(data[-1])


def test_get_specialist_returns_problems():
    response = client.get("/specialists/Cardiologist")
    assert response.status_code == 200
    data = response.json()
    assert data["key"] == "cardiologist"
    assert [problem["name"] for problem in data["problems"]] == [
        "Chest pain",
        "Palpitations",
    ]


def test_get_specialist_problem_solution():
    response = client.get("/specialists/neurologist/problems/1")
    assert response.status_code == 200
    assert response.json() == {
        "name": "Stroke symptoms",
        "solution": "Call emergency immediately; note time of onset.",
    }


@pytest.mark.parametrize(
    "path",
    [
        "/specialists/astrologer",
        "/specialists/astrologer/problems/0",
        "/specialists/ent/problems/5",
        "/specialists/ent/problems/-1",
    ],
)
def test_unknown_specialist_paths_return_404(path):
    assert client.get(path).status_code == 404


def test_directory_returns_copies():
    spec = directory.get_specialist("ent")
    spec.problems.clear()
    assert directory.get_specialist("ent").problems


def test_nearby_pharmacies_demo_listing():
    response = client.get("/pharmacies/")
    assert response.status_code == 200
    data = response.json()
    assert [item["name"] for item in data["pharmacies"]] == [
        "HealthPlus Pharmacy",
        "CityCare Pharmacy",
    ]
    assert data["location"] is None
    assert data["note"].startswith("Demo results")


@pytest.mark.parametrize(
    ("service", "expected"),
    [
        ("24/7", ["HealthPlus Pharmacy", "CityCare Pharmacy", "Al-Ahram Pharmacy"]),
        ("Delivery", ["HealthPlus Pharmacy", "CityCare Pharmacy"]),
    ],
)
def test_pharmacies_service_filter(service, expected):
    response = client.get("/pharmacies/", params={"service": service})
    assert response.status_code == 200
    assert [item["name"] for item in response.json()["pharmacies"]] == expected


def test_pharmacies_unknown_service_returns_400():
    response = client.get("/pharmacies/", params={"service": "drive-through"})
    assert response.status_code == 400


def test_pharmacies_echo_rounded_location():
    response = client.get("/pharmacies/", params={"lat": 30.044420, "lon": 31.235712})
    data = response.json()
    assert data["location"] == "30.0444, 31.2357 (demo)"


def test_pharmacies_invalid_location_degrades_to_demo(caplog):
    response = client.get("/pharmacies/", params={"lat": 123.0, "lon": 10.0})
    assert response.status_code == 200
    data = response.json()
    assert data["location"] is None
    assert data["note"].startswith("Unable to get location")
    assert len(data["pharmacies"]) == 2
    assert "out-of-range" in caplog.text

    data = client.get("/pharmacies/", params={"lat": 10.0}).json()
    assert data["location"] is None
    assert data["note"].startswith("Unable to get location")
