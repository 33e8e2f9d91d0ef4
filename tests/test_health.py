"""Smoke tests for the health endpoint and app factory."""
from __future__ import annotations

from inkmaster import create_app


def test_health_endpoint() -> None:
    app = create_app({"TESTING": True})
    client = app.test_client()

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json == {"status": "ok"}


def test_create_app_accepts_mapping_overrides() -> None:
    app = create_app({"TESTING": True, "SEED_DEMO_DATA": False, "STUDIO_NAME": "Black Lotus"})
    client = app.test_client()

    data = client.get("/dashboard").get_json()

    assert data["studio_name"] == "Black Lotus"
    assert data["total_clients"] == 0
    assert data["portfolio_count"] == 0
    assert data["recent_appointments"] == []


def test_default_app_loads_demo_data() -> None:
    app = create_app({"TESTING": True})
    client = app.test_client()

    assert len(client.get("/appointments").get_json()["appointments"]) == 2
    assert len(client.get("/clients").get_json()["clients"]) == 2
    assert len(client.get("/portfolio").get_json()["portfolio"]) == 3


def test_each_app_gets_its_own_studio() -> None:
    first = create_app({"TESTING": True}).test_client()
    second = create_app({"TESTING": True}).test_client()

    first.post("/clients", json={"name": "Kai", "email": "kai@example.com"})

    assert len(first.get("/clients").get_json()["clients"]) == 3
    assert len(second.get("/clients").get_json()["clients"]) == 2
