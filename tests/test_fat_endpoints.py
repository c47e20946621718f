"""Tests for the ranking endpoints."""

from fastapi.testclient import TestClient

from fat_method.api.app import create_app


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_usage_detail_lists_oils_in_order(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/fat/haute")

    assert response.status_code == 200
    data = response.json()
    assert data["usage"] == "haute"
    first = data["oils"][0]
    assert first["name"] == "Suif de bœuf"
    assert first["total"] == 94
    assert first["vegan"] is False
    assert first["criteria"][0] == {
        "criterion": "Stabilité",
        "note5": 5,
        "weight": 45,
        "contribution": 45,
    }


def test_usage_detail_raw_excluded_fat_is_null(container) -> None:
    client = TestClient(create_app(container))

    oils = client.get("/fat/cru").json()["oils"]
    coconut = next(oil for oil in oils if oil["name"] == "Huile de coco")

    assert coconut == {
        "name": "Huile de coco",
        "total": None,
        "criteria": [],
        "vegan": True,
    }


def test_unknown_usage_is_not_found(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/fat/friture")

    assert response.status_code == 404


def test_method_exposes_reference_tables(container) -> None:
    client = TestClient(create_app(container))

    data = client.get("/fat/method").json()

    assert set(data["weightings"]) == {"cru", "douce", "haute"}
    assert data["weightings"]["haute"][0] == {"criterion": "Stabilité", "weight": 45}
    assert len(data["criteria"]) == 9
    assert data["criteria"][0]["scale"][0] == {
        "note": 5,
        "label": "Ratio ≤ 1 (idéal type 1:1)",
    }
    assert "Tournesol" in data["oils_to_avoid"]
    assert data["faq"][0]["question"].startswith("Pourquoi le classement")
    assert data["mention"] == "Méthode détaillée : mangeurperdu.com/fat"
