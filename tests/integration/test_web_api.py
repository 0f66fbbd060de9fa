"""Integration tests for the REST API."""

import json
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from booths.web import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def _config(fixtures_path: Path, name: str) -> dict[str, Any]:
    return json.loads((fixtures_path / name).read_text(encoding="utf-8"))


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestQuoteEndpoint:
    """Tests for POST /api/v1/quote."""

    def test_quote(self, client: TestClient, fixtures_path: Path) -> None:
        config = _config(fixtures_path, "straight_3x3_lights.json")
        response = client.post("/api/v1/quote", json={"config": config})
        assert response.status_code == 200
        data = response.json()
        assert data["price"]["total"] == 22869
        assert data["price"]["material_lines"] == {"walls": 2586, "lighting": 1050}
        assert data["bom"]["SAM-led"] == 3
        assert data["walls"][0]["side"] == "back"
        assert data["rendered_fixtures"] == 3
        assert data["warnings"] == []

    def test_rejected_components_still_succeed(
        self, client: TestClient, fixtures_path: Path
    ) -> None:
        config = _config(fixtures_path, "rejected_components.json")
        response = client.post("/api/v1/quote", json={"config": config})
        assert response.status_code == 200
        data = response.json()
        assert len(data["warnings"]) == 1
        assert [c["id"] for c in data["components"]] == ["plant-1"]

    def test_invalid_config(self, client: TestClient, minimal_config_data: dict) -> None:
        minimal_config_data["carpet_index"] = 99
        response = client.post("/api/v1/quote", json={"config": minimal_config_data})
        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "Invalid booth configuration"
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "carpet_index"

    def test_missing_config(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json={})
        assert response.status_code == 422


class TestBomEndpoint:
    """Tests for POST /api/v1/bom."""

    def test_bom_categories(self, client: TestClient, fixtures_path: Path) -> None:
        config = _config(fixtures_path, "counter_2m.json")
        response = client.post("/api/v1/bom", json={"config": config})
        assert response.status_code == 200
        data = response.json()
        assert data["bom"]["Bematrix ram 2x1"] == 1
        assert "Disk" in data["categories"]
        assert ["Bematrix ram 2x1", 1] in data["categories"]["Disk"]


class TestSlotsEndpoint:
    """Tests for POST /api/v1/slots."""

    def test_floor_slots(self, client: TestClient, minimal_config_data: dict) -> None:
        response = client.post(
            "/api/v1/slots", json={"config": minimal_config_data, "kind": "plant"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "plant"
        assert len(data["slots"]) == 9
        assert {"x", "z"} <= set(data["slots"][0])

    def test_wall_slots(self, client: TestClient, straight_config_data: dict) -> None:
        response = client.post(
            "/api/v1/slots", json={"config": straight_config_data, "kind": "tv"}
        )
        assert response.status_code == 200
        slot = response.json()["slots"][0]
        assert slot["wall"] == "back"
        assert slot["tier"] in ("high", "mid", "low")

    def test_wall_shape_override(self, client: TestClient, minimal_config_data: dict) -> None:
        response = client.post(
            "/api/v1/slots",
            json={"config": minimal_config_data, "kind": "tv", "wall_shape": "u"},
        )
        assert len(response.json()["slots"]) == 27

    def test_unknown_catalog_index(self, client: TestClient, minimal_config_data: dict) -> None:
        response = client.post(
            "/api/v1/slots",
            json={"config": minimal_config_data, "kind": "counter", "catalog_index": 42},
        )
        assert response.status_code == 400
        data = response.json()
        assert data["error_type"] == "unknown_catalog_index"
        assert data["details"]["table"] == "counter"

    def test_unknown_kind(self, client: TestClient, minimal_config_data: dict) -> None:
        response = client.post(
            "/api/v1/slots", json={"config": minimal_config_data, "kind": "rocket"}
        )
        assert response.status_code == 422


class TestCatalogEndpoint:
    """Tests for GET /api/v1/catalog."""

    def test_all_tables(self, client: TestClient) -> None:
        response = client.get("/api/v1/catalog")
        assert response.status_code == 200
        data = response.json()
        assert set(data) >= {"floors", "counters", "tvs", "carpets"}
        assert data["floors"][2]["label"] == "3x3"
        assert data["floors"][2]["index"] == 2

    def test_single_table(self, client: TestClient) -> None:
        response = client.get("/api/v1/catalog/tvs")
        assert response.status_code == 200
        assert response.json()[3]["label"] == '55"'

    def test_unknown_table(self, client: TestClient) -> None:
        response = client.get("/api/v1/catalog/rockets")
        assert response.status_code == 404
        assert response.json()["detail"]["error_type"] == "not_found"
