"""
Tests for the dpp_logistics FastAPI endpoints.

Run with: pytest -q

Notes:
- Tests skip if FastAPI/TestClient dependencies are not available.
"""

import pytest

fastapi = pytest.importorskip("fastapi")
from fastapi.testclient import TestClient  # type: ignore

from dpp_logistics import __version__
from dpp_logistics import api as api_module


def example_product_dict(**overrides):
    """
    Product payload with packaging dimensions and weight.
    """
    product = {
        "id": "PRD-1",
        "name": "Espresso machine",
        "packaging_height_cm": 20.0,
        "packaging_width_cm": 30.0,
        "packaging_depth_cm": 40.0,
        "gross_weight": 2000.0,
    }
    product.update(overrides)
    return product


@pytest.fixture
def client():
    """
    FastAPI TestClient fixture for API tests.
    """
    return TestClient(api_module.app)


def test_api_root_and_health(client):
    assert client.get("/").json() == {"service": "dpp_logistics", "version": __version__}
    assert client.get("/health").json() == {"status": "ok"}


def test_api_catalog(client):
    data = client.get("/catalog").json()

    assert data["pallet"]["length_cm"] == 120
    assert set(data["containers"]) == {"20ft", "40ft", "40ft_hc"}
    assert len(data["cartons"]) == 9
    assert data["cartons"][0]["label"] == "20×15×10"
    assert len(data["carriers"]) == 13


def test_api_volume(client):
    response = client.post(
        "/volume", json={"product": example_product_dict(), "quantity": 500}
    )
    assert response.status_code == 200, response.text

    data = response.json()
    assert data["source"] == "packaging"
    assert data["unit_volume_m3"] == pytest.approx(0.024)
    assert data["total_volume_m3"] == pytest.approx(12.0)


def test_api_volume_without_dimensions(client):
    response = client.post(
        "/volume", json={"product": {"id": "PRD-X"}, "quantity": 5}
    )
    assert response.status_code == 422


def test_api_capacity(client):
    response = client.post(
        "/capacity",
        json={"incoming_m3": 2.0, "location_capacity_m3": 10.0, "current_used_m3": 7.0},
    )
    assert response.status_code == 200, response.text

    data = response.json()
    assert data["status"] == "warning"
    assert data["fill_percent_after"] == pytest.approx(90.0)
    assert data["remaining_after_m3"] == pytest.approx(1.0)

    unknown = client.post("/capacity", json={"incoming_m3": 2.0}).json()
    assert unknown["status"] == "unknown"


def test_api_pallet(client):
    payload = {
        "dimensions": {"height_cm": 20, "width_cm": 30, "depth_cm": 40},
        "quantity": 500,
        "unit_weight_grams": 2000,
    }
    response = client.post("/pallet", json=payload)
    assert response.status_code == 200, response.text

    data = response.json()
    assert data["units_per_pallet"] == 72
    assert data["pallets_needed"] == 7
    assert data["last_pallet_units"] == 68
    assert data["weight_limited"] is False


def test_api_pallet_rejects_bad_input(client):
    payload = {
        "dimensions": {"height_cm": 0, "width_cm": 30, "depth_cm": 40},
        "quantity": 10,
    }
    assert client.post("/pallet", json=payload).status_code == 422

    payload["dimensions"]["height_cm"] = 20
    payload["quantity"] = 0
    assert client.post("/pallet", json=payload).status_code == 422


def test_api_cartons(client):
    payload = {
        "dimensions": {"height_cm": 10, "width_cm": 15, "depth_cm": 20},
        "quantity": 100,
        "unit_weight_grams": 300,
    }
    response = client.post("/cartons", json=payload)
    assert response.status_code == 200, response.text

    data = response.json()
    needed = [c["cartons_needed"] for c in data["cartons"]]
    assert needed == sorted(needed)
    assert data["cartons"][0]["carton_id"] == "xxl"
    assert data["recommended_carton_id"] == "xl"
    assert len(data["cartons"][0]["carrier_compliance"]) == 13


def test_api_space(client):
    payload = {
        "product": example_product_dict(gross_weight=None),
        "batch": {"id": "B-1", "batch_number": "2024-07", "quantity": 500},
        "quantity": 500,
    }
    response = client.post("/space", json=payload)
    assert response.status_code == 200, response.text

    data = response.json()
    assert data["warnings"] == ["No weight data"]
    assert data["pallet"]["pallets_needed"] == 7
    assert list(data["containers"]) == ["20ft", "40ft", "40ft_hc"]
    assert data["containers"]["20ft"]["fill_percent_weight"] is None
    assert data["total_weight_kg"] is None
    assert data["recommended_carton_id"] is not None


def test_api_space_cannot_compute(client):
    response = client.post(
        "/space", json={"product": example_product_dict(), "quantity": 0}
    )
    assert response.status_code == 422
    assert "quantity" in response.json()["detail"]


def test_api_space_large_quantity(client):
    response = client.post(
        "/space", json={"product": example_product_dict(), "quantity": 20_000_000}
    )
    assert response.status_code == 200, response.text
    assert response.json()["pallet"]["pallets_needed"] == 277_778
