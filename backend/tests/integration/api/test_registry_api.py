"""Integration tests for clinic, medicine, inventory, surplus and request endpoints

Tests:
- Creating and listing records
- Per-clinic filtering
- Structured error bodies (404, 409, 422)
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient


CLINIC_PAYLOAD = {
    "id": "clinic-a",
    "name": "Asha Community Health Centre",
    "type": "NGO",
    "location": "Kothrud",
    "district": "Pune",
    "state": "Maharashtra",
}

MEDICINE_PAYLOAD = {
    "id": "med-a",
    "name": "Amoxicillin",
    "generic_name": "Amoxicillin Trihydrate",
    "category": "Antibiotic",
    "strength": "500mg",
}


def _expiry(days: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


@pytest.fixture
def registered(client: TestClient):
    """Client with one clinic and one medicine registered"""
    assert client.post("/api/v1/clinics", json=CLINIC_PAYLOAD).status_code == 201
    assert client.post("/api/v1/medicines", json=MEDICINE_PAYLOAD).status_code == 201
    return client


class TestClinicsAPI:
    """Tests for /api/v1/clinics"""

    def test_create_and_get_clinic(self, client: TestClient):
        response = client.post("/api/v1/clinics", json=CLINIC_PAYLOAD)

        assert response.status_code == 201
        assert response.json()["id"] == "clinic-a"
        assert response.json()["type"] == "NGO"

        response = client.get("/api/v1/clinics/clinic-a")
        assert response.status_code == 200
        assert response.json()["name"] == "Asha Community Health Centre"

    def test_generated_id(self, client: TestClient):
        payload = {k: v for k, v in CLINIC_PAYLOAD.items() if k != "id"}
        response = client.post("/api/v1/clinics", json=payload)

        assert response.status_code == 201
        assert response.json()["id"]

    def test_duplicate_clinic_conflict(self, registered: TestClient):
        response = registered.post("/api/v1/clinics", json=CLINIC_PAYLOAD)

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"

    def test_unknown_clinic_not_found(self, client: TestClient):
        response = client.get("/api/v1/clinics/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "not_found", "message": "Clinic missing not found"}

    def test_blank_name_rejected(self, client: TestClient):
        response = client.post("/api/v1/clinics", json={**CLINIC_PAYLOAD, "name": ""})

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"


class TestMedicinesAPI:
    """Tests for /api/v1/medicines"""

    def test_search_and_category_filter(self, seeded_client: TestClient):
        response = seeded_client.get("/api/v1/medicines", params={"search": "acetam"})
        assert [m["id"] for m in response.json()] == ["med-2"]

        response = seeded_client.get("/api/v1/medicines", params={"category": "Antidiabetic"})
        assert [m["id"] for m in response.json()] == ["med-3"]

    def test_list_all(self, seeded_client: TestClient):
        response = seeded_client.get("/api/v1/medicines")

        assert response.status_code == 200
        assert len(response.json()) == 5


class TestInventoryAPI:
    """Tests for /api/v1/inventory"""

    def test_add_item_derives_status(self, registered: TestClient):
        response = registered.post("/api/v1/inventory", json={
            "clinic_id": "clinic-a",
            "medicine_id": "med-a",
            "batch_number": "AMX-1",
            "quantity": 1200,
            "unit": "capsules",
            "expiry_date": _expiry(30),
        })

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "Expiring Soon"
        assert data["days_until_expiry"] == 30

    def test_zero_quantity_rejected(self, registered: TestClient):
        response = registered.post("/api/v1/inventory", json={
            "clinic_id": "clinic-a",
            "medicine_id": "med-a",
            "batch_number": "AMX-1",
            "quantity": 0,
            "unit": "capsules",
            "expiry_date": _expiry(30),
        })

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"

    def test_unknown_medicine_not_found(self, registered: TestClient):
        response = registered.post("/api/v1/inventory", json={
            "clinic_id": "clinic-a",
            "medicine_id": "med-x",
            "batch_number": "AMX-1",
            "quantity": 10,
            "unit": "capsules",
            "expiry_date": _expiry(30),
        })

        assert response.status_code == 404

    def test_filter_by_clinic_and_status(self, seeded_client: TestClient):
        response = seeded_client.get("/api/v1/inventory", params={"clinic_id": "clinic-3"})
        assert [i["id"] for i in response.json()] == ["inv-4"]

        response = seeded_client.get("/api/v1/inventory", params={"status": "Low Stock"})
        assert [i["id"] for i in response.json()] == ["inv-4"]


class TestSurplusAPI:
    """Tests for /api/v1/surplus"""

    def test_post_surplus(self, seeded_client: TestClient):
        response = seeded_client.post("/api/v1/surplus", json={
            "clinic_id": "clinic-1",
            "inventory_item_id": "inv-2",
            "quantity": 1000,
            "reason": "Overstocked",
        })

        assert response.status_code == 201
        assert response.json()["status"] == "Available"

    def test_surplus_over_stock_conflict(self, seeded_client: TestClient):
        response = seeded_client.post("/api/v1/surplus", json={
            "clinic_id": "clinic-1",
            "inventory_item_id": "inv-2",
            "quantity": 5000,
            "reason": "Overstocked",
        })

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"

    def test_cancel_surplus(self, seeded_client: TestClient):
        response = seeded_client.post("/api/v1/surplus/surplus-1/cancel")
        assert response.status_code == 200
        assert response.json()["status"] == "Cancelled"

        response = seeded_client.post("/api/v1/surplus/surplus-1/cancel")
        assert response.status_code == 409

    def test_list_by_clinic(self, seeded_client: TestClient):
        response = seeded_client.get("/api/v1/surplus", params={"clinic_id": "clinic-2"})
        assert {p["id"] for p in response.json()} == {"surplus-2", "surplus-3"}


class TestRequestsAPI:
    """Tests for /api/v1/requests"""

    def test_create_request(self, seeded_client: TestClient):
        response = seeded_client.post("/api/v1/requests", json={
            "clinic_id": "clinic-1",
            "medicine_id": "med-5",
            "quantity": 50,
            "unit": "bottles",
            "urgency": "High",
            "reason": "Heatwave",
        })

        assert response.status_code == 201
        assert response.json()["status"] == "Open"

    @pytest.mark.parametrize("quantity", [0, -10])
    def test_non_positive_quantity_rejected(self, seeded_client: TestClient, quantity):
        response = seeded_client.post("/api/v1/requests", json={
            "clinic_id": "clinic-1",
            "medicine_id": "med-5",
            "quantity": quantity,
            "unit": "bottles",
            "urgency": "High",
            "reason": "Heatwave",
        })

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"

    def test_filter_by_urgency(self, seeded_client: TestClient):
        response = seeded_client.get("/api/v1/requests", params={"urgency": "Critical"})
        assert [r["id"] for r in response.json()] == ["request-1"]

    def test_cancel_request(self, seeded_client: TestClient):
        response = seeded_client.post("/api/v1/requests/request-4/cancel")

        assert response.status_code == 200
        assert response.json()["status"] == "Cancelled"
