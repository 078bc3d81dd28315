"""Integration tests for the transfer workflow and impact endpoints

Tests the complete transfer lifecycle:
- Request from a match
- Approve, dispatch, complete
- Reject releasing the pair
- Invalid transitions
- Per-clinic summary and network impact
"""

import pytest
from fastapi.testclient import TestClient


# surplus-2 is posted by clinic-2 and requested by clinic-4
SENDER = {"clinic_id": "clinic-2"}
RECEIVER = {"clinic_id": "clinic-4"}


@pytest.fixture
def pending_transfer(seeded_client: TestClient) -> str:
    response = seeded_client.post("/api/v1/matches/transfer", json={
        "surplus_id": "surplus-2",
        "request_id": "request-2",
    })
    assert response.status_code == 201
    return response.json()["id"]


class TestTransferLifecycle:
    """Tests for POST /api/v1/transfers/{id}/..."""

    def test_approve_dispatch_complete(self, seeded_client: TestClient, pending_transfer: str):
        response = seeded_client.post(f"/api/v1/transfers/{pending_transfer}/approve", params=SENDER)
        assert response.status_code == 200
        assert response.json()["status"] == "Approved"
        assert response.json()["approved_date"] is not None

        response = seeded_client.post(f"/api/v1/transfers/{pending_transfer}/dispatch", params=SENDER)
        assert response.json()["status"] == "In Transit"

        response = seeded_client.post(f"/api/v1/transfers/{pending_transfer}/complete", params=SENDER)
        data = response.json()
        assert data["status"] == "Completed"
        assert data["completed_date"] is not None
        assert data["allowed_transitions"] == []

        surplus = seeded_client.get("/api/v1/surplus", params={"status": "Transferred"}).json()
        assert [p["id"] for p in surplus] == ["surplus-2"]
        requests = seeded_client.get("/api/v1/requests", params={"status": "Fulfilled"}).json()
        assert [r["id"] for r in requests] == ["request-2"]

    def test_reject_reopens_pair(self, seeded_client: TestClient, pending_transfer: str):
        response = seeded_client.post(f"/api/v1/transfers/{pending_transfer}/reject", params=SENDER)
        assert response.json()["status"] == "Rejected"

        matches = seeded_client.get("/api/v1/matches").json()
        assert matches["total"] == 4

    def test_invalid_transition(self, seeded_client: TestClient, pending_transfer: str):
        response = seeded_client.post(f"/api/v1/transfers/{pending_transfer}/dispatch", params=SENDER)

        assert response.status_code == 409
        data = response.json()
        assert data["error"] == "invalid_transition"
        assert "Pending -> In Transit" in data["message"]

    def test_unknown_transfer(self, seeded_client: TestClient):
        response = seeded_client.post("/api/v1/transfers/missing/approve", params=SENDER)

        assert response.status_code == 404


class TestSendingClinicOnly:
    """Only the clinic that posted the surplus may act on its transfer"""

    @pytest.mark.parametrize("action", ["approve", "reject"])
    def test_receiver_cannot_decide(self, seeded_client: TestClient, pending_transfer: str, action):
        response = seeded_client.post(f"/api/v1/transfers/{pending_transfer}/{action}", params=RECEIVER)

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"

        transfer = seeded_client.get(f"/api/v1/transfers/{pending_transfer}").json()
        assert transfer["status"] == "Pending"

    def test_receiver_cannot_complete(self, seeded_client: TestClient, pending_transfer: str):
        seeded_client.post(f"/api/v1/transfers/{pending_transfer}/approve", params=SENDER)

        response = seeded_client.post(f"/api/v1/transfers/{pending_transfer}/complete", params=RECEIVER)

        assert response.status_code == 409
        assert seeded_client.get(f"/api/v1/transfers/{pending_transfer}").json()["status"] == "Approved"
        assert seeded_client.get("/api/v1/impact").json()["transfers_completed"] == 0

    def test_clinic_id_required(self, seeded_client: TestClient, pending_transfer: str):
        response = seeded_client.post(f"/api/v1/transfers/{pending_transfer}/approve")

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"


class TestTransferViews:
    """Tests for GET /api/v1/transfers and /api/v1/transfers/summary"""

    def test_list_by_direction(self, seeded_client: TestClient, pending_transfer: str):
        outgoing = seeded_client.get(
            "/api/v1/transfers", params={"clinic_id": "clinic-2", "direction": "outgoing"}
        ).json()
        incoming = seeded_client.get(
            "/api/v1/transfers", params={"clinic_id": "clinic-2", "direction": "incoming"}
        ).json()

        assert [t["id"] for t in outgoing] == [pending_transfer]
        assert incoming == []

    def test_invalid_direction_rejected(self, seeded_client: TestClient):
        response = seeded_client.get(
            "/api/v1/transfers", params={"clinic_id": "clinic-2", "direction": "sideways"}
        )

        assert response.status_code == 422

    def test_summary(self, seeded_client: TestClient, pending_transfer: str):
        response = seeded_client.get("/api/v1/transfers/summary", params={"clinic_id": "clinic-2"})

        assert response.status_code == 200
        assert response.json() == {
            "clinic_id": "clinic-2",
            "pending_outgoing": 1,
            "active": 0,
            "completed": 0,
        }

    def test_summary_unknown_clinic(self, seeded_client: TestClient):
        response = seeded_client.get("/api/v1/transfers/summary", params={"clinic_id": "nope"})

        assert response.status_code == 404


class TestImpactAPI:
    """Tests for GET /api/v1/impact"""

    def test_impact_after_completion(self, seeded_client: TestClient, pending_transfer: str):
        assert seeded_client.get("/api/v1/impact").json() == {
            "transfers_completed": 0,
            "medicines_saved": 0,
            "clinics_helped": 0,
        }

        seeded_client.post(f"/api/v1/transfers/{pending_transfer}/approve", params=SENDER)
        seeded_client.post(f"/api/v1/transfers/{pending_transfer}/complete", params=SENDER)

        assert seeded_client.get("/api/v1/impact").json() == {
            "transfers_completed": 1,
            "medicines_saved": 500,
            "clinics_helped": 1,
        }
