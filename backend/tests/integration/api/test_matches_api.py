"""Integration tests for the matching endpoints

Uses the demo data set, whose ranking is:
    surplus-1 / request-1  85
    surplus-2 / request-2  78
    surplus-1 / request-4  55
    surplus-3 / request-3  37
"""

from fastapi.testclient import TestClient


def _keys(response):
    return [(m["surplus"]["id"], m["request"]["id"]) for m in response.json()["items"]]


class TestListMatches:
    """Tests for GET /api/v1/matches"""

    def test_ranked_matches(self, seeded_client: TestClient):
        response = seeded_client.get("/api/v1/matches")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        assert [m["match_score"] for m in data["items"]] == [85, 78, 55, 37]
        assert _keys(response) == [
            ("surplus-1", "request-1"),
            ("surplus-2", "request-2"),
            ("surplus-1", "request-4"),
            ("surplus-3", "request-3"),
        ]

    def test_match_payload(self, seeded_client: TestClient):
        top = seeded_client.get("/api/v1/matches").json()["items"][0]

        assert top["key"] == "surplus-1-request-1"
        assert top["days_until_expiry"] == 45
        assert top["from_clinic"]["id"] == "clinic-1"
        assert top["to_clinic"]["id"] == "clinic-3"
        assert top["medicine"]["name"] == "Amoxicillin"
        assert top["scores"]["urgency_score"] == 100
        assert top["scores"]["quantity_score"] == 100

    def test_clinic_filter(self, seeded_client: TestClient):
        response = seeded_client.get("/api/v1/matches", params={"clinic_id": "clinic-4"})

        assert [m["match_score"] for m in response.json()["items"]] == [78, 37]

    def test_min_score(self, seeded_client: TestClient):
        response = seeded_client.get("/api/v1/matches", params={"min_score": 60})

        assert _keys(response) == [("surplus-1", "request-1"), ("surplus-2", "request-2")]

    def test_empty_store(self, client: TestClient):
        response = client.get("/api/v1/matches")

        assert response.status_code == 200
        assert response.json() == {"items": [], "total": 0}

    def test_cancelled_request_drops_out(self, seeded_client: TestClient):
        seeded_client.post("/api/v1/requests/request-4/cancel")

        response = seeded_client.get("/api/v1/matches")
        assert ("surplus-1", "request-4") not in _keys(response)
        assert response.json()["total"] == 3


class TestRequestTransfer:
    """Tests for POST /api/v1/matches/transfer"""

    def test_transfer_reserves_pair(self, seeded_client: TestClient):
        response = seeded_client.post("/api/v1/matches/transfer", json={
            "surplus_id": "surplus-1",
            "request_id": "request-1",
            "notes": "Needed this week",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "Pending"
        assert data["quantity"] == 1000
        assert data["from_clinic_id"] == "clinic-1"
        assert data["to_clinic_id"] == "clinic-3"
        assert set(data["allowed_transitions"]) == {"Approved", "Rejected"}

        keys = _keys(seeded_client.get("/api/v1/matches"))
        assert keys == [("surplus-2", "request-2"), ("surplus-3", "request-3")]

    def test_transfer_twice_conflicts(self, seeded_client: TestClient):
        payload = {"surplus_id": "surplus-1", "request_id": "request-1"}
        assert seeded_client.post("/api/v1/matches/transfer", json=payload).status_code == 201

        response = seeded_client.post("/api/v1/matches/transfer", json=payload)
        assert response.status_code == 409

    def test_mismatched_medicine_conflicts(self, seeded_client: TestClient):
        response = seeded_client.post("/api/v1/matches/transfer", json={
            "surplus_id": "surplus-1",
            "request_id": "request-2",
        })

        assert response.status_code == 409

    def test_unknown_request_not_found(self, seeded_client: TestClient):
        response = seeded_client.post("/api/v1/matches/transfer", json={
            "surplus_id": "surplus-1",
            "request_id": "request-x",
        })

        assert response.status_code == 404
        assert response.json()["message"] == "Request request-x not found"
