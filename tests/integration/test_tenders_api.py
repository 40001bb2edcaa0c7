"""Integration tests for /api/v1/tenders"""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


def tender_body(**overrides) -> dict:
    body = {
        "clientId": "cli1",
        "title": "Street lighting phase 2",
        "department": "Public Works",
        "deadline": "2024-09-30T00:00:00Z",
        "value": 2500000,
    }
    body.update(overrides)
    return body


def test_create_tender_copies_client_and_logs_history(client: TestClient, existing_client, admin_headers):
    response = client.post("/api/v1/tenders", json=tender_body(), headers=admin_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["id"].startswith("ten")
    assert data["clientName"] == "Ministry of Roads"
    assert data["status"] == "Drafting"
    assert data["workflowStage"] == "Tender Identification"
    assert len(data["history"]) == 1
    assert data["history"][0]["action"] == "Created Tender"
    assert data["history"][0]["userId"] == "user1"
    assert data["history"][0]["user"] == "Admin User"


def test_create_tender_keeps_supplied_status(client: TestClient, existing_client, admin_headers):
    response = client.post("/api/v1/tenders", json=tender_body(status="Bidding"), headers=admin_headers)
    assert response.json()["status"] == "Bidding"


def test_create_tender_requires_client_id(client: TestClient, admin_headers):
    body = tender_body()
    del body["clientId"]

    response = client.post("/api/v1/tenders", json=body, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Client ID is required."


def test_create_tender_unknown_client(client: TestClient, admin_headers):
    response = client.post("/api/v1/tenders", json=tender_body(clientId="cli-nope"), headers=admin_headers)
    assert response.status_code == 404


def test_update_tender_merges_fields(client: TestClient, existing_tender):
    response = client.put(
        "/api/v1/tenders/ten1",
        json={"status": "Submitted", "emd": {"amount": 25000, "mode": "DD", "refundStatus": "Pending"}},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "Submitted"
    assert data["title"] == "Highway lighting"
    assert data["emd"] == {"amount": 25000, "mode": "DD", "refundStatus": "Pending"}


def test_update_tender_cannot_rewrite_history(client: TestClient, existing_tender, sales_headers):
    client.post("/api/v1/tenders/ten1/respond", json={"status": "Accepted"}, headers=sales_headers)

    response = client.put("/api/v1/tenders/ten1", json={"history": []})

    assert response.status_code == 200
    assert len(response.json()["history"]) == 1


def test_update_tender_rejects_unknown_mode(client: TestClient, existing_tender):
    response = client.put("/api/v1/tenders/ten1", json={"emd": {"amount": 1, "mode": "Cheque"}})
    assert response.status_code == 422


def test_update_missing_tender(client: TestClient):
    response = client.put("/api/v1/tenders/ten-nope", json={"status": "Won"})
    assert response.status_code == 404


def test_respond_to_assignment(client: TestClient, existing_tender, sales_headers):
    response = client.post(
        "/api/v1/tenders/ten1/respond",
        json={"status": "Accepted", "notes": "On it"},
        headers=sales_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["assignmentResponses"]["user2"]["status"] == "Accepted"
    assert data["assignmentResponses"]["user2"]["notes"] == "On it"
    assert data["history"][-1]["action"] == "Responded to Assignment"
    assert data["history"][-1]["details"] == "Set status to Accepted."


def test_second_response_replaces_entry_and_appends_history(client: TestClient, existing_tender, sales_headers, admin_headers):
    client.post("/api/v1/tenders/ten1/respond", json={"status": "Accepted"}, headers=sales_headers)
    first_history = client.get("/api/v1/tenders/ten1").json()["history"]

    client.post("/api/v1/tenders/ten1/respond", json={"status": "Declined"}, headers=sales_headers)
    data = client.post("/api/v1/tenders/ten1/respond", json={"status": "Accepted"}, headers=admin_headers).json()

    assert set(data["assignmentResponses"]) == {"user1", "user2"}
    assert data["assignmentResponses"]["user2"]["status"] == "Declined"
    assert len(data["history"]) == 3
    assert data["history"][0] == first_history[0]


def test_respond_to_missing_tender(client: TestClient, sales_headers):
    response = client.post("/api/v1/tenders/ten-nope/respond", json={"status": "Accepted"}, headers=sales_headers)
    assert response.status_code == 404


def test_delete_tender(client: TestClient, existing_tender):
    assert client.delete("/api/v1/tenders/ten1").json() == {"message": "Tender removed"}
    assert client.get("/api/v1/tenders/ten1").status_code == 404
    assert client.delete("/api/v1/tenders/ten1").status_code == 404


def test_list_tenders_newest_first(client: TestClient, existing_client, admin_headers):
    first = client.post("/api/v1/tenders", json=tender_body(title="A"), headers=admin_headers).json()
    second = client.post("/api/v1/tenders", json=tender_body(title="B"), headers=admin_headers).json()

    ids = [t["id"] for t in client.get("/api/v1/tenders").json()]

    assert ids == [second["id"], first["id"]]
