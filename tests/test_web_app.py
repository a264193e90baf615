"""Tests for the FastAPI backend."""

import pytest
from fastapi.testclient import TestClient

from reviewcompass.infrastructure.config import get_settings
from reviewcompass.web.app import app

ALL_IDS = ["google", "yelp", "facebook", "angi", "bbb", "nextdoor"]


@pytest.fixture
def client(settings_env):
    with TestClient(app) as test_client:
        yield test_client


def add_client(client, name="Jess", email="jess@example.com"):
    response = client.post("/api/clients", json={"name": name, "email": email, "phone": "1555"})
    assert response.status_code == 201
    return response.json()


def test_create_and_list_clients(client):
    created = add_client(client)
    assert created["name"] == "Jess"

    listed = client.get("/api/clients").json()
    assert [c["id"] for c in listed] == [created["id"]]


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_create_client_rejects_blank_name(client, name):
    response = client.post("/api/clients", json={"name": name, "email": "x@y.z"})
    assert response.status_code == 422
    assert client.get("/api/clients").json() == []


def test_create_client_strips_fields(client):
    created = add_client(client, name="  Jess  ", email=" jess@example.com ")
    assert created["name"] == "Jess"
    assert created["email"] == "jess@example.com"


def test_create_review_request_with_default_message(client):
    jess = add_client(client)
    response = client.post("/api/review-requests", json={
        "clientId": jess["id"],
        "clientName": "Jess",
        "clientEmail": "jess@example.com",
        "platform": "yelp",
        "customMessage": "",
    })
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "sent"
    assert body["requestUrl"].startswith("https://reviews.test/r/yelp/")
    assert "Thank you for choosing Glow Studio" in body["customMessage"]
    assert body["sentAt"]

    listed = client.get("/api/review-requests").json()
    assert [r["id"] for r in listed] == [body["id"]]


def test_create_review_request_incomplete(client):
    jess = add_client(client)
    assert client.post("/api/review-requests", json={"platform": "yelp"}).status_code == 400
    assert client.post("/api/review-requests", json={"clientId": jess["id"]}).status_code == 400
    assert client.get("/api/review-requests").json() == []


def test_create_review_request_unknown_client(client):
    response = client.post("/api/review-requests", json={"clientId": 404, "platform": "yelp"})
    assert response.status_code == 404


def test_status_updates(client):
    jess = add_client(client)
    req = client.post("/api/review-requests", json={"clientId": jess["id"], "platform": "google"}).json()

    opened = client.patch(f"/api/review-requests/{req['id']}/status", json={"status": "opened"})
    assert opened.json()["status"] == "opened"

    assert client.patch(f"/api/review-requests/{req['id']}/status", json={"status": "sent"}).status_code == 409
    assert client.patch(f"/api/review-requests/{req['id']}/status", json={"status": "lost"}).status_code == 400
    assert client.patch("/api/review-requests/999/status", json={"status": "opened"}).status_code == 404


def test_outreach_and_recommendation(client):
    jess = add_client(client)
    sam = add_client(client, "Sam", "sam@example.com")

    for platform in ALL_IDS:
        client.post("/api/review-requests", json={"clientId": sam["id"], "platform": platform})

    ready = client.get("/api/outreach").json()
    assert [r["client"]["name"] for r in ready] == ["Jess"]
    assert ready[0]["recommendedPlatform"]["id"] == "google"
    assert ready[0]["suggestedPlatform"]["id"] == "google"
    assert len(ready[0]["availablePlatforms"]) == 6

    rec = client.get(f"/api/clients/{sam['id']}/recommendation").json()
    assert rec["availablePlatforms"] == []
    assert rec["recommendedPlatform"]["id"] == "google"
    assert rec["recommendedAvailable"] is False

    assert client.get("/api/clients/999/recommendation").status_code == 404


def test_google_completed_beauty_recommends_yelp(client):
    jess = add_client(client)
    req = client.post("/api/review-requests", json={"clientId": jess["id"], "platform": "google"}).json()
    client.patch(f"/api/review-requests/{req['id']}/status", json={"status": "completed"})

    rec = client.get(f"/api/clients/{jess['id']}/recommendation").json()
    assert rec["recommendedPlatform"]["id"] == "yelp"
    assert rec["recommendedAvailable"] is True

    stats = client.get("/api/review-requests/stats").json()
    assert stats["total"] == 1
    assert stats["completionRate"] == 100



def test_skilledtrades_business_recommends_angi(client, monkeypatch):
    monkeypatch.setenv("BUSINESS_INDUSTRY", "skilledtrades")
    get_settings.cache_clear()

    jess = add_client(client)
    req = client.post("/api/review-requests", json={"clientId": jess["id"], "platform": "google"}).json()
    client.patch(f"/api/review-requests/{req['id']}/status", json={"status": "completed"})

    rec = client.get(f"/api/clients/{jess['id']}/recommendation").json()
    assert rec["recommendedPlatform"]["id"] == "angi"


def test_outreach_send(client):
    jess = add_client(client)
    response = client.post("/api/outreach/send", json={"clientId": jess["id"], "platform": "angi", "message": "Thanks!"})
    assert response.status_code == 201
    assert response.json()["customMessage"] == "Thanks!"

    assert client.post("/api/outreach/send", json={"platform": "angi"}).status_code == 400
    assert client.post("/api/outreach/send", json={"clientId": 999, "platform": "angi"}).status_code == 404


def test_platforms(client):
    assert [p["id"] for p in client.get("/api/platforms").json()] == ALL_IDS


def test_import_clients(client):
    csv = b"name,email\nJess,jess@example.com\nSam,sam@example.com\n"
    response = client.post("/api/clients/import", files={"file": ("clients.csv", csv, "text/csv")})
    assert response.json()["added"] == 2

    bad = client.post("/api/clients/import", files={"file": ("clients.txt", b"x", "text/plain")})
    assert bad.status_code == 400


def test_dashboard_renders(client):
    jess = add_client(client)
    client.post("/api/review-requests", json={"clientId": jess["id"], "platform": "google"})
    page = client.get("/")
    assert page.status_code == 200
    assert "Review Request Manager" in page.text
    assert "already requested" in page.text


def test_dashboard_send_form_redirects(client):
    jess = add_client(client)
    response = client.post(
        "/outreach/send",
        data={"client_id": str(jess["id"]), "platform": "yelp", "message": ""},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert "sent" in response.headers["location"]
    assert len(client.get("/api/review-requests").json()) == 1
