"""Shared fixtures for Review Compass tests."""

import itertools

import pytest

from reviewcompass.domain.models import Client, ReviewRequest
from reviewcompass.infrastructure.config import get_settings
from reviewcompass.infrastructure.gateway import ReviewRequestGateway
from reviewcompass.infrastructure.persistence import Database

_ids = itertools.count(1)


def make_request(client_id, platform, status="sent", request_id=None):
    """Build a ReviewRequest with just the fields the rules look at."""
    return ReviewRequest(
        id=request_id if request_id is not None else next(_ids),
        client_id=client_id,
        platform=platform,
        status=status,
        sent_at="2026-10-01T12:00:00+00:00",
        request_url=f"https://reviews.example.com/r/{platform}/x",
    )


class FakeGateway(ReviewRequestGateway):
    """In-memory gateway; `fail_with` is raised from every create call."""

    def __init__(self, clients, requests=None, fail_with=None):
        self.clients = list(clients)
        self.requests = list(requests or [])
        self.fail_with = fail_with
        self.created = []
        self.list_calls = 0

    def list_clients(self):
        self.list_calls += 1
        return list(self.clients)

    def list_review_requests(self):
        return list(self.requests)

    def create_review_request(self, draft):
        if self.fail_with is not None:
            raise self.fail_with
        self.created.append(draft)
        created = ReviewRequest(
            id=len(self.requests) + 1,
            client_id=draft.client_id,
            platform=draft.platform,
            client_name=draft.client_name,
            client_email=draft.client_email,
            custom_message=draft.custom_message,
            request_url=f"https://reviews.example.com/r/{draft.platform}/{len(self.requests) + 1}",
        )
        self.requests.append(created)
        return created


@pytest.fixture
def jess():
    return Client(id=1, name="Jess", email="jess@example.com", phone="15550001111")


@pytest.fixture
def sam():
    return Client(id=2, name="Sam", email="sam@example.com", phone="15550002222")


@pytest.fixture
def db(tmp_path):
    database = Database(str(tmp_path / "test.db"))
    database.init()
    return database


@pytest.fixture
def settings_env(monkeypatch, tmp_path):
    """Point settings at a temp database and a known business."""
    monkeypatch.setenv("DATABASE_FILE", str(tmp_path / "app.db"))
    monkeypatch.setenv("BUSINESS_NAME", "Glow Studio")
    monkeypatch.setenv("BUSINESS_INDUSTRY", "beauty")
    monkeypatch.setenv("REVIEW_LINK_BASE", "https://reviews.test/r")
    monkeypatch.setenv("REVIEW_API_URL", "http://backend.test/api")
    monkeypatch.delenv("REVIEW_API_TIMEOUT", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
