"""Tests for the outreach command-line runner."""

import pytest

import run_outreach
from reviewcompass.application import OutreachService
from reviewcompass.domain.errors import DispatchError
from reviewcompass.domain.industries import get_industry

from conftest import FakeGateway, make_request

ALL_IDS = ["google", "yelp", "facebook", "angi", "bbb", "nextdoor"]


class FailingForGateway(FakeGateway):
    """Rejects creates for one client id, accepts the rest."""

    def __init__(self, clients, failing_client_id, requests=None):
        super().__init__(clients, requests)
        self.failing_client_id = failing_client_id

    def create_review_request(self, draft):
        if draft.client_id == self.failing_client_id:
            raise DispatchError("backend down")
        return super().create_review_request(draft)


def make_service(gateway):
    return OutreachService(gateway, industry=get_industry("beauty"), business_name="Glow Studio")


def test_choose_platform_uses_open_recommendation(jess):
    gateway = FakeGateway([jess], [make_request(jess.id, "google", "completed")])
    service = make_service(gateway)
    history = service.client_history(jess.id)
    assert run_outreach.choose_platform(service, history).id == "yelp"


def test_choose_platform_falls_back_when_already_requested(jess):
    gateway = FakeGateway([jess], [make_request(jess.id, "google", "sent")])
    service = make_service(gateway)
    history = service.client_history(jess.id)

    assert service.recommend_for(history).platform.id == "google"
    assert run_outreach.choose_platform(service, history).id == history.suggested_platform.id == "yelp"


def test_list_ready(jess, sam, capsys):
    gateway = FakeGateway([jess, sam], [make_request(sam.id, "google", "sent")])
    assert run_outreach.list_ready(make_service(gateway)) == 0

    out = capsys.readouterr().out
    assert "Found 2 clients ready for outreach" in out
    assert "recommended: Google Business (already requested)" in out


def test_list_ready_when_everyone_is_done(jess, capsys):
    gateway = FakeGateway([jess], [make_request(jess.id, p) for p in ALL_IDS])
    assert run_outreach.list_ready(make_service(gateway)) == 0
    assert "No clients ready" in capsys.readouterr().out


def test_send_all(jess, sam, capsys):
    gateway = FakeGateway([jess, sam])
    assert run_outreach.send_all(make_service(gateway)) == 0

    assert [(d.client_id, d.platform) for d in gateway.created] == [(jess.id, "google"), (sam.id, "google")]
    assert "2 sent, 0 failed" in capsys.readouterr().out


def test_send_all_reports_failure_and_continues(jess, sam, capsys):
    gateway = FailingForGateway([jess, sam], failing_client_id=jess.id)
    assert run_outreach.send_all(make_service(gateway)) == 1

    out = capsys.readouterr().out
    assert "Send failed: backend down" in out
    assert "1 sent, 1 failed" in out
    assert [d.client_id for d in gateway.created] == [sam.id]


@pytest.mark.parametrize("client_id, platform_id", [(None, "yelp"), (1, None), (1, "")])
def test_send_one_incomplete_selection(jess, capsys, client_id, platform_id):
    gateway = FakeGateway([jess])
    assert run_outreach.send_one(make_service(gateway), client_id, platform_id, None) == 2
    assert "Cannot send" in capsys.readouterr().out
    assert gateway.created == []


def test_send_one_unknown_client(capsys):
    assert run_outreach.send_one(make_service(FakeGateway([])), 99, "yelp", None) == 2


def test_send_one_dispatch_failure(jess, capsys):
    gateway = FakeGateway([jess], fail_with=DispatchError("backend down"))
    assert run_outreach.send_one(make_service(gateway), jess.id, "yelp", None) == 1
    assert "Send failed: backend down" in capsys.readouterr().out


def test_send_one(jess, capsys):
    gateway = FakeGateway([jess])
    assert run_outreach.send_one(make_service(gateway), jess.id, "angi", "Thanks!") == 0
    assert gateway.created[0].custom_message == "Thanks!"
    assert "Sent angi review request to Jess" in capsys.readouterr().out


def test_main_routes_single_send(jess, monkeypatch):
    gateway = FakeGateway([jess])
    monkeypatch.setattr(run_outreach, "build_service", lambda: make_service(gateway))
    assert run_outreach.main(["--client", str(jess.id), "--platform", "bbb"]) == 0
    assert gateway.created[0].platform == "bbb"
