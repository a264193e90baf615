"""Tests for environment-driven settings."""

import pytest

from reviewcompass.domain.models import Industry
from reviewcompass.infrastructure.config import get_settings


def reload_settings(monkeypatch, **env):
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    get_settings.cache_clear()
    return get_settings()


def test_known_settings_have_no_warnings(settings_env):
    assert settings_env.validate() == []
    assert settings_env.api.timeout_seconds == 10.0


def test_timeout_from_env(settings_env, monkeypatch):
    settings = reload_settings(monkeypatch, REVIEW_API_TIMEOUT="2.5")
    assert settings.api.timeout_seconds == 2.5
    assert settings.validate() == []


def test_malformed_timeout_is_reported(settings_env, monkeypatch):
    settings = reload_settings(monkeypatch, REVIEW_API_TIMEOUT="ten")
    assert settings.api.timeout_seconds == 10.0
    issues = settings.validate()
    assert len(issues) == 1
    assert "REVIEW_API_TIMEOUT 'ten'" in issues[0]


def test_catalog_industry_is_passed_as_profile(settings_env):
    industry = settings_env.business.rule_industry
    assert isinstance(industry, Industry)
    assert industry.id == "beauty"


@pytest.mark.parametrize("raw, expected", [
    ("skilledtrades", "skilledtrades"),
    ("HomeServices", "homeservices"),
    ("", None),
])
def test_rule_industry_falls_back_to_raw_id(settings_env, monkeypatch, raw, expected):
    settings = reload_settings(monkeypatch, BUSINESS_INDUSTRY=raw)
    assert settings.business.rule_industry == expected
    assert settings.validate() == []


def test_unknown_industry_is_reported(settings_env, monkeypatch):
    settings = reload_settings(monkeypatch, BUSINESS_INDUSTRY="plumbing")
    assert settings.business.rule_industry == "plumbing"
    assert any("'plumbing' is not a known industry" in issue for issue in settings.validate())


def test_display_name_falls_back_to_industry(settings_env, monkeypatch):
    settings = reload_settings(monkeypatch, BUSINESS_NAME="", BUSINESS_INDUSTRY="wellness")
    assert settings.business.display_name == "Wellness Provider"
