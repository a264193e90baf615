"""Tests for the platform catalog and industry profiles."""

from reviewcompass.domain.industries import get_industry, list_industries
from reviewcompass.domain.platforms import get_platform, list_platforms


def test_catalog_declaration_order():
    ids = [p.id for p in list_platforms()]
    assert ids == ["google", "yelp", "facebook", "angi", "bbb", "nextdoor"]


def test_list_platforms_is_repeatable():
    """Two calls give equal sequences, and mutating one does not leak into the next."""
    first = list_platforms()
    second = list_platforms()
    assert first == second

    first.pop()
    assert list_platforms() == second


def test_get_platform():
    assert get_platform("angi").name == "Angi (Angie's List)"
    assert get_platform("google").priority == 1
    assert get_platform("tripadvisor") is None


def test_get_platform_custom_catalog():
    only_yelp = [get_platform("yelp")]
    assert get_platform("yelp", only_yelp).id == "yelp"
    assert get_platform("google", only_yelp) is None


def test_platform_to_dict_uses_camel_case():
    data = get_platform("bbb").to_dict()
    assert data["avgImpact"] == "Medium"
    assert "avg_impact" not in data


def test_industries():
    assert [i.id for i in list_industries()][:3] == ["beauty", "wellness", "home_services"]
    assert get_industry("home_services").name == "Skilled-Trades"
    assert get_industry("unknown") is None
    assert get_industry(None) is None
