"""Tests for the xslist actor provider."""
from __future__ import annotations

from datetime import date

import pytest

from backend.catalog.errors import FetchError
from backend.catalog.providers.xslist import XsListProvider, parse_debut_date

ACTOR_URL = "https://xslist.org/zh/model/123.html"
SEARCH_URL = "https://xslist.org/search?query=Jane+Doe&lg=zh"


def test_identifier_helpers() -> None:
    """Actor ids normalize, build profile URLs and are read back from paths."""

    provider = XsListProvider()

    assert provider.normalize_id("123") == "123"
    assert provider.normalize_id("xslist-123") == "123"
    assert provider.normalize_id("jane") is None
    assert provider.actor_url("123") == ACTOR_URL
    assert provider.parse_id_from_url(ACTOR_URL) == "123"
    assert provider.parse_id_from_url("https://xslist.org/zh/model/jane-doe") == "jane-doe"


def test_parse_debut_date() -> None:
    """Year-month debut strings resolve to the first of the month."""

    assert parse_debut_date("2015年 3月") == date(2015, 3, 1)
    assert parse_debut_date("2016-05-20") == date(2016, 5, 20)


def test_profile_extraction(make_source, fixture_text) -> None:
    """Profile lines, aliases and gallery images populate the actor record."""

    provider = XsListProvider(make_source({ACTOR_URL: fixture_text("xslist_actor.html")}))

    info = provider.get_actor_info_by_id("123")

    assert info.id == "123"
    assert info.provider == "xslist"
    assert info.homepage == ACTOR_URL
    assert info.name == "Jane Doe"
    assert info.aliases == ["JD", "Janey"]
    assert info.birthday == date(1995, 3, 4)
    assert info.debut_date == date(2015, 3, 1)
    assert info.measurements == "B85W58H86"
    assert info.cup_size == "E"
    assert info.blood_type == ""
    assert info.height == 160
    assert info.nationality == "日本"
    assert info.images == [
        "https://xslist.org/img/1.jpg",
        "https://cdn.xslist.org/img/3.jpg",
    ]


def test_microdata_overrides_profile_lines(make_source) -> None:
    """Non-empty itemprop values outrank the free-text profile lines."""

    page = """
    <html><body>
    <div id="layout"><div><p>身高: 158cm<br>国籍: 日本</p></div></div>
    <span itemprop="height">162cm</span>
    <span itemprop="nationality">Japan</span>
    </body></html>
    """
    provider = XsListProvider(make_source({ACTOR_URL: page}))

    info = provider.get_actor_info_by_url(ACTOR_URL)

    assert info.height == 162
    assert info.nationality == "Japan"
    assert info.name == ""
    assert info.aliases == []


def test_search_results_in_document_order(make_source, fixture_text) -> None:
    """Search hits keep page order and strip the numbered title prefix."""

    provider = XsListProvider(make_source({SEARCH_URL: fixture_text("xslist_search.html")}))

    results = provider.search_actor("Jane Doe")

    assert [result.id for result in results] == ["15659", "200"]
    assert results[0].name == "Jane Doe"
    assert results[0].provider == "xslist"
    assert results[0].homepage == "https://xslist.org/zh/model/15659.html"
    assert results[0].images == ["https://xslist.org/thumb/15659.jpg"]
    assert results[1].name == "Mary Roe"
    assert results[1].homepage == "https://xslist.org/zh/model/200.html"
    assert results[1].images == []


def test_search_fetch_failure_propagates(make_source) -> None:
    """A failed search fetch raises FetchError."""

    provider = XsListProvider(make_source({SEARCH_URL: 500}))

    with pytest.raises(FetchError):
        provider.search_actor("Jane Doe")


def test_malformed_search_link_degrades_only_that_result(make_source) -> None:
    """An unparseable href blanks that hit's id and homepage; other hits are intact."""

    page = """
    <html><body><ul>
    <li><h3><a href="http://[broken/zh/model/1.html" title="Bad">Bad</a></h3>
        <div><img src="http://[broken/thumb/1.jpg"></div></li>
    <li><h3><a href="/zh/model/2.html" title="Good">Good</a></h3></li>
    </ul></body></html>
    """
    url = "https://xslist.org/search?query=x&lg=zh"
    provider = XsListProvider(make_source({url: page}))

    results = provider.search_actor("x")

    assert [result.name for result in results] == ["Bad", "Good"]
    assert results[0].id == ""
    assert results[0].homepage == ""
    assert results[0].images == []
    assert results[1].id == "2"
    assert results[1].homepage == "https://xslist.org/zh/model/2.html"
