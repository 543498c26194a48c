"""Tests for the Catalog API application factory."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from backend.catalog.settings import ScraperSettings
from backend.catalog_api import create_app

MOVIE_URL = "https://www.heyzo.com/moviepages/1234/index.html"
MANIFEST_URL = "https://www.heyzo.com/x/9/y/55/z"
ACTOR_URL = "https://xslist.org/zh/model/123.html"
SEARCH_URL = "https://xslist.org/search?query=Jane+Doe&lg=zh"


@pytest.fixture()
def routes(fixture_text) -> dict:
    """Serve the HEYZO and xslist fixtures at their live URLs."""

    return {
        MOVIE_URL: fixture_text("heyzo_1234.html"),
        MANIFEST_URL: fixture_text("sample_master.m3u8"),
        ACTOR_URL: fixture_text("xslist_actor.html"),
        SEARCH_URL: fixture_text("xslist_search.html"),
    }


@pytest.fixture()
def client(make_source, routes) -> TestClient:
    """Provide a test client whose fetches are served from fixtures."""

    app = create_app(settings=ScraperSettings(), source=make_source(routes))
    return TestClient(app)


def test_health_endpoint_reports_ok_status(client: TestClient) -> None:
    """The /health endpoint should respond with an OK status payload."""

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "0.1.0"}


def test_providers_are_listed_by_kind(client: TestClient) -> None:
    """GET /providers lists movie providers before actor providers with their priority."""

    response = client.get("/providers")

    assert response.status_code == 200
    assert response.json() == [
        {"name": "HEYZO", "kind": "movie", "priority": 1000, "searchable": False},
        {"name": "xslist", "kind": "actor", "priority": 100, "searchable": True},
    ]


def test_movie_by_id_returns_full_record(client: TestClient) -> None:
    """A normalized movie id returns the record including resolved sample URLs."""

    response = client.get("/movies/heyzo/HEYZO-1234")

    assert response.status_code == 200
    payload = response.json()
    assert payload["number"] == "HEYZO-1234"
    assert payload["title"] == "Summer Story"
    assert payload["release_date"] == "2021-01-02"
    assert payload["runtime"] == 62
    assert payload["preview_video_hls_url"] == MANIFEST_URL
    assert payload["preview_video_url"] == "https://www.heyzo.com/contents/7/8/foo"


def test_movie_by_url(client: TestClient) -> None:
    """The url query parameter extracts the record from that page."""

    response = client.get("/movies/HEYZO", params={"url": MOVIE_URL})

    assert response.status_code == 200
    assert response.json()["id"] == "1234"


def test_unrecognized_movie_id_is_not_found(client: TestClient) -> None:
    """An id outside the provider grammar answers 404 without fetching."""

    response = client.get("/movies/heyzo/carib-1234")

    assert response.status_code == 404
    assert "does not recognize" in response.json()["detail"]


def test_unknown_provider_is_not_found(client: TestClient) -> None:
    """An unregistered provider name answers 404."""

    response = client.get("/movies/fc2/1234")

    assert response.status_code == 404


def test_fetch_failure_maps_to_bad_gateway(client: TestClient) -> None:
    """A failed page fetch is reported as 502."""

    response = client.get("/movies/heyzo/9999")

    assert response.status_code == 502


def test_actor_by_url(client: TestClient) -> None:
    """The url query parameter extracts the performer profile from that page."""

    response = client.get("/actors/xslist", params={"url": ACTOR_URL})

    assert response.status_code == 200
    payload = response.json()
    assert payload["name"] == "Jane Doe"
    assert payload["birthday"] == "1995-03-04"
    assert payload["height"] == 160


def test_actor_by_id(client: TestClient) -> None:
    """A prefixed actor id is normalized before the profile is fetched."""

    response = client.get("/actors/xslist/xslist-123")

    assert response.status_code == 200
    assert response.json()["aliases"] == ["JD", "Janey"]


def test_actor_search(client: TestClient) -> None:
    """The search endpoint returns hits in page order."""

    response = client.get("/actors/xslist/search", params={"q": "Jane Doe"})

    assert response.status_code == 200
    assert [hit["id"] for hit in response.json()] == ["15659", "200"]


def test_movie_provider_is_not_an_actor_provider(client: TestClient) -> None:
    """A movie-only provider cannot be searched for actors."""

    response = client.get("/actors/heyzo/search", params={"q": "Jane"})

    assert response.status_code == 404
