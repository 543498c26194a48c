"""Shared fixtures for the catalog test suite."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, List, Union

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.catalog.document import DocumentSource  # noqa: E402

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

Route = Union[str, bytes, int, tuple]


class RecordingSource(DocumentSource):
    """Document source backed by an in-memory route table."""

    def __init__(self, routes: Dict[str, Route], requested: List[str] | None = None) -> None:
        self.routes = routes
        self.requested: List[str] = requested if requested is not None else []
        super().__init__(transport=httpx.MockTransport(self._handle))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, int):
            return httpx.Response(route, text="")
        if isinstance(route, bytes):
            route = (200, route)
        if isinstance(route, tuple):
            status, body, *content_type = route
            if isinstance(body, bytes):
                # Raw bodies carry only the content type they are given.
                headers = {"Content-Type": content_type[0] if content_type else "text/html"}
                return httpx.Response(status, content=body, headers=headers)
            return httpx.Response(status, text=body)
        return httpx.Response(200, text=route)

    def clone(self) -> "RecordingSource":
        # Clones share the request log so nested fetches stay observable.
        return RecordingSource(self.routes, self.requested)


@pytest.fixture()
def fixture_text() -> Callable[[str], str]:
    """Return a loader for files under ``tests/fixtures``."""

    def _load(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture()
def make_source() -> Callable[[Dict[str, Route]], RecordingSource]:
    """Build a document source that serves the given URL -> body routes."""

    def _factory(routes: Dict[str, Route]) -> RecordingSource:
        return RecordingSource(routes)

    return _factory
