"""Application factory for the Catalog API."""
from __future__ import annotations

from fastapi import FastAPI

from ..catalog.document import DocumentSource
from ..catalog.settings import ScraperSettings
from .routers import actors, health, movies, providers
from .state import AppState


def create_app(
    settings: ScraperSettings | None = None,
    source: DocumentSource | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or ScraperSettings()
    app_state = AppState(settings=resolved_settings, source=source)

    app = FastAPI(title="Catalog Scraper API", version="0.1.0")
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    for router in (
        health.router,
        providers.router,
        movies.router,
        actors.router,
    ):
        app.include_router(router)

    return app
