"""Shared state container for the Catalog API."""
from __future__ import annotations

from dataclasses import dataclass

from ..catalog.document import DocumentSource
from ..catalog.settings import ScraperSettings


@dataclass(slots=True)
class AppState:
    """Settings and the template document source every request clones from."""

    settings: ScraperSettings
    source: DocumentSource

    def __init__(self, settings: ScraperSettings, source: DocumentSource | None = None) -> None:
        self.settings = settings
        self.source = source or DocumentSource(settings)
