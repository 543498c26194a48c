"""Exception hierarchy shared by the catalog scrapers."""
from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for every error raised by the catalog package."""


class FetchError(CatalogError):
    """Raised when a document cannot be retrieved or parsed into a tree."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(CatalogError):
    """Raised by decoders when an embedded payload is malformed."""


class PlaylistError(DecodeError):
    """Raised when a streaming manifest cannot be parsed."""


class ProviderNotFoundError(CatalogError):
    """Raised when no provider is registered under the requested name."""
