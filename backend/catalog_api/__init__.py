"""HTTP API exposing the catalog providers."""
from .app import create_app

__all__ = ["create_app"]
