"""Router exports for the Catalog API."""
from . import actors, health, movies, providers

__all__ = ["actors", "health", "movies", "providers"]
