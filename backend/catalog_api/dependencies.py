"""FastAPI dependencies for the Catalog API."""
from fastapi import Depends, HTTPException, Request

from ..catalog.errors import ProviderNotFoundError
from ..catalog.providers import (
    ActorProvider,
    MovieProvider,
    get_actor_provider,
    get_movie_provider,
)
from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_movie_provider_dependency(
    provider: str, app_state: AppState = Depends(get_app_state)
) -> MovieProvider:
    """Instantiate the movie provider named in the path or answer 404."""

    try:
        return get_movie_provider(provider, app_state.source)
    except ProviderNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


def get_actor_provider_dependency(
    provider: str, app_state: AppState = Depends(get_app_state)
) -> ActorProvider:
    """Instantiate the actor provider named in the path or answer 404."""

    try:
        return get_actor_provider(provider, app_state.source)
    except ProviderNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
