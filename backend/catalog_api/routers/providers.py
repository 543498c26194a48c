"""Provider listing endpoints."""
from fastapi import APIRouter, Depends

from ...catalog.providers import ActorSearcher, actor_providers, movie_providers
from ..dependencies import get_app_state
from ..schemas import ProviderModel
from ..state import AppState

router = APIRouter(prefix="/providers", tags=["providers"])


@router.get("", response_model=list[ProviderModel])
def list_providers(app_state: AppState = Depends(get_app_state)) -> list[ProviderModel]:
    """Return every registered provider, movie providers first, by priority."""

    models = [
        ProviderModel(name=provider.name, kind=provider.kind, priority=provider.priority)
        for provider in movie_providers(app_state.source)
    ]
    models.extend(
        ProviderModel(
            name=provider.name,
            kind=provider.kind,
            priority=provider.priority,
            searchable=isinstance(provider, ActorSearcher),
        )
        for provider in actor_providers(app_state.source)
    )
    return models
