"""Actor lookup and search endpoints."""
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query

from ...catalog.errors import FetchError
from ...catalog.providers import ActorProvider, ActorSearcher
from ..dependencies import get_actor_provider_dependency
from ..schemas import ActorInfoModel, ActorSearchResultModel

router = APIRouter(prefix="/actors", tags=["actors"])


@router.get(
    "/{provider}/search",
    summary="Search actors",
    response_model=list[ActorSearchResultModel],
)
def search_actors(
    q: str = Query(..., min_length=1, description="Keyword to search for."),
    actor_provider: ActorProvider = Depends(get_actor_provider_dependency),
) -> list[ActorSearchResultModel]:
    """Run the provider's actor search and return hits in page order."""

    if not isinstance(actor_provider, ActorSearcher):
        raise HTTPException(status_code=404, detail=f"{actor_provider.name} does not support search")

    try:
        results = actor_provider.search_actor(q)
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return [ActorSearchResultModel.model_validate(asdict(result)) for result in results]


@router.get("/{provider}", summary="Actor by page URL", response_model=ActorInfoModel)
def actor_by_url(
    url: str = Query(..., description="Profile page URL on the provider's site."),
    actor_provider: ActorProvider = Depends(get_actor_provider_dependency),
) -> ActorInfoModel:
    """Extract a performer profile from an explicit page URL."""

    try:
        info = actor_provider.get_actor_info_by_url(url)
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return ActorInfoModel.model_validate(asdict(info))


@router.get("/{provider}/{actor_id}", summary="Actor by identifier", response_model=ActorInfoModel)
def actor_by_id(
    actor_id: str,
    actor_provider: ActorProvider = Depends(get_actor_provider_dependency),
) -> ActorInfoModel:
    """Normalize ``actor_id`` and extract the matching performer profile."""

    normalized = actor_provider.normalize_id(actor_id)
    if normalized is None:
        raise HTTPException(
            status_code=404,
            detail=f"{actor_provider.name} does not recognize actor id {actor_id!r}",
        )

    try:
        info = actor_provider.get_actor_info_by_id(normalized)
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return ActorInfoModel.model_validate(asdict(info))
