"""Movie lookup endpoints."""
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query

from ...catalog.errors import FetchError
from ...catalog.providers import MovieProvider
from ..dependencies import get_movie_provider_dependency
from ..schemas import MovieInfoModel

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("/{provider}", summary="Movie by page URL", response_model=MovieInfoModel)
def movie_by_url(
    url: str = Query(..., description="Movie page URL on the provider's site."),
    movie_provider: MovieProvider = Depends(get_movie_provider_dependency),
) -> MovieInfoModel:
    """Extract a movie record from an explicit page URL."""

    try:
        info = movie_provider.get_movie_info_by_url(url)
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return MovieInfoModel.model_validate(asdict(info))


@router.get("/{provider}/{movie_id}", summary="Movie by identifier", response_model=MovieInfoModel)
def movie_by_id(
    movie_id: str,
    movie_provider: MovieProvider = Depends(get_movie_provider_dependency),
) -> MovieInfoModel:
    """Normalize ``movie_id`` and extract the matching movie record."""

    normalized = movie_provider.normalize_id(movie_id)
    if normalized is None:
        raise HTTPException(
            status_code=404,
            detail=f"{movie_provider.name} does not recognize movie id {movie_id!r}",
        )

    try:
        info = movie_provider.get_movie_info_by_id(normalized)
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return MovieInfoModel.model_validate(asdict(info))
