"""Pydantic models exposed by the Catalog API."""
from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default="0.1.0", description="Semantic version of the API service.")


class ProviderModel(BaseModel):
    """A registered provider and the priority used to rank it."""

    name: str
    kind: Literal["movie", "actor"]
    priority: int
    searchable: bool = Field(default=False, description="Whether the provider supports search.")


class MovieInfoModel(BaseModel):
    """Movie record extracted from a provider page."""

    id: str
    number: str
    provider: str
    homepage: str
    title: str = ""
    summary: str = ""
    maker: str = ""
    series: str = ""
    thumb_url: str = ""
    cover_url: str = ""
    preview_video_url: str = ""
    preview_video_hls_url: str = ""
    release_date: date | None = None
    runtime: int = Field(default=0, description="Runtime in minutes.")
    score: float = 0.0
    actors: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    preview_images: list[str] = Field(default_factory=list)


class ActorInfoModel(BaseModel):
    """Performer profile extracted from a provider page."""

    id: str
    provider: str
    homepage: str
    name: str = ""
    birthday: date | None = None
    debut_date: date | None = None
    measurements: str = ""
    cup_size: str = ""
    blood_type: str = ""
    height: int = Field(default=0, description="Height in centimetres.")
    nationality: str = ""
    aliases: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)


class ActorSearchResultModel(BaseModel):
    """One hit from a provider's actor search."""

    id: str
    name: str
    provider: str
    homepage: str
    images: list[str] = Field(default_factory=list)
