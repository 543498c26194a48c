"""
Record types produced by the catalog providers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class MovieInfo:
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
    release_date: Optional[date] = None
    runtime: int = 0
    score: float = 0.0
    actors: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    preview_images: List[str] = field(default_factory=list)


@dataclass
class ActorInfo:
    id: str
    provider: str
    homepage: str
    name: str = ""
    birthday: Optional[date] = None
    debut_date: Optional[date] = None
    measurements: str = ""
    cup_size: str = ""
    blood_type: str = ""
    height: int = 0
    nationality: str = ""
    aliases: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)


@dataclass
class ActorSearchResult:
    id: str
    name: str
    provider: str
    homepage: str
    images: List[str] = field(default_factory=list)
