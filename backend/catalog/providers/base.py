"""Shared plumbing for site providers."""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..document import Document, DocumentSource
from ..models import ActorInfo, ActorSearchResult, MovieInfo
from ..pipeline import ExtractionPipeline

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_PRIORITY = 100


class Provider:
    """Base class holding the provider identity and its document source."""

    name: str = ""
    priority: int = DEFAULT_PROVIDER_PRIORITY
    kind: str = ""

    def __init__(self, source: Optional[DocumentSource] = None) -> None:
        self.source = source or DocumentSource()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} priority={self.priority}>"

    def normalize_id(self, raw_id: str) -> Optional[str]:
        raise NotImplementedError

    def parse_id_from_url(self, url: str) -> str:
        raise NotImplementedError

    def assemble(self, record: Any, url: str, pipeline: ExtractionPipeline) -> Any:
        """Fetch ``url`` and run ``pipeline`` over it into ``record``.

        A fetch failure propagates as ``FetchError`` and no record is
        returned. An unmatched document yields the seeded record unchanged.
        """

        source = self.source.clone()
        document: Document = source.fetch(url)
        logger.info("[%s] extracting %s", self.name, url)
        return pipeline.run(document, record, source)

    def clone_source(self) -> DocumentSource:
        return self.source.clone()


class MovieProvider(Provider):
    kind = "movie"

    def get_movie_info_by_id(self, movie_id: str) -> MovieInfo:
        raise NotImplementedError

    def get_movie_info_by_url(self, url: str) -> MovieInfo:
        raise NotImplementedError


class ActorProvider(Provider):
    kind = "actor"

    def get_actor_info_by_id(self, actor_id: str) -> ActorInfo:
        raise NotImplementedError

    def get_actor_info_by_url(self, url: str) -> ActorInfo:
        raise NotImplementedError


class ActorSearcher:
    def search_actor(self, keyword: str) -> List[ActorSearchResult]:
        raise NotImplementedError
