"""
Provider registry.

Factories are registered by name; callers build providers on demand so
each instance gets its own document source.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional

from ..document import DocumentSource
from ..errors import ProviderNotFoundError
from .base import ActorProvider, ActorSearcher, MovieProvider, Provider
from .heyzo import HeyzoProvider
from .xslist import XsListProvider

MovieFactory = Callable[[Optional[DocumentSource]], MovieProvider]
ActorFactory = Callable[[Optional[DocumentSource]], ActorProvider]

_movie_factories: Dict[str, MovieFactory] = {}
_actor_factories: Dict[str, ActorFactory] = {}


def _key(name: str) -> str:
    return name.strip().lower()


def register_movie_provider(name: str, factory: MovieFactory) -> None:
    _movie_factories[_key(name)] = factory


def register_actor_provider(name: str, factory: ActorFactory) -> None:
    _actor_factories[_key(name)] = factory


def get_movie_provider(name: str, source: Optional[DocumentSource] = None) -> MovieProvider:
    factory = _movie_factories.get(_key(name))
    if factory is None:
        raise ProviderNotFoundError(f"Unknown movie provider: {name}")
    return factory(source)


def get_actor_provider(name: str, source: Optional[DocumentSource] = None) -> ActorProvider:
    factory = _actor_factories.get(_key(name))
    if factory is None:
        raise ProviderNotFoundError(f"Unknown actor provider: {name}")
    return factory(source)


def movie_providers(source: Optional[DocumentSource] = None) -> List[MovieProvider]:
    """All registered movie providers, highest priority first."""
    providers = [factory(source) for factory in _movie_factories.values()]
    return sorted(providers, key=lambda provider: provider.priority, reverse=True)


def actor_providers(source: Optional[DocumentSource] = None) -> List[ActorProvider]:
    """All registered actor providers, highest priority first."""
    providers = [factory(source) for factory in _actor_factories.values()]
    return sorted(providers, key=lambda provider: provider.priority, reverse=True)


register_movie_provider(HeyzoProvider.name, HeyzoProvider)
register_actor_provider(XsListProvider.name, XsListProvider)

__all__ = [
    "ActorProvider",
    "ActorSearcher",
    "HeyzoProvider",
    "MovieProvider",
    "Provider",
    "XsListProvider",
    "actor_providers",
    "get_actor_provider",
    "get_movie_provider",
    "movie_providers",
    "register_actor_provider",
    "register_movie_provider",
]
