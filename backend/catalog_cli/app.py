"""Command line interface for the catalog providers."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import Any, NoReturn, Optional

import typer

from ..catalog.document import DocumentSource
from ..catalog.errors import FetchError, ProviderNotFoundError
from ..catalog.providers import (
    ActorSearcher,
    actor_providers,
    get_actor_provider,
    get_movie_provider,
    movie_providers,
)
from ..catalog.settings import ScraperSettings

app = typer.Typer(help="Extract catalog metadata from supported sites.")


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log fetches and extraction steps."),
) -> None:
    """Configure logging for every command."""

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _source() -> DocumentSource:
    return DocumentSource(ScraperSettings())


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _is_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


@app.command("providers")
def list_providers() -> None:
    """List registered providers, highest priority first."""

    source = _source()
    payload = [
        {"name": provider.name, "kind": provider.kind, "priority": provider.priority}
        for provider in movie_providers(source)
    ]
    payload.extend(
        {
            "name": provider.name,
            "kind": provider.kind,
            "priority": provider.priority,
            "searchable": isinstance(provider, ActorSearcher),
        }
        for provider in actor_providers(source)
    )
    _echo_json(payload)


@app.command()
def movie(
    provider: str = typer.Argument(..., help="Movie provider name, e.g. HEYZO."),
    target: str = typer.Argument(..., help="Movie identifier or page URL."),
) -> None:
    """Print the movie record for an identifier or page URL."""

    try:
        movie_provider = get_movie_provider(provider, _source())
    except ProviderNotFoundError as exc:
        _fail(str(exc))

    try:
        if _is_url(target):
            info = movie_provider.get_movie_info_by_url(target)
        else:
            movie_id: Optional[str] = movie_provider.normalize_id(target)
            if movie_id is None:
                _fail(f"{movie_provider.name} does not recognize movie id {target!r}")
            info = movie_provider.get_movie_info_by_id(movie_id)
    except FetchError as exc:
        _fail(f"Fetch failed: {exc}")

    _echo_json(asdict(info))


@app.command()
def actor(
    provider: str = typer.Argument(..., help="Actor provider name, e.g. xslist."),
    target: str = typer.Argument(..., help="Actor identifier or profile URL."),
) -> None:
    """Print the performer profile for an identifier or profile URL."""

    try:
        actor_provider = get_actor_provider(provider, _source())
    except ProviderNotFoundError as exc:
        _fail(str(exc))

    try:
        if _is_url(target):
            info = actor_provider.get_actor_info_by_url(target)
        else:
            actor_id: Optional[str] = actor_provider.normalize_id(target)
            if actor_id is None:
                _fail(f"{actor_provider.name} does not recognize actor id {target!r}")
            info = actor_provider.get_actor_info_by_id(actor_id)
    except FetchError as exc:
        _fail(f"Fetch failed: {exc}")

    _echo_json(asdict(info))


@app.command()
def search(
    provider: str = typer.Argument(..., help="Actor provider name, e.g. xslist."),
    keyword: str = typer.Argument(..., help="Keyword to search for."),
) -> None:
    """Search a provider for actors matching ``keyword``."""

    try:
        actor_provider = get_actor_provider(provider, _source())
    except ProviderNotFoundError as exc:
        _fail(str(exc))

    if not isinstance(actor_provider, ActorSearcher):
        _fail(f"{actor_provider.name} does not support search")

    try:
        results = actor_provider.search_actor(keyword)
    except FetchError as exc:
        _fail(f"Fetch failed: {exc}")

    _echo_json([asdict(result) for result in results])
