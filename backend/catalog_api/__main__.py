"""CLI entry point for launching the Catalog API with Uvicorn."""
import logging

import uvicorn

from ..catalog.settings import ScraperSettings
from .app import create_app


def main() -> None:
    """Start a development server for the Catalog API."""
    logging.basicConfig(level=logging.INFO)
    settings = ScraperSettings()
    uvicorn.run(create_app(settings=settings), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
