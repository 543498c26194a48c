"""Runtime configuration for the catalog scrapers."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) "
    "Gecko/20100101 Firefox/121.0"
)


class ScraperSettings(BaseSettings):
    """Environment-aware settings for document fetching and the API service."""

    user_agent: str = Field(
        DEFAULT_USER_AGENT, description="User-Agent header sent with every request."
    )
    timeout: float = Field(default=30.0, description="Per-request timeout in seconds.")
    follow_redirects: bool = Field(
        default=True, description="Whether redirects are followed when fetching documents."
    )
    accept_language: str = Field(
        default="ja,zh;q=0.9,en;q=0.8",
        description="Accept-Language header sent with every request.",
    )
    api_host: str = Field(default="0.0.0.0", description="Bind address for the HTTP API.")
    api_port: int = Field(default=8000, description="Port for the HTTP API.")

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_SCRAPER_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
