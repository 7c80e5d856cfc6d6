"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    usda_api_key: str = ""
    ndb_base_url: str = "https://api.nal.usda.gov/ndb"
    ledger_path: str = "calorietracker.json"
    http_timeout_seconds: float = 15
    strict_nutrients: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


class MissingApiKeyError(RuntimeError):
    """Raised when an API-backed action runs without USDA_API_KEY."""


def require_api_key(settings: Settings) -> str:
    """Return the configured API key or fail if it is blank."""
    api_key = settings.usda_api_key.strip()
    if not api_key:
        raise MissingApiKeyError("USDA_API_KEY is not set")
    return api_key
