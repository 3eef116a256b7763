"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from cat_shelter.errors import InvalidRequestError

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    authorization_service_url: str
    billing_service_url: str
    cat_info_service_url: str
    cat_exchange_service_url: str
    supabase_url: str
    supabase_service_key: str
    retry_attempts: int = 2
    http_timeout_seconds: float = 10
    cats_collection: str = "cats"
    favorites_collection: str = "favorites"
    list_page_limit: int = 100
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_page(skip: int, limit: int, max_limit: int) -> tuple[int, int]:
    """Validate catalog paging arguments."""
    if skip < 0:
        raise InvalidRequestError("skip must not be negative")
    if limit < 1 or limit > max_limit:
        raise InvalidRequestError(f"limit must be between 1 and {max_limit}")
    return skip, limit
