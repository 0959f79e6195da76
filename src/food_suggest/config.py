"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

SUPPORTED_LANGUAGES = {"en", "tr"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    food_api_base_url: str = "https://food-suggestion-api.ugurer.workers.dev"
    http_timeout_seconds: float = 15
    ai_daily_limit: int = 20
    places_daily_limit: int = 20
    ai_provider: Literal["proxy", "openai"] = "proxy"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4.1-mini"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "kv_store"
    weather_base_url: str = "https://api.open-meteo.com"
    weather_ttl_seconds: int = 900
    catalog_ttl_seconds: int | None = None
    default_language: str = "tr"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_language(raw: str | None, fallback: str) -> str:
    """Resolve a language preference such as `auto` or `en-US` to a code."""
    if raw is None:
        return fallback
    cleaned = raw.strip().lower().replace("_", "-")
    if cleaned in {"", "auto"}:
        return fallback
    code = cleaned.split("-", 1)[0]
    if code in SUPPORTED_LANGUAGES:
        return code
    return fallback
