"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

_DEFAULT_ORIGINS = (
    "https://feedmee.fun,https://www.feedmee.fun,"
    "http://localhost:3000,http://localhost:5173"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str
    openai_base_url: str = "https://api.deepseek.com"
    openai_model: str = "deepseek-chat"
    openai_timeout_seconds: float = 60.0
    allowed_origins: str | None = _DEFAULT_ORIGINS
    db_connect_attempts: int = 5
    db_connect_max_delay_seconds: float = 10.0
    generation_retry_attempts: int = 1
    seed_default_foods: bool = True
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse the comma-separated CORS origin list from env."""
    if raw is None:
        return []
    origins: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip().rstrip("/")
        if value and value not in origins:
            origins.append(value)
    return origins
