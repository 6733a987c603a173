"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_ALLOWED_ORIGINS = ",".join(
    [
        "http://localhost:3000",
        "http://localhost:5000",
        "https://fitmon-six.vercel.app",
        "https://fitmon-david-fierros-projects-de8eae2f.vercel.app",
        "https://fitmon-git-master-david-fierros-projects-de8eae2f.vercel.app",
    ]
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    anthropic_api_key: str
    anthropic_base_url: str = "https://api.anthropic.com"
    anthropic_version: str = "2023-06-01"
    anthropic_model: str = "claude-3-haiku-20240307"
    anthropic_max_tokens: int = 100
    anthropic_temperature: float = 0.1
    allowed_origins: str = DEFAULT_ALLOWED_ORIGINS
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> frozenset[str]:
    """Parse the comma-separated CORS origin allow-list."""
    if raw is None:
        return frozenset()
    origins: set[str] = set()
    for chunk in raw.split(","):
        value = chunk.strip()
        if value:
            origins.add(value)
    return frozenset(origins)
