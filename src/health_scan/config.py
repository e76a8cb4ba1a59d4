"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

ANALYZER_STATIC = "static"
ANALYZER_OPENAI = "openai"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    image_analyzer: str = ANALYZER_STATIC
    static_analysis_delay_seconds: float = 2.0
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str = "high"
    openai_store: bool = False
    share_base_url: str = "https://healthscan.app"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_analyzer_name(raw: str | None) -> str:
    """Normalize the configured image analyzer name."""
    if raw is None:
        return ANALYZER_STATIC
    cleaned = raw.strip().lower()
    if cleaned in {ANALYZER_OPENAI, "vision"}:
        return ANALYZER_OPENAI
    if cleaned in {"", ANALYZER_STATIC, "mock"}:
        return ANALYZER_STATIC
    raise ValueError(f"Unknown image analyzer: {raw}")
