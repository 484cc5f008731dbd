"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from pantry_pilot.domain.catalog import OnNoMatch

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    cors_allowed_origins: str | None = "*"
    placeholder_image_url: str = "https://via.placeholder.com/150"
    store_location_on_no_match: OnNoMatch = OnNoMatch.LEAVE_UNSET
    reset_cart_max_attempts: int = 3
    reset_cart_retry_delay_seconds: float = 0.2
    catalog_batch_size: int = 500
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    return [chunk.strip() for chunk in cleaned.split(",") if chunk.strip()]
