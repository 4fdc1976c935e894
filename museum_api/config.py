"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Missing credentials do not break import; they fail at startup (lifespan)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Signed URL expiry is a setting, defaulting to the far-future date the
      mobile app has always received
"""

from datetime import datetime, timezone
from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Firebase: service-account JSON blob and the public Web API key
    firebase_settings: str = ""
    api_key: str = Field(
        "", validation_alias=AliasChoices("apikey", "api_key"),
    )

    # Storage
    storage_bucket: str | None = None
    signed_url_expiration: datetime = datetime(2500, 3, 1, tzinfo=timezone.utc)

    @field_validator("signed_url_expiration")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Naive datetimes from the environment are read as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    # Identity provider REST endpoints (override to target the emulator)
    identity_toolkit_url: str = "https://identitytoolkit.googleapis.com/v1"
    secure_token_url: str = "https://securetoken.googleapis.com/v1"
    http_timeout_seconds: float = 30.0

    # QR images
    qr_box_size: int = 10
    qr_border: int = 4

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 3000
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
