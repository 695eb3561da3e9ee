"""Application settings using Pydantic Settings for environment-based configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration for the smart-calendar application.

    All settings can be overridden via environment variables.
    Prefix is not used to allow standard env var names (e.g., LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8080, ge=1, le=65535)
    api_keys: str | None = None  # Comma-separated; unset = open (dev mode)
    cors_origins: str = "http://localhost:3000,http://localhost:5173"
    cors_allow_credentials: bool = False
    request_timeout_seconds: float = Field(default=10.0, ge=0.0, le=300.0)

    # Rate limiting (slowapi, in-process storage)
    rate_limit_enabled: bool = False
    rate_limit_default: str = "60/minute"
    rate_limit_storage_uri: str = "memory://"

    # Observability
    metrics_enabled: bool = True
    metrics_port: int = 8000

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def api_keys_list(self) -> list[str]:
        """Configured API keys with blanks removed."""
        if not self.api_keys:
            return []
        return [k.strip() for k in self.api_keys.split(",") if k.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    Clear cache with get_settings.cache_clear() if needed.
    """
    return Settings()
