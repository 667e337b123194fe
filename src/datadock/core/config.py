"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings.

    All settings can be overridden via environment variables.
    Prefix: DATADOCK_
    """

    model_config = SettingsConfigDict(
        env_prefix="DATADOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote services
    data_api_url: str = Field(
        default="http://localhost:4000",
        description="Base URL of the data API (table listing and rows)",
    )
    data_compiler_url: str = Field(
        default="http://localhost:4001",
        description="Base URL of the data compiler API",
    )

    # HTTP
    request_timeout: float | None = Field(
        default=30.0,
        description="HTTP timeout in seconds for one request, or None to wait indefinitely",
    )

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'

    @field_validator("data_api_url", "data_compiler_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
