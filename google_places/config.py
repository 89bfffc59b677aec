"""
Configuration for google_places package.

Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlacesConfig(BaseSettings):
    """Configuration for Google Places API client."""

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_PLACES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Google Places API
    api_key: SecretStr = Field(
        default=SecretStr(""),
        description="Google Places API key",
    )
    sensor: bool = Field(
        default=False,
        description="Whether requests come from a device with a location sensor",
    )

    # HTTP Configuration
    request_timeout: int = Field(
        default=30,
        description="HTTP request timeout in seconds",
        ge=5,
        le=120,
    )
    timeout_attempts: int = Field(
        default=3,
        description="Attempts per HTTP request when the connection times out",
        ge=1,
        le=10,
    )

    # Pagination
    page_delay: float = Field(
        default=2.0,
        description="Seconds to wait before a next_page_token becomes valid",
        ge=0.0,
    )

    # Status retries (client-wide defaults for retry_options)
    retry_max: int = Field(
        default=0,
        description="Maximum retries for retryable API statuses",
        ge=0,
        le=10,
    )
    retry_delay: float = Field(
        default=5.0,
        description="Delay in seconds between status retries",
        ge=0.0,
    )
    retry_statuses: list[str] = Field(
        default_factory=list,
        description="API statuses that trigger a retry (none by default)",
    )


@lru_cache
def get_config() -> PlacesConfig:
    """Get cached configuration instance."""
    return PlacesConfig()
