"""Application configuration using Pydantic V2.

Values come from the environment (prefix ``TICKER_DASH_``) or a local ``.env`` file.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://stock.indianapi.in/stock"


class Settings(BaseSettings):
    """Application settings and configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TICKER_DASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_title: str = Field(default="Stock Dashboard", description="Page title")

    # Stock API
    api_url: str = Field(default=DEFAULT_API_URL, description="Snapshot endpoint")
    api_key: str = Field(default="", description="Static credential sent as X-Api-Key")
    request_timeout: float | None = Field(
        default=None, description="Request timeout in seconds (None disables it)"
    )

    # Presentation
    currency_symbol: str = Field(default="₹", description="Prefix for price fields")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Ensure timeout is positive if provided."""
        if v is not None and v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
