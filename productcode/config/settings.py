"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library and CLI configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PRODUCTCODE_",
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    # CLI
    default_output_format: Literal["text", "json"] = Field(
        "text", description="Output format used by product-check when --format is omitted"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
