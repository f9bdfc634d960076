"""
Configuration Settings

This module defines application configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file.

Design Decisions:
- Uses pydantic-settings for type-safe configuration
- Supports multiple environments (production, staging, dev)
- Links live in process memory only; there is no database URL to configure
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


class EnvSettingsOptions(Enum):
    """Environment options for deployment."""
    production = "production"
    staging = "staging"
    development = "dev"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Project Configuration
    ENV_SETTING: EnvSettingsOptions = Field(
        default=EnvSettingsOptions.development,
        description="Environment setting (production, staging, dev)"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Level applied to the 'shortlinks' logger hierarchy"
    )

    # Application Configuration
    BASE_URL: str = Field(
        default="http://localhost:8000",
        description="Base URL for generating short URLs"
    )

    # Short Code Configuration
    SHORT_CODE_LENGTH: int = Field(
        default=6,
        description="Length of randomly generated short codes (62^6 possible codes)"
    )
    MAX_SHORT_CODE_LENGTH: int = Field(
        default=20,
        description="Longest custom short code accepted from callers"
    )
    MAX_CODE_ATTEMPTS: int = Field(
        default=1000,
        description="Random codes tried before giving up with CodeSpaceExhaustedError"
    )

    # Link Configuration
    DEFAULT_VALIDITY_MINUTES: int = Field(
        default=30,
        description="Validity applied when the caller does not provide one"
    )
    MAX_URL_LENGTH: int = Field(
        default=2048,
        description="Longest original URL accepted (RFC 7230 practical limit)"
    )
    CLICK_LOCATION_PLACEHOLDER: str = Field(
        default="Unknown",
        description="Location recorded on every click (no geolocation is performed)"
    )

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = Field(
        default=True,
        description="Disable to turn off per-IP rate limiting (e.g. for tests)"
    )


settings = Settings()
