"""
Application-level settings.

Settings without an env prefix; concern-specific settings live in their
own modules and are aggregated by Settings.

Dependencies: pydantic_settings
System role: Root of the configuration hierarchy
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings read from unprefixed environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging at startup",
    )
