"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from docchat.configs.base import BaseSettings
from docchat.configs.ingestion import IngestionSettings
from docchat.configs.llm import ModelSettings
from docchat.configs.storage import StorageSettings
from docchat.configs.upload import UploadSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    storage: StorageSettings = Field(default_factory=StorageSettings)
    upload: UploadSettings = Field(default_factory=UploadSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    model: ModelSettings = Field(default_factory=ModelSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once at startup; components receive
    the resulting object through their constructors.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
