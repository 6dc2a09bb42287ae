"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
"""

from docchat.configs.ingestion import IngestionSettings
from docchat.configs.llm import ModelSettings
from docchat.configs.settings import Settings, get_settings
from docchat.configs.storage import StorageSettings
from docchat.configs.upload import UploadSettings

__all__ = [
    "IngestionSettings",
    "ModelSettings",
    "Settings",
    "StorageSettings",
    "UploadSettings",
    "get_settings",
]
