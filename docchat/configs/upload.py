"""
Upload limit configuration.

Dependencies: pydantic, pydantic_settings
System role: File count and size limits enforced at the upload boundary
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UploadSettings(BaseSettings):
    """Limits applied to pending upload batches."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="UPLOAD_",
        case_sensitive=False,
        extra="ignore",
    )

    max_files: int = Field(
        default=40,
        gt=0,
        description="Maximum number of files in one pending batch",
    )
    max_file_size: int = Field(
        default=52428800,
        gt=0,
        description="Maximum size of a single file in bytes (50 MiB)",
    )
