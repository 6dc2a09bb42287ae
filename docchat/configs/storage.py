"""
Storage root configuration.

The root location string decides which storage backend is active:
``s3://bucket/prefix`` selects S3, anything else is a local directory.

Dependencies: pydantic, pydantic_settings
System role: Storage backend selection and connection settings
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

S3_SCHEME = "s3://"


class StorageSettings(BaseSettings):
    """Session storage configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    root: str = Field(
        default="./uploads",
        description="Storage root: local directory or s3://bucket/prefix",
    )
    s3_region: str = Field(
        default="us-east-1",
        description="AWS region for the S3 bucket",
    )
    s3_endpoint_url: str | None = Field(
        default=None,
        description="Custom S3 endpoint (MinIO, LocalStack)",
    )

    @property
    def is_s3(self) -> bool:
        """Whether the root points at an S3 bucket."""
        return self.root.startswith(S3_SCHEME)

    @property
    def s3_bucket(self) -> str:
        """Bucket name parsed from an s3:// root."""
        return self.root[len(S3_SCHEME):].split("/", 1)[0]

    @property
    def s3_prefix(self) -> str:
        """
        Key prefix parsed from an s3:// root.

        Returns:
            str: Prefix ending with "/" or empty string for bucket root
        """
        parts = self.root[len(S3_SCHEME):].split("/", 1)
        prefix = parts[1].strip("/") if len(parts) > 1 else ""
        return f"{prefix}/" if prefix else ""
