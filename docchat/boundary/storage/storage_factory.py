"""
Storage backend factory.

The only place that decides between local and S3 storage; everything
else talks to the StorageBackend interface.

Dependencies: docchat.boundary.storage, docchat.configs
System role: Storage backend instantiation and selection
"""

import logging

from docchat.boundary.storage.base import StorageBackend
from docchat.boundary.storage.local_storage import LocalStorageBackend
from docchat.boundary.storage.s3_storage import S3StorageBackend
from docchat.configs.storage import StorageSettings

logger = logging.getLogger(__name__)


def get_storage_backend(settings: StorageSettings) -> StorageBackend:
    """
    Build the storage backend selected by the root location's scheme.

    Args:
        settings: Storage settings with the root location

    Returns:
        StorageBackend: S3StorageBackend for s3:// roots, LocalStorageBackend otherwise

    Raises:
        ValueError: If an s3:// root has no bucket name
    """
    if settings.is_s3:
        if not settings.s3_bucket:
            raise ValueError(f"Invalid STORAGE_ROOT: {settings.root}. Missing bucket name.")
        logger.info(f"{__name__}:get_storage_backend - Creating S3 storage backend")
        return S3StorageBackend(
            bucket=settings.s3_bucket,
            prefix=settings.s3_prefix,
            region=settings.s3_region,
            endpoint_url=settings.s3_endpoint_url,
        )

    logger.info(f"{__name__}:get_storage_backend - Creating local storage backend")
    return LocalStorageBackend(settings.root)
