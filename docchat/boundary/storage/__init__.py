"""
Storage backends.

Exports: StorageBackend, LocalStorageBackend, S3StorageBackend, get_storage_backend
"""

from .base import (
    INDEX_FILES,
    INDEX_NAME,
    RESERVED_SUFFIXES,
    SESSION_MARKER,
    StorageBackend,
    is_reserved,
)
from .local_storage import LocalStorageBackend
from .s3_storage import S3StorageBackend
from .storage_factory import get_storage_backend

__all__ = [
    "INDEX_FILES",
    "INDEX_NAME",
    "LocalStorageBackend",
    "RESERVED_SUFFIXES",
    "S3StorageBackend",
    "SESSION_MARKER",
    "StorageBackend",
    "get_storage_backend",
    "is_reserved",
]
