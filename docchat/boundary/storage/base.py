"""
Storage backend contract.

Uniform session-directory and session-file operations implemented
identically by the local filesystem and S3 backends.

Dependencies: abc, contextlib
System role: Storage abstraction consumed by services, ingestion and query
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from datetime import datetime
from pathlib import Path

INDEX_NAME = "index"
INDEX_FILES = (f"{INDEX_NAME}.faiss", f"{INDEX_NAME}.pkl")
RESERVED_SUFFIXES = (".json", ".faiss", ".pkl")
# Zero-byte object marking a session on backends without directories
SESSION_MARKER = ".keep"


def is_reserved(filename: str) -> bool:
    """Whether a file is a storage or ingestion artifact rather than user content."""
    return filename == SESSION_MARKER or filename.endswith(RESERVED_SUFFIXES)


class StorageBackend(ABC):
    """Session-scoped storage operations."""

    @abstractmethod
    async def list_sessions(self) -> list[tuple[str, datetime]]:
        """
        Enumerate top-level session locations under the root.

        Returns:
            list[tuple[str, datetime]]: (session_id, created_at) in backend order
        """

    @abstractmethod
    async def list_files(self, session_id: str) -> set[str]:
        """
        List user files in a session.

        Directories and reserved artifacts are excluded. A missing session
        yields an empty set.
        """

    @abstractmethod
    async def create_session(self, session_id: str) -> None:
        """Ensure the session location exists (idempotent)."""

    @abstractmethod
    async def delete_session(self, session_id: str) -> bool:
        """
        Recursively remove everything under the session location.

        Returns:
            bool: True once removal was performed (also for absent sessions)
        """

    @abstractmethod
    async def write_file(self, session_id: str, filename: str, data: bytes) -> None:
        """Create or overwrite a file, creating the session location if absent."""

    @abstractmethod
    async def delete_file(self, session_id: str, filename: str) -> None:
        """
        Delete a single file.

        Raises:
            NotFoundError: If the file does not exist
        """

    @abstractmethod
    async def read_file(self, session_id: str, filename: str) -> bytes:
        """
        Read a single file.

        Raises:
            NotFoundError: If the file does not exist
        """

    @abstractmethod
    async def file_exists(self, session_id: str, filename: str) -> bool:
        """Whether a file exists in the session."""

    @abstractmethod
    def materialize(self, session_id: str) -> AbstractAsyncContextManager[Path]:
        """
        Expose session contents as a local directory for a scoped operation.

        Backends without local files download into a temporary directory
        that is removed on every exit path.
        """
