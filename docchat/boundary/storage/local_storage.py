"""
Local filesystem storage backend.

Sessions are directories under the configured root; files live directly
inside their session directory.

Dependencies: pathlib, shutil, fastapi.concurrency
System role: Storage backend for local development and single-host deploys
"""

import logging
import shutil
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from fastapi.concurrency import run_in_threadpool

from docchat.boundary.storage.base import StorageBackend, is_reserved
from docchat.core.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)


class LocalStorageBackend(StorageBackend):
    """Storage backend rooted at a local directory."""

    def __init__(self, root: str | Path) -> None:
        """
        Initialize backend and create the root directory if needed.

        Args:
            root: Root directory holding one sub-directory per session
        """
        self._root = Path(root).expanduser().resolve()
        self._root.mkdir(parents=True, exist_ok=True)
        logger.info(f"{__name__}:__init__ - Local storage root: {self._root}")

    @property
    def root(self) -> Path:
        """Resolved storage root."""
        return self._root

    def _session_dir(self, session_id: str) -> Path:
        return self._root / session_id

    def _list_sessions_sync(self) -> list[tuple[str, datetime]]:
        sessions = []
        for entry in self._root.iterdir():
            if entry.is_dir():
                mtime = entry.stat().st_mtime
                sessions.append((entry.name, datetime.fromtimestamp(mtime, tz=timezone.utc)))
        # Oldest first, matching creation order
        sessions.sort(key=lambda item: item[1])
        return sessions

    async def list_sessions(self) -> list[tuple[str, datetime]]:
        try:
            return await run_in_threadpool(self._list_sessions_sync)
        except OSError as e:
            raise StorageError("Failed to list sessions", operation="list_sessions") from e

    def _list_files_sync(self, session_id: str) -> set[str]:
        session_dir = self._session_dir(session_id)
        if not session_dir.is_dir():
            return set()
        return {
            entry.name
            for entry in session_dir.iterdir()
            if entry.is_file() and not is_reserved(entry.name)
        }

    async def list_files(self, session_id: str) -> set[str]:
        try:
            return await run_in_threadpool(self._list_files_sync, session_id)
        except OSError as e:
            raise StorageError(
                "Failed to list session files",
                operation="list_files",
                details={"session_id": session_id},
            ) from e

    async def create_session(self, session_id: str) -> None:
        try:
            await run_in_threadpool(
                self._session_dir(session_id).mkdir, parents=True, exist_ok=True
            )
        except OSError as e:
            raise StorageError(
                "Failed to create session",
                operation="create_session",
                details={"session_id": session_id},
            ) from e

    async def delete_session(self, session_id: str) -> bool:
        session_dir = self._session_dir(session_id)
        try:
            if session_dir.exists():
                await run_in_threadpool(shutil.rmtree, session_dir)
        except OSError as e:
            raise StorageError(
                "Failed to delete session",
                operation="delete_session",
                details={"session_id": session_id},
            ) from e
        logger.info(f"{__name__}:delete_session - Removed session {session_id}")
        return True

    def _write_file_sync(self, session_id: str, filename: str, data: bytes) -> None:
        session_dir = self._session_dir(session_id)
        session_dir.mkdir(parents=True, exist_ok=True)
        (session_dir / filename).write_bytes(data)

    async def write_file(self, session_id: str, filename: str, data: bytes) -> None:
        try:
            await run_in_threadpool(self._write_file_sync, session_id, filename, data)
        except OSError as e:
            raise StorageError(
                "Failed to write file",
                operation="write_file",
                details={"session_id": session_id, "filename": filename},
            ) from e

    async def delete_file(self, session_id: str, filename: str) -> None:
        path = self._session_dir(session_id) / filename
        try:
            await run_in_threadpool(path.unlink)
        except FileNotFoundError as e:
            raise NotFoundError(session_id, filename) from e
        except OSError as e:
            raise StorageError(
                "Failed to delete file",
                operation="delete_file",
                details={"session_id": session_id, "filename": filename},
            ) from e

    async def read_file(self, session_id: str, filename: str) -> bytes:
        path = self._session_dir(session_id) / filename
        try:
            return await run_in_threadpool(path.read_bytes)
        except FileNotFoundError as e:
            raise NotFoundError(session_id, filename) from e
        except OSError as e:
            raise StorageError(
                "Failed to read file",
                operation="read_file",
                details={"session_id": session_id, "filename": filename},
            ) from e

    async def file_exists(self, session_id: str, filename: str) -> bool:
        return await run_in_threadpool((self._session_dir(session_id) / filename).is_file)

    @asynccontextmanager
    async def materialize(self, session_id: str) -> AsyncIterator[Path]:
        # Files are already local; nothing to copy or clean up
        yield self._session_dir(session_id)
