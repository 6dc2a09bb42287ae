"""
Session service orchestrator.

Coordinates session lifecycle operations on the storage backend.

Dependencies: docchat.boundary.storage, docchat.core
System role: Session use case orchestration
"""

import logging
from datetime import datetime, timezone

from docchat.boundary.storage.base import StorageBackend
from docchat.core.document_processing.stage_tracker import StageTracker
from docchat.core.exceptions import DuplicateNameError
from docchat.core.naming import validate_name
from docchat.models.session import Session

logger = logging.getLogger(__name__)


class SessionService:
    """Session registry backed by storage locations."""

    def __init__(self, storage: StorageBackend, tracker: StageTracker | None = None) -> None:
        """
        Initialize session service.

        Args:
            storage: Active storage backend
            tracker: Ingestion stage tracker to clear when a session is deleted
        """
        self._storage = storage
        self._tracker = tracker

    async def list_sessions(self) -> list[Session]:
        """
        List sessions in the order reported by the backend.

        Returns:
            list[Session]: Sessions with backend-derived creation times
        """
        roots = await self._storage.list_sessions()
        return [
            Session(id=session_id, name=session_id, created_at=created_at)
            for session_id, created_at in roots
        ]

    async def create_session(self, name: str) -> Session:
        """
        Create a new session.

        Args:
            name: Session name, also used as its id and storage path segment

        Returns:
            Session: Created session

        Raises:
            InvalidNameError: Empty name or reserved/control characters
            DuplicateNameError: A session with the same name exists (case-insensitive)
        """
        validate_name(name)

        existing = await self._storage.list_sessions()
        if any(session_id.lower() == name.lower() for session_id, _ in existing):
            raise DuplicateNameError(name)

        await self._storage.create_session(name)
        logger.info(f"{__name__}:create_session - Created session {name}")
        return Session(id=name, name=name, created_at=datetime.now(timezone.utc))

    async def delete_session(self, session_id: str) -> bool:
        """
        Delete a session with all its files and index.

        Deleting an absent session succeeds.

        Raises:
            InvalidNameError: If session_id is not a valid name
        """
        validate_name(session_id)
        deleted = await self._storage.delete_session(session_id)
        if self._tracker is not None:
            self._tracker.forget(session_id)
        return deleted
