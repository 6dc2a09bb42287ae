"""
Per-session ingestion stage tracking.

Only sessions that are being processed or whose last run failed have an
entry; every other session is IDLE.

Dependencies: docchat.models
System role: In-process ingestion state shared by pipeline and session service
"""

from docchat.models.ingestion import IngestionStage


class StageTracker:
    """Ingestion stage per session."""

    def __init__(self) -> None:
        self._stages: dict[str, IngestionStage] = {}

    def get(self, session_id: str) -> IngestionStage:
        return self._stages.get(session_id, IngestionStage.IDLE)

    def set(self, session_id: str, stage: IngestionStage) -> None:
        if stage is IngestionStage.IDLE:
            self._stages.pop(session_id, None)
        else:
            self._stages[session_id] = stage

    def forget(self, session_id: str) -> None:
        """Drop any state of a session (e.g. after it was deleted)."""
        self._stages.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._stages)
