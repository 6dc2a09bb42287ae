"""
Document service orchestrator.

Triggers ingestion of a session's current files.

Dependencies: docchat.core.document_processing
System role: Ingestion use case orchestration
"""

from docchat.core.document_processing import IngestionPipeline
from docchat.core.naming import validate_name
from docchat.models.ingestion import IngestionResult, IngestionStage


class DocumentService:
    """Document processing orchestrator."""

    def __init__(self, pipeline: IngestionPipeline) -> None:
        self._pipeline = pipeline

    async def process_session_files(self, session_id: str) -> IngestionResult:
        """
        Rebuild the session's index from all of its current files.

        Raises:
            InvalidNameError: Unusable session id
            LoadError: A file could not be loaded
            EmbeddingError: Index build or persist failed
        """
        validate_name(session_id)
        return await self._pipeline.process(session_id)

    def processing_stage(self, session_id: str) -> IngestionStage:
        return self._pipeline.stage(session_id)
