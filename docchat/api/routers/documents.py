"""
Document processing API endpoints.

Routes:
- POST /sessions/{session_id}/process - Rebuild the session index
- GET /sessions/{session_id}/process - Current ingestion stage

Dependencies: docchat.application.services
System role: Ingestion HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from docchat.api.deps import get_document_service
from docchat.application.services import DocumentService
from docchat.models.ingestion import IngestionResult, IngestionStage


class ProcessingStatusResponse(BaseModel):
    """Ingestion stage of a session."""

    session_id: str
    stage: IngestionStage


router = APIRouter(prefix="/sessions/{session_id}/process", tags=["documents"])


@router.post("", response_model=IngestionResult)
async def process_session_files(
    session_id: str,
    document_service: DocumentService = Depends(get_document_service),
) -> IngestionResult:
    """
    Load, split, embed and index every file in the session.

    Raises:
        LoadError (422), EmbeddingError (422)
    """
    return await document_service.process_session_files(session_id)


@router.get("", response_model=ProcessingStatusResponse)
async def processing_status(
    session_id: str,
    document_service: DocumentService = Depends(get_document_service),
) -> ProcessingStatusResponse:
    return ProcessingStatusResponse(
        session_id=session_id,
        stage=document_service.processing_stage(session_id),
    )
