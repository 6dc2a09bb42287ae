"""
Session API endpoints.

Routes:
- GET /sessions - List sessions
- POST /sessions - Create session
- DELETE /sessions/{session_id} - Delete session with its files and index

Dependencies: docchat.application.services, docchat.models
System role: Session management HTTP API
"""

from fastapi import APIRouter, Depends

from docchat.api.deps import get_session_service
from docchat.application.services import SessionService
from docchat.models.session import CreateSessionRequest, DeleteSessionResponse, Session

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=list[Session])
async def list_sessions(
    session_service: SessionService = Depends(get_session_service),
) -> list[Session]:
    """List all sessions in backend order."""
    return await session_service.list_sessions()


@router.post("", response_model=Session, status_code=201)
async def create_session(
    request: CreateSessionRequest,
    session_service: SessionService = Depends(get_session_service),
) -> Session:
    """
    Create a session.

    Raises:
        InvalidNameError (400), DuplicateNameError (409)
    """
    return await session_service.create_session(request.name)


@router.delete("/{session_id}", response_model=DeleteSessionResponse)
async def delete_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> DeleteSessionResponse:
    """Delete a session. Deleting an absent session succeeds."""
    deleted = await session_service.delete_session(session_id)
    return DeleteSessionResponse(deleted=deleted)
