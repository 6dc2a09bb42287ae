"""
Chat API endpoints.

Routes:
- POST /sessions/{session_id}/chat - Ask a question about the session's documents

Dependencies: docchat.application.services, docchat.models
System role: Chat HTTP API
"""

from fastapi import APIRouter, Depends

from docchat.api.deps import get_chat_service
from docchat.application.services import ChatService
from docchat.models.chat import AskResult, ChatRequest

router = APIRouter(prefix="/sessions/{session_id}/chat", tags=["chat"])


@router.post("", response_model=AskResult)
async def ask(
    session_id: str,
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> AskResult:
    """
    Answer a prompt with citations from retrieved context.

    Raises:
        NoIndexError (409): Session not processed yet
        ExecutionError (502): Generation failed
    """
    return await chat_service.ask(session_id, request.prompt)
