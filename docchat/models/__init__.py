"""Pydantic models shared across layers."""

from docchat.models.chat import AskResult, ChatRequest, Message
from docchat.models.citation import Citation
from docchat.models.document import (
    FailedUpload,
    SessionFilesResponse,
    UploadedFile,
    UploadReport,
)
from docchat.models.ingestion import IngestionResult, IngestionStage
from docchat.models.session import CreateSessionRequest, DeleteSessionResponse, Session

__all__ = [
    "AskResult",
    "ChatRequest",
    "Citation",
    "CreateSessionRequest",
    "DeleteSessionResponse",
    "FailedUpload",
    "IngestionResult",
    "IngestionStage",
    "Message",
    "Session",
    "SessionFilesResponse",
    "UploadReport",
    "UploadedFile",
]
