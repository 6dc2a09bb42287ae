"""
Application services.

Exports: SessionService, FileService, UploadBatch, DocumentService, ChatService
"""

from .chat_service import ChatService
from .document_service import DocumentService
from .file_service import FileService, UploadBatch
from .session_service import SessionService

__all__ = [
    "ChatService",
    "DocumentService",
    "FileService",
    "SessionService",
    "UploadBatch",
]
