"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_chat_service,
    get_document_service,
    get_file_service,
    get_service_cache,
    get_session_service,
)

__all__ = [
    "ServiceCache",
    "get_chat_service",
    "get_document_service",
    "get_file_service",
    "get_service_cache",
    "get_session_service",
]
