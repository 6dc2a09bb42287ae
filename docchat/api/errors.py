"""
Exception handlers.

Maps the domain exception taxonomy to HTTP responses carrying only the
short user-facing message.

Dependencies: fastapi, docchat.core.exceptions, docchat.observability
System role: HTTP error translation
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from docchat.core.exceptions import (
    DocChatError,
    DuplicateNameError,
    EmbeddingError,
    ExecutionError,
    FileTooLargeError,
    InvalidNameError,
    LoadError,
    NoIndexError,
    NotFoundError,
    StorageError,
    TooManyFilesError,
)
from docchat.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[DocChatError], int] = {
    InvalidNameError: 400,
    FileTooLargeError: 400,
    TooManyFilesError: 400,
    NotFoundError: 404,
    DuplicateNameError: 409,
    NoIndexError: 409,
    LoadError: 422,
    EmbeddingError: 422,
    ExecutionError: 502,
    StorageError: 500,
}


def status_code_for(exc: DocChatError) -> int:
    for exc_type, status_code in STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def docchat_error_handler(request: Request, exc: DocChatError) -> JSONResponse:
    """Translate a DocChatError into a JSON error response."""
    status_code = status_code_for(exc)
    if status_code >= 500:
        log_exception_with_context(
            logger, "Request failed", exc, path=request.url.path, **exc.details
        )
    else:
        log_with_context(
            logger,
            logging.WARNING,
            f"Request rejected: {exc.message}",
            path=request.url.path,
            **exc.details,
        )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DocChatError, docchat_error_handler)
