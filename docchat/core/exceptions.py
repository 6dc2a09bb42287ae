"""
Exception hierarchy for the docchat application.

Every exception carries a short user-facing message plus optional details
for logs. The message never contains stack traces or filesystem paths.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocChatError(Exception):
    """Base exception for all docchat errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidNameError(DocChatError):
    """Raised when a session or file name fails validation."""

    def __init__(
        self,
        name: str,
        details: dict[str, Any] | None = None,
        reserved: bool = False,
    ) -> None:
        details = details or {}
        details["name"] = name
        if reserved:
            message = f"'{name}' is reserved for the document index. Please rename the file."
        else:
            message = "Invalid name. Please avoid special characters and empty names."
        super().__init__(message, details)


class DuplicateNameError(DocChatError):
    """Raised when a session with the same name already exists."""

    def __init__(self, name: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["name"] = name
        super().__init__(
            f"A session named '{name}' already exists. Please choose a different name.",
            details,
        )


class NotFoundError(DocChatError):
    """Raised when a session file does not exist."""

    def __init__(
        self,
        session_id: str,
        filename: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            session_id: Session that was addressed
            filename: Missing file, if the error concerns a file
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        if filename:
            details["filename"] = filename
            message = f"File '{filename}' not found in session '{session_id}'"
        else:
            message = f"Session '{session_id}' not found"
        super().__init__(message, details)


class FileTooLargeError(DocChatError):
    """Raised when an uploaded file exceeds the configured size limit."""

    def __init__(self, filename: str, size: int, limit: int) -> None:
        super().__init__(
            f"'{filename}' exceeds the {limit // 1048576}MB limit.",
            {"filename": filename, "size": size, "limit": limit},
        )


class TooManyFilesError(DocChatError):
    """Raised when a pending batch would exceed the configured file count."""

    def __init__(self, requested: int, limit: int) -> None:
        super().__init__(
            f"You can only upload a maximum of {limit} files.",
            {"requested": requested, "limit": limit},
        )


class LoadError(DocChatError):
    """Raised when a document cannot be loaded during ingestion."""

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if filename:
            details["filename"] = filename
        super().__init__(message, details)


class EmbeddingError(DocChatError):
    """Raised when the vector index cannot be built or persisted."""

    pass


class NoIndexError(DocChatError):
    """Raised when a session is queried before it has been processed."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            f"Session '{session_id}' has no processed documents. Process the files first.",
            {"session_id": session_id},
        )


class ExecutionError(DocChatError):
    """Raised when retrieval or generation fails while answering a prompt."""

    pass


class StorageError(DocChatError):
    """Raised when a storage backend operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (list, write, delete, read)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
