"""
Ingestion pipeline models.

Dependencies: pydantic, enum
System role: Ingestion state and result contracts
"""

from enum import Enum

from pydantic import BaseModel, Field


class IngestionStage(str, Enum):
    """Position of a session in the ingestion state machine."""

    IDLE = "idle"
    LOADING = "loading"
    SPLITTING = "splitting"
    EMBEDDING = "embedding"
    INDEXING = "indexing"
    FAILED = "failed"


class IngestionResult(BaseModel):
    """Result of one ingestion run over a session."""

    session_id: str = Field(description="Processed session")
    file_count: int = Field(description="Number of files loaded")
    skipped_files: list[str] = Field(
        default_factory=list,
        description="Files without a registered parser",
    )
    chunk_count: int = Field(description="Number of chunks indexed")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
