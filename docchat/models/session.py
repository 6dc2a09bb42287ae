"""
Session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field


class Session(BaseModel):
    """A named workspace; its id equals its name."""

    id: str = Field(description="Session identifier (same as name)")
    name: str = Field(description="Human-readable session name")
    created_at: datetime = Field(description="Creation time reported by the backend")


class CreateSessionRequest(BaseModel):
    """Request schema for creating a new session."""

    name: str = Field(description="Unique session name")


class DeleteSessionResponse(BaseModel):
    """Response schema for session deletion."""

    deleted: bool
