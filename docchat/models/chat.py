"""
Chat domain models and schemas.

Request/response schemas for chat operations.

Dependencies: pydantic
System role: Chat API contracts
"""

from typing import Literal

from pydantic import BaseModel, Field

from docchat.models.citation import Citation


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    prompt: str = Field(min_length=1, description="User question")


class AskResult(BaseModel):
    """Generated answer with citations in retrieval order."""

    generated_text: str
    citations: list[Citation] = Field(default_factory=list)


class Message(BaseModel):
    """Single chat message as shown in the UI."""

    role: Literal["user", "assistant"] = Field(description="Message role")
    content: str = Field(description="Message content")
    citations: list[Citation] = Field(default_factory=list)
