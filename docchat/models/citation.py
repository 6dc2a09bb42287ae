"""
Citation domain model.

Represents a retrieved chunk's source. Citations reflect the retrieved
context, not confirmed usage by the generated answer.

Dependencies: pydantic
System role: Citation data structure
"""

from pydantic import BaseModel, Field


class Citation(BaseModel):
    """Citation model for source attribution."""

    source: str = Field(description="Source file name")
    page: int | None = Field(default=None, description="1-based page number in source")
