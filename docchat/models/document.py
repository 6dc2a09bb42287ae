"""
File and upload models.

Dependencies: pydantic
System role: File manager contracts
"""

from pydantic import BaseModel, Field


class UploadedFile(BaseModel):
    """A file selected for upload."""

    name: str = Field(description="File name within the session")
    content: bytes = Field(repr=False, description="Raw file bytes")
    overwrites: bool = Field(
        default=False,
        description="A file with this name already exists in the session",
    )

    @property
    def size_bytes(self) -> int:
        """File size in bytes."""
        return len(self.content)


class FailedUpload(BaseModel):
    """A file whose upload failed, with the user-facing reason."""

    name: str
    error: str


class UploadReport(BaseModel):
    """Outcome of uploading a batch one file at a time."""

    uploaded: list[str] = Field(default_factory=list)
    failed: list[FailedUpload] = Field(default_factory=list)
    skipped: list[str] = Field(
        default_factory=list,
        description="Files rejected before upload (over the size limit)",
    )


class SessionFilesResponse(BaseModel):
    """Response schema listing a session's files."""

    session_id: str
    files: list[str]
