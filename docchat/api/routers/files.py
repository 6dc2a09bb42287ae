"""
Session file API endpoints.

Routes:
- GET /sessions/{session_id}/files - List user files
- POST /sessions/{session_id}/files - Upload a batch of files (multipart)
- DELETE /sessions/{session_id}/files/{filename} - Delete one file

Dependencies: fastapi, docchat.application.services
System role: File management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from docchat.api.deps import get_file_service
from docchat.application.services import FileService
from docchat.models.document import SessionFilesResponse, UploadedFile, UploadReport

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions/{session_id}/files", tags=["files"])


@router.get("", response_model=SessionFilesResponse)
async def list_session_files(
    session_id: str,
    file_service: FileService = Depends(get_file_service),
) -> SessionFilesResponse:
    """List a session's files, sorted by name."""
    files = await file_service.list_files(session_id)
    return SessionFilesResponse(session_id=session_id, files=sorted(files))


@router.post("", response_model=UploadReport)
async def upload_files(
    session_id: str,
    files: list[UploadFile] = File(...),
    file_service: FileService = Depends(get_file_service),
) -> UploadReport:
    """
    Upload files one at a time.

    Files over the size limit are skipped; a failed upload does not stop
    the rest of the batch.

    Raises:
        TooManyFilesError (400): More files than the batch limit
    """
    selected = [
        UploadedFile(name=upload.filename or "", content=await upload.read())
        for upload in files
    ]

    batch = await file_service.new_batch(session_id)
    skipped = batch.add(selected)

    def _log_progress(done: int, total: int) -> None:
        logger.info(f"{__name__}:upload_files - {session_id}: {done}/{total} uploaded")

    report = await file_service.upload_batch(session_id, batch, on_progress=_log_progress)
    report.skipped = skipped
    return report


@router.delete("/{filename}", status_code=204)
async def delete_file(
    session_id: str,
    filename: str,
    file_service: FileService = Depends(get_file_service),
) -> None:
    """
    Delete one file.

    Raises:
        NotFoundError (404): File does not exist
    """
    await file_service.delete_file(session_id, filename)
