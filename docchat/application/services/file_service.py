"""
File service orchestrator.

Lists, uploads and deletes session files. Count and size limits are
enforced before anything reaches storage.

Dependencies: docchat.boundary.storage, docchat.core, docchat.models
System role: File management use case orchestration
"""

import logging
from collections.abc import Callable, Iterable

from docchat.boundary.storage.base import StorageBackend
from docchat.core.exceptions import DocChatError, FileTooLargeError, TooManyFilesError
from docchat.core.naming import validate_file_name, validate_name
from docchat.models.document import FailedUpload, UploadedFile, UploadReport

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class UploadBatch:
    """Files selected for upload but not yet stored."""

    def __init__(
        self,
        max_files: int = 40,
        max_file_size: int = 52428800,
        existing_files: Iterable[str] = (),
    ) -> None:
        """
        Initialize an empty batch.

        Args:
            max_files: Maximum number of pending files
            max_file_size: Maximum size of one file in bytes
            existing_files: Files already stored in the session (overwrite detection)
        """
        self._max_files = max_files
        self._max_file_size = max_file_size
        self._existing = set(existing_files)
        self._files: list[UploadedFile] = []

    @property
    def files(self) -> list[UploadedFile]:
        return list(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def add(self, files: list[UploadedFile]) -> list[str]:
        """
        Add newly selected files to the batch.

        The count limit applies to pending files only, not to files already
        stored in the session.

        Args:
            files: Newly selected files

        Returns:
            list[str]: Names of files skipped for exceeding the size limit

        Raises:
            TooManyFilesError: If pending + selected exceeds max_files (nothing added)
            InvalidNameError: If a selected name is unusable or reserved (nothing added)
        """
        requested = len(self._files) + len(files)
        if requested > self._max_files:
            raise TooManyFilesError(requested, self._max_files)
        for file in files:
            validate_file_name(file.name)

        skipped = []
        for file in files:
            if file.size_bytes > self._max_file_size:
                skipped.append(file.name)
                continue
            self._files.append(
                file.model_copy(update={"overwrites": file.name in self._existing})
            )
        return skipped

    def remove(self, name: str) -> None:
        """Drop a pending file by name."""
        self._files = [f for f in self._files if f.name != name]

    def clear(self) -> None:
        self._files = []


class FileService:
    """File manager for session files."""

    def __init__(self, storage: StorageBackend, max_files: int = 40, max_file_size: int = 52428800) -> None:
        """
        Initialize file service.

        Args:
            storage: Active storage backend
            max_files: Batch file count limit
            max_file_size: Per-file size limit in bytes
        """
        self._storage = storage
        self._max_files = max_files
        self._max_file_size = max_file_size

    async def list_files(self, session_id: str) -> set[str]:
        """
        List user files of a session.

        Returns:
            set[str]: File names; empty when the session has no files or does not exist
        """
        validate_name(session_id)
        return await self._storage.list_files(session_id)

    async def new_batch(self, session_id: str) -> UploadBatch:
        """Start an upload batch aware of the session's current files."""
        return UploadBatch(
            max_files=self._max_files,
            max_file_size=self._max_file_size,
            existing_files=await self.list_files(session_id),
        )

    async def upload(self, session_id: str, file: UploadedFile) -> None:
        """
        Store one file, overwriting a same-named file.

        Raises:
            InvalidNameError: Unusable session id, unusable or reserved file name
            FileTooLargeError: File exceeds max_file_size (nothing written)
        """
        validate_name(session_id)
        validate_file_name(file.name)
        if file.size_bytes > self._max_file_size:
            raise FileTooLargeError(file.name, file.size_bytes, self._max_file_size)

        await self._storage.write_file(session_id, file.name, file.content)
        logger.info(f"{__name__}:upload - Uploaded {file.name} to session {session_id}")

    async def upload_batch(
        self,
        session_id: str,
        batch: UploadBatch,
        on_progress: ProgressCallback | None = None,
    ) -> UploadReport:
        """
        Upload pending files one at a time.

        A failed file is reported and does not stop the remaining uploads.
        The batch is cleared afterwards.

        Args:
            session_id: Target session
            batch: Pending files
            on_progress: Called with (uploaded_count, total) after each success

        Returns:
            UploadReport: Uploaded and failed file names
        """
        report = UploadReport()
        files = batch.files
        total = len(files)

        for file in files:
            try:
                await self.upload(session_id, file)
            except DocChatError as e:
                logger.warning(f"{__name__}:upload_batch - Failed to upload {file.name}: {e}")
                report.failed.append(FailedUpload(name=file.name, error=e.message))
                continue
            report.uploaded.append(file.name)
            if on_progress is not None:
                on_progress(len(report.uploaded), total)

        batch.clear()
        return report

    async def delete_file(self, session_id: str, filename: str) -> None:
        """
        Delete one file.

        Raises:
            NotFoundError: File does not exist
        """
        validate_name(session_id)
        validate_file_name(filename)
        await self._storage.delete_file(session_id, filename)
        logger.info(f"{__name__}:delete_file - Deleted {filename} from session {session_id}")
