"""
Ingestion pipeline orchestrator.

Coordinates load -> split -> embed -> index -> persist for one session.
Stages run strictly in sequence and the index is written only after
every earlier stage succeeded for the full file set.

Dependencies: All task modules, docchat.boundary.storage, docchat.configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
from collections.abc import Mapping

from fastapi.concurrency import run_in_threadpool
from langchain_core.embeddings import Embeddings

from docchat.boundary.storage.base import INDEX_FILES, StorageBackend
from docchat.configs.ingestion import IngestionSettings
from docchat.core.exceptions import DocChatError, EmbeddingError, LoadError, NotFoundError
from docchat.models.ingestion import IngestionResult, IngestionStage

from .stage_tracker import StageTracker
from .tasks import ChunkingTask, IndexTask, LoadingTask
from .tasks.loading_task import LoaderFactory

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Orchestrate session ingestion: load -> split -> embed+index -> persist."""

    def __init__(
        self,
        storage: StorageBackend,
        embeddings: Embeddings,
        settings: IngestionSettings,
        loaders: Mapping[str, LoaderFactory] | None = None,
        tracker: StageTracker | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            storage: Storage backend holding session files
            embeddings: Embedding capability
            settings: Chunking configuration
            loaders: Optional extension to loader registry
            tracker: Stage tracker shared with the session service
        """
        self._storage = storage
        self._loading_task = LoadingTask(loaders)
        self._chunking_task = ChunkingTask(
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
        )
        self._index_task = IndexTask(embeddings)
        self._tracker = tracker if tracker is not None else StageTracker()

    def stage(self, session_id: str) -> IngestionStage:
        """Current ingestion stage of a session (IDLE if never processed)."""
        return self._tracker.get(session_id)

    def _enter(self, session_id: str, stage: IngestionStage) -> None:
        self._tracker.set(session_id, stage)
        logger.info(f"{__name__}:process - session={session_id} stage={stage.value}")

    async def process(self, session_id: str) -> IngestionResult:
        """
        Rebuild the session's index from its current files.

        Args:
            session_id: Session to process

        Returns:
            IngestionResult: Counts and timing for the run

        Raises:
            LoadError: A file failed to load, or nothing loadable was found
            EmbeddingError: Index build or persist failed
            StorageError: Session files could not be read
        """
        start_time = time.perf_counter()

        try:
            self._enter(session_id, IngestionStage.LOADING)
            async with self._storage.materialize(session_id) as local_dir:
                filenames = sorted(await self._storage.list_files(session_id))
                documents, skipped = await run_in_threadpool(
                    self._loading_task.load, local_dir, filenames
                )
            if not documents:
                raise LoadError(
                    "No documents with a supported file type to process",
                    details={"session_id": session_id, "skipped": skipped},
                )

            self._enter(session_id, IngestionStage.SPLITTING)
            chunks = self._chunking_task.chunk(documents)

            self._enter(session_id, IngestionStage.EMBEDDING)
            index = await run_in_threadpool(self._index_task.build, chunks)

            self._enter(session_id, IngestionStage.INDEXING)
            artifacts = await run_in_threadpool(self._index_task.serialize, index)
            await self._persist(session_id, artifacts)

        except DocChatError as e:
            self._tracker.set(session_id, IngestionStage.FAILED)
            logger.error(f"{__name__}:process - FAILED session={session_id}: {e}")
            raise
        except Exception:
            self._tracker.set(session_id, IngestionStage.FAILED)
            logger.exception(f"{__name__}:process - FAILED session={session_id}")
            raise

        self._enter(session_id, IngestionStage.IDLE)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        loaded_files = len(filenames) - len(skipped)
        logger.info(
            f"{__name__}:process - Indexed {len(chunks)} chunks from {loaded_files} files "
            f"for session {session_id} in {elapsed_ms:.0f}ms"
        )
        return IngestionResult(
            session_id=session_id,
            file_count=loaded_files,
            skipped_files=skipped,
            chunk_count=len(chunks),
            processing_time_ms=elapsed_ms,
        )

    async def _persist(self, session_id: str, artifacts: dict[str, bytes]) -> None:
        """
        Write index artifacts into the session, replacing any previous index.

        Artifacts are written one by one. If a write fails, the previous
        index is restored; if that is not possible, every artifact is
        removed so the session reports no index instead of a mismatched one.

        Raises:
            EmbeddingError: When the new index could not be stored
        """
        try:
            previous = await self._read_index(session_id)
        except DocChatError as e:
            raise EmbeddingError(
                "Failed to store the document index",
                details={"session_id": session_id, "error": e.message},
            ) from e

        try:
            for name, data in artifacts.items():
                await self._storage.write_file(session_id, name, data)
        except DocChatError as e:
            await self._rollback(session_id, previous)
            raise EmbeddingError(
                "Failed to store the document index",
                details={"session_id": session_id, "error": e.message},
            ) from e

    async def _read_index(self, session_id: str) -> dict[str, bytes]:
        """Current index artifacts; empty unless every artifact exists."""
        previous = {}
        for name in INDEX_FILES:
            if not await self._storage.file_exists(session_id, name):
                return {}
            previous[name] = await self._storage.read_file(session_id, name)
        return previous

    async def _rollback(self, session_id: str, previous: dict[str, bytes]) -> None:
        if previous:
            try:
                for name, data in previous.items():
                    await self._storage.write_file(session_id, name, data)
                logger.warning(f"{__name__}:_rollback - Restored previous index for {session_id}")
                return
            except DocChatError as e:
                logger.error(f"{__name__}:_rollback - Restore FAILED for {session_id}: {e}")

        for name in INDEX_FILES:
            try:
                await self._storage.delete_file(session_id, name)
            except NotFoundError:
                continue
            except DocChatError as e:
                logger.error(f"{__name__}:_rollback - Could not remove {name} for {session_id}: {e}")
        logger.warning(f"{__name__}:_rollback - Removed partial index for {session_id}")
