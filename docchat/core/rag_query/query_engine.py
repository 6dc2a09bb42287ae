"""
Session query engine.

Answers a prompt against a session's persisted index: retrieve top-k
chunks, assemble the grounded prompt, generate, and attach citations.

Dependencies: langchain_core, docchat.core.document_processing, docchat.boundary.storage
System role: RAG query orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool
from langchain_community.vectorstores import FAISS
from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel

from docchat.boundary.storage.base import INDEX_FILES, StorageBackend
from docchat.core.document_processing.tasks import IndexTask
from docchat.core.exceptions import EmbeddingError, ExecutionError, NoIndexError, NotFoundError
from docchat.core.rag_query.citation_builder import CitationBuilder
from docchat.core.rag_query.prompt import build_prompt
from docchat.models.chat import AskResult

logger = logging.getLogger(__name__)


class QueryEngine:
    """Retrieval-then-generate over one session's index."""

    def __init__(
        self,
        storage: StorageBackend,
        embeddings: Embeddings,
        chat_model: BaseChatModel,
        top_k: int = 5,
    ) -> None:
        """
        Initialize query engine.

        Args:
            storage: Storage backend holding the persisted index
            embeddings: Embedding capability (must match the one used for ingestion)
            chat_model: Generation capability
            top_k: Number of chunks to retrieve
        """
        self._storage = storage
        self._chat_model = chat_model
        self._top_k = top_k
        self._index_task = IndexTask(embeddings)
        self._citation_builder = CitationBuilder()

    async def has_index(self, session_id: str) -> bool:
        """Whether every index artifact exists for the session."""
        for name in INDEX_FILES:
            if not await self._storage.file_exists(session_id, name):
                return False
        return True

    async def _load_index(self, session_id: str) -> FAISS:
        if not await self.has_index(session_id):
            raise NoIndexError(session_id)
        try:
            artifacts = {
                name: await self._storage.read_file(session_id, name) for name in INDEX_FILES
            }
            return await run_in_threadpool(self._index_task.deserialize, artifacts)
        except (NotFoundError, EmbeddingError) as e:
            # Deleted or corrupted between the check and the load
            raise NoIndexError(session_id) from e

    async def ask(self, session_id: str, prompt: str) -> AskResult:
        """
        Answer a prompt from the session's documents.

        Args:
            session_id: Session to query
            prompt: User question

        Returns:
            AskResult: Generated text and citations in retrieval order

        Raises:
            NoIndexError: Session has not been processed
            ExecutionError: Retrieval or generation failed
        """
        logger.info(f"{__name__}:ask - START session_id={session_id}, prompt_len={len(prompt)}")
        index = await self._load_index(session_id)

        try:
            results = await run_in_threadpool(index.similarity_search, prompt, k=self._top_k)
        except Exception as e:
            raise ExecutionError(
                f"Failed to execute prompt: {e}",
                details={"session_id": session_id, "stage": "retrieve"},
            ) from e
        logger.info(f"{__name__}:ask - Retrieved {len(results)} chunks")

        full_prompt = build_prompt(results, prompt)

        try:
            response = await self._chat_model.ainvoke(full_prompt)
        except Exception as e:
            logger.error(f"{__name__}:ask - Generation FAILED: {type(e).__name__}: {e}")
            raise ExecutionError(
                f"Failed to execute prompt: {e}",
                details={"session_id": session_id, "stage": "generate"},
            ) from e

        generated_text = self._content_to_text(response.content)
        citations = self._citation_builder.build_citations(results)
        logger.info(
            f"{__name__}:ask - END answer_len={len(generated_text)}, citations={len(citations)}"
        )
        return AskResult(generated_text=generated_text, citations=citations)

    @staticmethod
    def _content_to_text(content) -> str:
        # Some providers return a list of content blocks instead of a string
        if isinstance(content, list):
            return "".join(
                item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
                for item in content
            )
        return str(content)
