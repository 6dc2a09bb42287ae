"""
Vector index task using LangChain FAISS.

Builds one FAISS index per session and converts it to and from the two
artifact files stored alongside the session's documents.

Dependencies: langchain_community.vectorstores, faiss-cpu
System role: Embedding and indexing stage of the ingestion pipeline
"""

import logging
import shutil
import tempfile
from pathlib import Path

from langchain_community.vectorstores import FAISS
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from docchat.boundary.storage.base import INDEX_FILES, INDEX_NAME
from docchat.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class IndexTask:
    """Build, serialize and restore FAISS indexes."""

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Initialize index task.

        Args:
            embeddings: Embedding capability used for build and query
        """
        self._embeddings = embeddings

    def build(self, chunks: list[Document]) -> FAISS:
        """
        Embed chunks and build a single index.

        Raises:
            EmbeddingError: When embedding or index construction fails
        """
        if not chunks:
            raise EmbeddingError("No chunks to index")
        try:
            return FAISS.from_documents(chunks, self._embeddings)
        except Exception as e:
            raise EmbeddingError(
                "Failed to build the document index",
                details={"chunk_count": len(chunks), "error": str(e)},
            ) from e

    def serialize(self, index: FAISS) -> dict[str, bytes]:
        """
        Convert an index to its artifact files.

        Returns:
            dict[str, bytes]: File name to content for every index artifact

        Raises:
            EmbeddingError: When the index cannot be written
        """
        work_dir = Path(tempfile.mkdtemp(prefix="docchat_index_"))
        try:
            index.save_local(str(work_dir), index_name=INDEX_NAME)
            return {name: (work_dir / name).read_bytes() for name in INDEX_FILES}
        except Exception as e:
            raise EmbeddingError(
                "Failed to save the document index",
                details={"error": str(e)},
            ) from e
        finally:
            shutil.rmtree(work_dir, ignore_errors=True)

    def deserialize(self, artifacts: dict[str, bytes]) -> FAISS:
        """
        Restore an index from its artifact files.

        The docstore artifact is a pickle written by serialize(). Uploads
        cannot use index file names, so only the pipeline writes these files.

        Raises:
            EmbeddingError: When the artifacts cannot be loaded
        """
        work_dir = Path(tempfile.mkdtemp(prefix="docchat_index_"))
        try:
            for name, data in artifacts.items():
                (work_dir / name).write_bytes(data)
            return FAISS.load_local(
                str(work_dir),
                self._embeddings,
                index_name=INDEX_NAME,
                allow_dangerous_deserialization=True,
            )
        except Exception as e:
            raise EmbeddingError(
                "Failed to load the document index",
                details={"error": str(e)},
            ) from e
        finally:
            shutil.rmtree(work_dir, ignore_errors=True)
