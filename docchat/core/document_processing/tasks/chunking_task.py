"""
Chunking stage of session ingestion.

Cuts loaded documents into overlapping character windows. Every chunk
inherits the source file name and page of the document it came from,
plus its character offset within that document.

Dependencies: langchain_text_splitters
System role: Split stage of the ingestion pipeline
"""

import logging

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

logger = logging.getLogger(__name__)


class ChunkingTask:
    """Overlapping character chunking of session documents."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200) -> None:
        """
        Args:
            chunk_size: Upper bound of a chunk in characters
            chunk_overlap: Characters shared by neighbouring chunks of one document

        Raises:
            ValueError: When chunk_overlap >= chunk_size (splitting would not advance)
        """
        if chunk_overlap >= chunk_size:
            raise ValueError(
                f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})"
            )
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
        )

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split every document; documents never share a chunk.

        Returns:
            list[Document]: Chunks in document order, metadata copied from their document
        """
        chunks = self._splitter.split_documents(documents)
        logger.info(
            f"{__name__}:chunk - {len(documents)} documents -> {len(chunks)} chunks "
            f"(size={self.chunk_size}, overlap={self.chunk_overlap})"
        )
        return chunks
