"""
Document loading task using LangChain document loaders.

Converts session files into LangChain Documents, choosing a loader by
file extension. Files without a registered loader are skipped.

Dependencies: langchain_community.document_loaders
System role: First stage of the ingestion pipeline
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import partial
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader, TextLoader
from langchain_core.document_loaders import BaseLoader
from langchain_core.documents import Document

from docchat.core.exceptions import LoadError

logger = logging.getLogger(__name__)

LoaderFactory = Callable[[str], BaseLoader]

DEFAULT_LOADERS: dict[str, LoaderFactory] = {
    ".txt": partial(TextLoader, encoding="utf-8"),
    ".md": partial(TextLoader, encoding="utf-8"),
    ".pdf": PyPDFLoader,
}


class LoadingTask:
    """Load session files into LangChain Documents."""

    def __init__(self, loaders: Mapping[str, LoaderFactory] | None = None) -> None:
        """
        Initialize loading task with an extension registry.

        Args:
            loaders: Lower-case extension (".pdf") to loader factory mapping
        """
        self._loaders = dict(loaders if loaders is not None else DEFAULT_LOADERS)

    @property
    def supported_extensions(self) -> set[str]:
        """Extensions with a registered loader."""
        return set(self._loaders)

    def load(
        self,
        directory: Path,
        filenames: Iterable[str],
    ) -> tuple[list[Document], list[str]]:
        """
        Load every supported file in a directory.

        Args:
            directory: Local directory holding the files
            filenames: Names of the files to load

        Returns:
            tuple[list[Document], list[str]]: Loaded documents and skipped file names

        Raises:
            LoadError: When a registered loader fails; no partial result is returned
        """
        documents: list[Document] = []
        skipped: list[str] = []

        for filename in filenames:
            factory = self._loaders.get(Path(filename).suffix.lower())
            if factory is None:
                logger.info(f"{__name__}:load - Skipping {filename}: no loader registered")
                skipped.append(filename)
                continue

            try:
                loaded = factory(str(directory / filename)).load()
            except Exception as e:
                raise LoadError(
                    f"Failed to load '{filename}'",
                    filename=filename,
                    details={"error": str(e)},
                ) from e

            documents.extend(self._normalize(doc, filename) for doc in loaded)
            logger.debug(f"{__name__}:load - Loaded {filename} ({len(loaded)} documents)")

        return documents, skipped

    def _normalize(self, document: Document, filename: str) -> Document:
        """
        Replace loader-specific provenance with the session file name.

        Loaders report the absolute (possibly temporary) path as source and
        0-based page numbers; citations need the file name and 1-based pages.
        """
        metadata = dict(document.metadata)
        metadata["source"] = filename
        page = metadata.get("page")
        if isinstance(page, int):
            metadata["page"] = page + 1
        return Document(page_content=document.page_content, metadata=metadata)
