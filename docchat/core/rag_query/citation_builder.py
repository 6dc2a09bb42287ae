"""
Citation extraction and formatting.

Builds citations from retrieved chunks in retrieval order. They describe
the context given to the model, not which sources the answer cited.

Dependencies: docchat.models, langchain_core
System role: Citation formatting business logic
"""

from langchain_core.documents import Document

from docchat.models.citation import Citation


class CitationBuilder:
    """Citation building business logic."""

    def build_citations(self, results: list[Document]) -> list[Citation]:
        """
        Build one citation per retrieved chunk.

        Args:
            results: Retrieved chunks

        Returns:
            list[Citation]: Citations in the same order as results
        """
        return [self.format_citation(self.extract_metadata(result)) for result in results]

    def extract_metadata(self, result: Document) -> dict:
        """Pick citation fields from a chunk's metadata."""
        metadata = result.metadata or {}
        return {"source": metadata.get("source", "unknown"), "page": metadata.get("page")}

    def format_citation(self, metadata: dict) -> Citation:
        page = metadata.get("page")
        return Citation(
            source=str(metadata["source"]),
            page=page if isinstance(page, int) else None,
        )
