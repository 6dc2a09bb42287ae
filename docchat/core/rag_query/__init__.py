"""
Retrieval-augmented query.

Exports: QueryEngine, CitationBuilder, build_prompt
"""

from .citation_builder import CitationBuilder
from .prompt import RAG_PROMPT, build_prompt
from .query_engine import QueryEngine

__all__ = ["CitationBuilder", "QueryEngine", "RAG_PROMPT", "build_prompt"]
