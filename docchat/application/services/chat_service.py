"""
Chat service orchestrator.

Answers user prompts against a session's documents.

Dependencies: docchat.core.rag_query
System role: Chat use case orchestration
"""

from docchat.core.naming import validate_name
from docchat.core.rag_query import QueryEngine
from docchat.models.chat import AskResult


class ChatService:
    """Chat orchestrator over the query engine."""

    def __init__(self, query_engine: QueryEngine) -> None:
        self._query_engine = query_engine

    async def ask(self, session_id: str, prompt: str) -> AskResult:
        """
        Answer a prompt with citations.

        Raises:
            InvalidNameError: Unusable session id
            NoIndexError: Session has not been processed
            ExecutionError: Generation failed
        """
        validate_name(session_id)
        return await self._query_engine.ask(session_id, prompt)
