"""
Dependency injection container.

Builds every component once from Settings and hands services to
FastAPI routes. This is the only module that reads settings.

Dependencies: docchat.configs, docchat.application, docchat.boundary, docchat.core
System role: DI container for service injection
"""

from docchat.application.services import (
    ChatService,
    DocumentService,
    FileService,
    SessionService,
)
from docchat.configs import Settings, get_settings


class ServiceCache:
    """Container for cached component instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._storage = None
        self._embeddings = None
        self._chat_model = None
        self._stage_tracker = None
        self._ingestion_pipeline = None
        self._query_engine = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def storage(self):
        """Get cached storage backend (selected once from STORAGE_ROOT)."""
        if self._storage is None:
            from docchat.boundary.storage import get_storage_backend
            self._storage = get_storage_backend(self.settings.storage)
        return self._storage

    @property
    def embeddings(self):
        """Get cached embedding model."""
        if self._embeddings is None:
            from docchat.boundary.llm import get_embeddings
            self._embeddings = get_embeddings(self.settings.model)
        return self._embeddings

    @property
    def chat_model(self):
        """Get cached chat model."""
        if self._chat_model is None:
            from docchat.boundary.llm import get_chat_model
            self._chat_model = get_chat_model(self.settings.model)
        return self._chat_model

    @property
    def stage_tracker(self):
        """Get cached ingestion stage tracker."""
        if self._stage_tracker is None:
            from docchat.core.document_processing import StageTracker
            self._stage_tracker = StageTracker()
        return self._stage_tracker

    @property
    def ingestion_pipeline(self):
        """Get cached ingestion pipeline."""
        if self._ingestion_pipeline is None:
            from docchat.core.document_processing import IngestionPipeline
            self._ingestion_pipeline = IngestionPipeline(
                storage=self.storage,
                embeddings=self.embeddings,
                settings=self.settings.ingestion,
                tracker=self.stage_tracker,
            )
        return self._ingestion_pipeline

    @property
    def query_engine(self):
        """Get cached query engine."""
        if self._query_engine is None:
            from docchat.core.rag_query import QueryEngine
            self._query_engine = QueryEngine(
                storage=self.storage,
                embeddings=self.embeddings,
                chat_model=self.chat_model,
                top_k=self.settings.model.top_k,
            )
        return self._query_engine

    def clear(self) -> None:
        """Clear all cached instances."""
        self._storage = None
        self._embeddings = None
        self._chat_model = None
        self._stage_tracker = None
        self._ingestion_pipeline = None
        self._query_engine = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_session_service() -> SessionService:
    """Get session service bound to the active storage backend."""
    cache = get_service_cache()
    return SessionService(storage=cache.storage, tracker=cache.stage_tracker)


def get_file_service() -> FileService:
    """Get file service with configured upload limits."""
    cache = get_service_cache()
    return FileService(
        storage=cache.storage,
        max_files=cache.settings.upload.max_files,
        max_file_size=cache.settings.upload.max_file_size,
    )


def get_document_service() -> DocumentService:
    """Get document service with the cached ingestion pipeline."""
    return DocumentService(pipeline=get_service_cache().ingestion_pipeline)


def get_chat_service() -> ChatService:
    """Get chat service with the cached query engine."""
    return ChatService(query_engine=get_service_cache().query_engine)
