"""
Task modules for the ingestion pipeline.

Exports: LoadingTask, ChunkingTask, IndexTask
"""

from .chunking_task import ChunkingTask
from .index_task import IndexTask
from .loading_task import DEFAULT_LOADERS, LoadingTask

__all__ = [
    "ChunkingTask",
    "DEFAULT_LOADERS",
    "IndexTask",
    "LoadingTask",
]
