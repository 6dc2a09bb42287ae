"""
Session ingestion pipeline.

Exports: IngestionPipeline, StageTracker
"""

from .entrypoint import IngestionPipeline
from .stage_tracker import StageTracker

__all__ = ["IngestionPipeline", "StageTracker"]
