"""
Observability module.

Provides logging configuration, structured logging helpers, correlation
ID tracking and request middleware.
"""

from docchat.observability.correlation import get_correlation_id, set_correlation_id
from docchat.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
