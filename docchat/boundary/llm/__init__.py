"""
Model provider boundary.

Exports: get_embeddings, get_chat_model
"""

from .model_factory import get_chat_model, get_embeddings

__all__ = ["get_chat_model", "get_embeddings"]
