"""
Model provider configuration.

Manages embedding and generation model settings for both supported
providers (Google Gemini, Amazon Bedrock).

Dependencies: pydantic, pydantic_settings
System role: Embedding/generation capability configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ModelSettings(BaseSettings):
    """Embedding and chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MODEL_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: Literal["google", "bedrock"] = Field(
        default="google",
        description="Model provider: 'google' (Gemini) or 'bedrock' (AWS)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID for the selected provider",
    )
    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model ID for the selected provider",
    )
    temperature: float = Field(default=0.0, description="Generation temperature")
    region: str = Field(
        default="us-east-1",
        description="AWS region for Bedrock (ignored by Google)",
    )
    top_k: int = Field(default=5, gt=0, description="Number of chunks retrieved per query")
