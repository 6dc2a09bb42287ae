"""
Model provider factory.

Builds the opaque embedding and generation capabilities as LangChain
objects for the configured provider.

Dependencies: langchain_google_genai, langchain_aws, docchat.configs
System role: Embedding/chat model instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel

from docchat.configs.llm import ModelSettings

logger = logging.getLogger(__name__)


def get_embeddings(settings: ModelSettings) -> Embeddings:
    """
    Create the embedding model for the configured provider.

    Args:
        settings: Model settings

    Returns:
        Embeddings: LangChain embeddings implementation

    Raises:
        ValueError: If the provider is unknown
    """
    if settings.provider == "google":
        from langchain_google_genai import GoogleGenerativeAIEmbeddings

        logger.info(
            f"{__name__}:get_embeddings - Creating Gemini embeddings model={settings.embedding_model}"
        )
        return GoogleGenerativeAIEmbeddings(model=settings.embedding_model)

    if settings.provider == "bedrock":
        from langchain_aws import BedrockEmbeddings

        logger.info(
            f"{__name__}:get_embeddings - Creating Bedrock embeddings model={settings.embedding_model}"
        )
        return BedrockEmbeddings(
            model_id=settings.embedding_model,
            region_name=settings.region,
        )

    raise ValueError(
        f"Invalid MODEL_PROVIDER: {settings.provider}. Must be 'google' or 'bedrock'."
    )


def get_chat_model(settings: ModelSettings) -> BaseChatModel:
    """
    Create the generation model for the configured provider.

    Args:
        settings: Model settings

    Returns:
        BaseChatModel: LangChain chat model

    Raises:
        ValueError: If the provider is unknown
    """
    if settings.provider == "google":
        from langchain_google_genai import ChatGoogleGenerativeAI

        logger.info(f"{__name__}:get_chat_model - Creating Gemini chat model={settings.chat_model}")
        return ChatGoogleGenerativeAI(
            model=settings.chat_model,
            temperature=settings.temperature,
        )

    if settings.provider == "bedrock":
        from langchain_aws import ChatBedrockConverse

        logger.info(f"{__name__}:get_chat_model - Creating Bedrock chat model={settings.chat_model}")
        return ChatBedrockConverse(
            model=settings.chat_model,
            region_name=settings.region,
            temperature=settings.temperature,
        )

    raise ValueError(
        f"Invalid MODEL_PROVIDER: {settings.provider}. Must be 'google' or 'bedrock'."
    )
