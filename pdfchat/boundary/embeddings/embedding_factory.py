"""
Embedding provider factory.

Dependencies: langchain_core, langchain_google_genai, pdfchat.configs
System role: Embedding backend selection
"""

import logging

from langchain_core.embeddings import DeterministicFakeEmbedding

from pdfchat.boundary.embeddings.langchain_provider import LangChainEmbeddingProvider
from pdfchat.configs.embedding import EmbeddingSettings

logger = logging.getLogger(__name__)


def build_embedding_provider(settings: EmbeddingSettings) -> LangChainEmbeddingProvider:
    """
    Create the embedding provider selected by settings.

    Args:
        settings: Embedding settings

    Returns:
        LangChainEmbeddingProvider: Configured provider

    Raises:
        ValueError: If the provider name is unknown
    """
    if settings.provider == "google":
        from pdfchat.boundary.embeddings.gemini_embeddings import FixedDimensionEmbeddings

        embeddings = FixedDimensionEmbeddings(
            model=settings.model,
            output_dimensionality=settings.dimension,
        )
        return LangChainEmbeddingProvider(embeddings, model_name=settings.model)

    if settings.provider == "fake":
        logger.warning(
            f"{__name__}:build_embedding_provider - Using deterministic fake embeddings (local dev mode)"
        )
        return LangChainEmbeddingProvider(
            DeterministicFakeEmbedding(size=settings.dimension),
            model_name="deterministic-fake",
        )

    raise ValueError(
        f"Invalid EMBEDDING_PROVIDER: {settings.provider}. Must be 'google' or 'fake'."
    )
