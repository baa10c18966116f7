"""
Capability container.

Holds the explicitly constructed provider objects shared by the ingestion
worker and the query engine, and closes them together on shutdown.

Dependencies: pdfchat.boundary, pdfchat.configs
System role: Lifecycle owner for external clients
"""

import logging
from dataclasses import dataclass

from pdfchat.boundary.embeddings.base import EmbeddingProvider
from pdfchat.boundary.llm.base import GenerationProvider
from pdfchat.boundary.vdb.base import VectorIndex
from pdfchat.configs.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class Capabilities:
    """Embedding, vector index and generation capabilities for one process."""

    embedding_provider: EmbeddingProvider
    vector_index: VectorIndex
    generation_provider: GenerationProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings, with_generation: bool = True) -> "Capabilities":
        """
        Open every capability configured in settings.

        Args:
            settings: Application settings
            with_generation: Build the generation provider (ingestion does not need it)

        Returns:
            Capabilities: Opened capabilities
        """
        from pdfchat.boundary.embeddings.embedding_factory import build_embedding_provider
        from pdfchat.boundary.vdb.vector_index_factory import build_vector_index

        generation_provider = None
        if with_generation:
            from pdfchat.boundary.llm.llm_factory import build_generation_provider

            generation_provider = build_generation_provider(settings.generation)

        return cls(
            embedding_provider=build_embedding_provider(settings.embedding),
            vector_index=build_vector_index(settings.vector_store),
            generation_provider=generation_provider,
        )

    async def aclose(self) -> None:
        """Close every capability, logging failures without stopping the others."""
        for name in ("embedding_provider", "vector_index", "generation_provider"):
            capability = getattr(self, name)
            if capability is None:
                continue
            try:
                await capability.close()
            except Exception as e:
                logger.warning(f"{__name__}:aclose - Failed to close {name}: {type(e).__name__}: {e}")
