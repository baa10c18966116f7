"""
LangChain embeddings adapter.

Wraps any langchain_core Embeddings implementation behind EmbeddingProvider
and normalizes its failures into EmbeddingError.

Dependencies: langchain_core
System role: Embedding adapter used by ingestion and query pipelines
"""

import logging
from collections.abc import Sequence

from langchain_core.embeddings import Embeddings

from pdfchat.boundary.embeddings.base import EmbeddingProvider
from pdfchat.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class LangChainEmbeddingProvider(EmbeddingProvider):
    """EmbeddingProvider over a LangChain Embeddings model."""

    def __init__(self, embeddings: Embeddings, model_name: str | None = None) -> None:
        """
        Initialize adapter.

        Args:
            embeddings: LangChain embeddings model
            model_name: Model identifier for logs and error context
        """
        self._embeddings = embeddings
        self.model_name = model_name or type(embeddings).__name__

    async def embed(self, texts: Sequence[str]) -> list[list[float]]:
        """
        Embed a batch of texts.

        Args:
            texts: Texts to embed, must be non-empty

        Returns:
            list[list[float]]: Vectors in input order

        Raises:
            EmbeddingError: On empty input, provider failure, or malformed output
        """
        if not texts:
            raise EmbeddingError("Cannot embed an empty batch", details={"model": self.model_name})

        try:
            vectors = await self._embeddings.aembed_documents(list(texts))
        except Exception as e:
            logger.error(
                f"{__name__}:embed - Provider failed: {type(e).__name__}: {e}",
                extra={"model": self.model_name, "batch_size": len(texts)},
            )
            raise EmbeddingError(
                f"Failed to generate embeddings: {e}",
                details={"model": self.model_name, "batch_size": len(texts)},
            ) from e

        if len(vectors) != len(texts):
            raise EmbeddingError(
                f"Expected {len(texts)} embeddings, got {len(vectors)}",
                details={"model": self.model_name},
            )
        if any(len(vector) == 0 for vector in vectors):
            raise EmbeddingError(
                "Embedding provider returned an empty vector",
                details={"model": self.model_name},
            )

        return [list(vector) for vector in vectors]
