"""
Embedding generation task.

Embeds every chunk of a document in one batch call and pairs each vector
with its chunk payload.

Dependencies: pdfchat.boundary.embeddings, pdfchat.boundary.vdb
System role: Third stage of document ingestion pipeline
"""

import logging

from pdfchat.boundary.embeddings.base import EmbeddingProvider
from pdfchat.boundary.vdb.vector_schemas import ChunkPayload, IndexedPoint
from pdfchat.core.exceptions import EmbeddingError

from ..models import Chunk

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Turn chunks into IndexedPoints using an EmbeddingProvider."""

    def __init__(self, provider: EmbeddingProvider) -> None:
        """
        Initialize embedding task.

        Args:
            provider: Embedding capability
        """
        self._provider = provider

    async def embed(self, chunks: list[Chunk], source: str) -> list[IndexedPoint]:
        """
        Generate embeddings for chunks.

        Args:
            chunks: Chunks of one document, in order
            source: Storage location recorded in each payload

        Returns:
            list[IndexedPoint]: One point per chunk, same order

        Raises:
            EmbeddingError: When the provider fails or returns unusable vectors
        """
        if not chunks:
            return []

        document_id = chunks[0].document_id
        try:
            vectors = await self._provider.embed([chunk.text for chunk in chunks])
        except EmbeddingError as e:
            e.details.setdefault("document_id", document_id)
            raise

        if len(vectors) != len(chunks):
            raise EmbeddingError(
                f"Embedding provider returned {len(vectors)} vectors for {len(chunks)} chunks",
                document_id,
            )

        logger.info(
            f"{__name__}:embed - Embedded {len(chunks)} chunks",
            extra={"document_id": document_id, "dimension": len(vectors[0])},
        )

        return [
            IndexedPoint(
                id=chunk.point_id,
                vector=vector,
                payload=ChunkPayload(
                    text=chunk.text,
                    chunk_index=chunk.index,
                    source=source,
                    document_id=chunk.document_id,
                ),
            )
            for chunk, vector in zip(chunks, vectors)
        ]
