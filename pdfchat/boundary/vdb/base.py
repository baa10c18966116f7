"""
Vector index capability interface.

Dependencies: abc, pdfchat.boundary.vdb.vector_schemas
System role: Contract between the pipelines and any vector database adapter
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pdfchat.boundary.vdb.vector_schemas import Distance, IndexedPoint, SearchResult


class VectorIndex(ABC):
    """Store vectors with payload and answer nearest-neighbour queries.

    Implementations raise VectorIndexError for backend failures.
    """

    @abstractmethod
    async def ensure_collection(
        self,
        name: str,
        dimension: int,
        distance: Distance = Distance.COSINE,
    ) -> bool:
        """Create the collection if absent.

        Safe to call concurrently: a collection created by a racing caller
        counts as success.

        Returns:
            bool: True if this call created the collection
        """

    @abstractmethod
    async def upsert(
        self,
        name: str,
        points: Sequence[IndexedPoint],
        durable: bool = True,
    ) -> None:
        """Insert or overwrite points. With durable=True, returns once searchable."""

    @abstractmethod
    async def search(
        self,
        name: str,
        vector: Sequence[float],
        top_k: int = 5,
        with_payload: bool = True,
    ) -> list[SearchResult]:
        """Return up to top_k nearest points, descending by score."""

    async def close(self) -> None:
        """Release client resources."""
        return None
