"""
Vector index upload task.

Ensures the shared collection exists, then writes a document's points with a
durable upsert so completion implies searchability.

Dependencies: pdfchat.boundary.vdb
System role: Final stage of document ingestion pipeline
"""

import logging

from pdfchat.boundary.vdb.base import VectorIndex
from pdfchat.boundary.vdb.vector_schemas import Distance, IndexedPoint
from pdfchat.core.exceptions import VectorIndexError

logger = logging.getLogger(__name__)


class IndexingTask:
    """Upload IndexedPoints into one collection."""

    def __init__(
        self,
        vector_index: VectorIndex,
        collection_name: str,
        dimension: int,
        distance: Distance = Distance.COSINE,
    ) -> None:
        """
        Initialize indexing task.

        Args:
            vector_index: Vector index capability
            collection_name: Target collection
            dimension: Required vector dimension
            distance: Collection distance metric

        Raises:
            ValueError: When collection_name is empty
        """
        if not collection_name:
            raise ValueError("collection_name cannot be empty")

        self.collection_name = collection_name
        self.dimension = dimension
        self.distance = distance
        self._index = vector_index

    async def index(self, points: list[IndexedPoint], document_id: str) -> int:
        """
        Ensure the collection and upsert points.

        Args:
            points: Points to store
            document_id: Owning document, for error attribution

        Returns:
            int: Number of points written

        Raises:
            VectorIndexError: On dimension mismatch or index failure
        """
        for point in points:
            if len(point.vector) != self.dimension:
                raise VectorIndexError(
                    f"Vector dimension {len(point.vector)} does not match "
                    f"collection dimension {self.dimension}",
                    operation="upsert",
                    document_id=document_id,
                    details={"point_id": point.id},
                )

        try:
            await self._index.ensure_collection(
                self.collection_name,
                self.dimension,
                self.distance,
            )
            await self._index.upsert(self.collection_name, points, durable=True)
        except VectorIndexError as e:
            e.details.setdefault("document_id", document_id)
            raise

        logger.info(
            f"{__name__}:index - Upserted {len(points)} points",
            extra={"document_id": document_id, "collection": self.collection_name},
        )
        return len(points)
