"""
Qdrant vector index adapter.

Implements VectorIndex over qdrant_client.AsyncQdrantClient. Works against a
Qdrant server or the client's local mode (location=":memory:").

Dependencies: qdrant_client
System role: Production vector store (Qdrant)
"""

import logging
from collections.abc import Sequence

from qdrant_client import AsyncQdrantClient
from qdrant_client.http import models as qdrant_models
from qdrant_client.http.exceptions import UnexpectedResponse

from pdfchat.boundary.vdb.base import VectorIndex
from pdfchat.boundary.vdb.vector_schemas import Distance, IndexedPoint, SearchResult
from pdfchat.core.exceptions import VectorIndexError

logger = logging.getLogger(__name__)

_QDRANT_DISTANCES: dict[Distance, qdrant_models.Distance] = {
    Distance.COSINE: qdrant_models.Distance.COSINE,
    Distance.DOT: qdrant_models.Distance.DOT,
    Distance.EUCLID: qdrant_models.Distance.EUCLID,
}


def _is_already_exists(exc: Exception) -> bool:
    """Detect a create_collection conflict from server, gRPC or local mode."""
    if isinstance(exc, UnexpectedResponse) and exc.status_code == 409:
        return True
    return "already exists" in str(exc).lower()


class QdrantVectorIndex(VectorIndex):
    """VectorIndex backed by Qdrant."""

    def __init__(self, client: AsyncQdrantClient) -> None:
        """
        Initialize adapter.

        Args:
            client: Async Qdrant client, owned and closed by this adapter
        """
        self._client = client

    async def ensure_collection(
        self,
        name: str,
        dimension: int,
        distance: Distance = Distance.COSINE,
    ) -> bool:
        """
        Create the collection if absent, validate it otherwise.

        Args:
            name: Collection name
            dimension: Vector size
            distance: Distance metric

        Returns:
            bool: True if this call created the collection

        Raises:
            VectorIndexError: When the backend fails or the existing schema differs
        """
        try:
            exists = await self._client.collection_exists(name)
        except Exception as e:
            raise VectorIndexError(
                f"Failed to check collection '{name}': {e}",
                operation="ensure_collection",
                details={"collection": name},
            ) from e

        if exists:
            await self._validate_schema(name, dimension, distance)
            return False

        try:
            await self._client.create_collection(
                collection_name=name,
                vectors_config=qdrant_models.VectorParams(
                    size=dimension,
                    distance=_QDRANT_DISTANCES[distance],
                ),
            )
        except Exception as e:
            if _is_already_exists(e):
                logger.info(
                    f"{__name__}:ensure_collection - Collection created concurrently",
                    extra={"collection": name},
                )
                await self._validate_schema(name, dimension, distance)
                return False
            raise VectorIndexError(
                f"Failed to create collection '{name}': {e}",
                operation="ensure_collection",
                details={"collection": name},
            ) from e

        logger.info(
            f"{__name__}:ensure_collection - Created collection",
            extra={"collection": name, "dimension": dimension, "distance": distance.value},
        )
        return True

    async def _validate_schema(self, name: str, dimension: int, distance: Distance) -> None:
        """Raise VectorIndexError if the stored vector params differ."""
        try:
            info = await self._client.get_collection(name)
        except Exception as e:
            raise VectorIndexError(
                f"Failed to read collection '{name}': {e}",
                operation="ensure_collection",
                details={"collection": name},
            ) from e

        vectors_config = info.config.params.vectors
        expected = _QDRANT_DISTANCES[distance]
        if not isinstance(vectors_config, qdrant_models.VectorParams):
            raise VectorIndexError(
                f"Collection '{name}' uses named vectors, expected a single vector",
                operation="ensure_collection",
                details={"collection": name},
            )
        if vectors_config.size != dimension or vectors_config.distance != expected:
            raise VectorIndexError(
                f"Collection '{name}' has size={vectors_config.size} "
                f"distance={vectors_config.distance}, expected size={dimension} distance={expected}",
                operation="ensure_collection",
                details={"collection": name},
            )

    async def upsert(
        self,
        name: str,
        points: Sequence[IndexedPoint],
        durable: bool = True,
    ) -> None:
        """
        Insert or overwrite points.

        Args:
            name: Collection name
            points: Points to write
            durable: Wait until the write is applied and searchable

        Raises:
            VectorIndexError: When the backend rejects the write
        """
        if not points:
            return

        qdrant_points = [
            qdrant_models.PointStruct(
                id=point.id,
                vector=point.vector,
                payload=point.payload.model_dump(),
            )
            for point in points
        ]
        try:
            await self._client.upsert(
                collection_name=name,
                points=qdrant_points,
                wait=durable,
            )
        except Exception as e:
            raise VectorIndexError(
                f"Failed to upsert {len(points)} points into '{name}': {e}",
                operation="upsert",
                details={"collection": name},
            ) from e

        logger.debug(f"{__name__}:upsert - Upserted {len(points)} points to {name}")

    async def search(
        self,
        name: str,
        vector: Sequence[float],
        top_k: int = 5,
        with_payload: bool = True,
    ) -> list[SearchResult]:
        """
        Return nearest points, descending by score.

        A collection that does not exist yet holds no documents, so it yields
        an empty result rather than an error.

        Args:
            name: Collection name
            vector: Query vector
            top_k: Maximum number of results
            with_payload: Include stored payloads

        Returns:
            list[SearchResult]: Hits ordered by descending score

        Raises:
            VectorIndexError: When the search fails
        """
        try:
            response = await self._client.query_points(
                collection_name=name,
                query=list(vector),
                limit=top_k,
                with_payload=with_payload,
            )
        except Exception as e:
            if await self._collection_missing(name):
                logger.warning(
                    f"{__name__}:search - Collection does not exist yet",
                    extra={"collection": name},
                )
                return []
            raise VectorIndexError(
                f"Failed to search '{name}': {e}",
                operation="search",
                details={"collection": name},
            ) from e

        return [
            SearchResult(id=str(point.id), score=point.score, payload=point.payload or {})
            for point in response.points
        ]

    async def _collection_missing(self, name: str) -> bool:
        """Confirm a failed search was caused by an absent collection.

        Any other failure, including one while checking, is not treated as empty.
        """
        try:
            return not await self._client.collection_exists(name)
        except Exception as e:
            logger.warning(f"{__name__}:_collection_missing - Check failed: {type(e).__name__}: {e}")
            return False

    async def close(self) -> None:
        """Close the underlying client."""
        await self._client.close()
