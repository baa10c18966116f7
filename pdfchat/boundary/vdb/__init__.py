"""
Vector database boundary layer.

Provides the VectorIndex capability and its Qdrant adapter.

Dependencies: qdrant_client
System role: Vector store adapter for ingestion and retrieval
"""

from pdfchat.boundary.vdb.base import VectorIndex
from pdfchat.boundary.vdb.vector_schemas import (
    ChunkPayload,
    Distance,
    IndexedPoint,
    SearchResult,
)

__all__ = [
    "VectorIndex",
    "ChunkPayload",
    "Distance",
    "IndexedPoint",
    "SearchResult",
]
