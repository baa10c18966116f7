"""
Vector database schemas.

Pydantic models for vector operations (points, payloads, results).
Used for type-safe vector index interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Distance(str, Enum):
    """Supported collection distance metrics."""

    COSINE = "cosine"
    DOT = "dot"
    EUCLID = "euclid"


class ChunkPayload(BaseModel):
    """Payload stored alongside each chunk vector."""

    text: str = Field(description="Chunk text")
    chunk_index: int = Field(description="Zero-based chunk position in its document")
    source: str = Field(default="", description="Storage location of the source document")
    document_id: str = Field(description="Source document identifier")


class IndexedPoint(BaseModel):
    """Vector plus payload stored under a unique point ID."""

    id: str = Field(description="Point identifier (UUID string)")
    vector: list[float] = Field(description="Embedding vector")
    payload: ChunkPayload


class SearchResult(BaseModel):
    """Single nearest-neighbour hit."""

    id: str = Field(description="Point identifier")
    score: float = Field(description="Similarity score, higher is closer")
    payload: dict[str, Any] = Field(default_factory=dict, description="Stored payload, if requested")

    @property
    def text(self) -> str:
        """Chunk text from the payload."""
        return str(self.payload.get("text", ""))

    @property
    def source(self) -> str:
        """Source document reference from the payload."""
        return str(self.payload.get("source", ""))
