"""
Chunk domain model for document processing pipeline.

Represents one overlapping text window of a document with a deterministic point ID.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion pipeline
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field

# Fixed namespace so the same (document, index) pair always maps to the same point
POINT_ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "pdfchat/chunks")


def point_id_for(document_id: str, chunk_index: int) -> str:
    """
    Derive the vector index point ID for a chunk.

    Args:
        document_id: Parent document identifier
        chunk_index: Zero-based chunk position

    Returns:
        str: UUIDv5 string, stable across re-deliveries of the same job
    """
    return str(uuid.uuid5(POINT_ID_NAMESPACE, f"{document_id}:{chunk_index}"))


class Chunk(BaseModel):
    """Immutable text window of a document."""

    model_config = ConfigDict(frozen=True)

    document_id: str = Field(description="Parent document identifier")
    index: int = Field(ge=0, description="Zero-based position within the document")
    text: str = Field(description="Raw chunk text")

    @property
    def length(self) -> int:
        """Chunk length in characters."""
        return len(self.text)

    @property
    def point_id(self) -> str:
        """Deterministic vector index point ID."""
        return point_id_for(self.document_id, self.index)
