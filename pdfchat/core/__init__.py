"""
Core business logic module.

Contains the ingestion pipeline, the retrieval-augmented query engine and the
exception hierarchy shared by every layer.
"""

from pdfchat.core.exceptions import (
    DocumentProcessingError,
    EmbeddingError,
    ExtractionError,
    GenerationError,
    JobQueueError,
    PdfChatException,
    ValidationError,
    VectorIndexError,
)

__all__ = [
    "PdfChatException",
    "ValidationError",
    "DocumentProcessingError",
    "ExtractionError",
    "EmbeddingError",
    "VectorIndexError",
    "GenerationError",
    "JobQueueError",
]
