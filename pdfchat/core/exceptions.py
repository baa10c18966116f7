"""
Exception hierarchy for the PDF chat application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PdfChatException(Exception):
    """Base exception for all PDF chat application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(PdfChatException):
    """Raised when caller input is rejected. Never retried."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentProcessingError(PdfChatException):
    """Base exception for ingestion pipeline errors."""

    stage: str = "ingestion"

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_id: ID of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        details.setdefault("stage", self.stage)
        super().__init__(message, details)


class ExtractionError(DocumentProcessingError):
    """Raised when a document cannot be read or yields no text.

    Content will not change between attempts, so the queue does not retry.
    """

    stage = "extraction"

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize extraction error.

        Args:
            message: Error message
            document_id: ID of the document
            file_path: Storage location that failed extraction
            details: Additional context
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        self.file_path = file_path
        super().__init__(message, document_id, details)


class EmbeddingError(DocumentProcessingError):
    """Raised when embedding generation fails or returns unusable vectors."""

    stage = "embedding"


class VectorIndexError(DocumentProcessingError):
    """Raised when vector index operations fail."""

    stage = "indexing"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector index error.

        Args:
            message: Error message
            operation: Operation that failed (ensure_collection, upsert, search)
            document_id: ID of the document being indexed, if any
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, document_id, details)


class GenerationError(PdfChatException):
    """Raised when the generation provider fails."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize generation error.

        Args:
            message: Error message
            model: Model identifier that failed
            details: Additional context
        """
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)


class JobQueueError(PdfChatException):
    """Raised when a job cannot be submitted to or read from the queue."""

    pass


TRANSIENT_ERRORS: tuple[type[Exception], ...] = (
    EmbeddingError,
    VectorIndexError,
    GenerationError,
)
