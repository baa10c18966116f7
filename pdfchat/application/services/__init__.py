"""Service orchestrators."""

from .chat_service import ChatService
from .document_service import DocumentService
from .job_service import JobService
from .retention_service import RetentionService

__all__ = [
    "ChatService",
    "DocumentService",
    "JobService",
    "RetentionService",
]
