"""
Document service orchestrator.

Validates uploads, stores them and submits an ingestion job per document.

Dependencies: fastapi.concurrency, pdfchat.boundary.storage, pdfchat.boundary.queue
System role: Document upload orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool

from pdfchat.boundary.queue.celery_queue import CeleryJobQueue
from pdfchat.boundary.storage.local_store import LocalDocumentStore
from pdfchat.configs.storage import StorageSettings
from pdfchat.core.document_processing.models import IngestionMessage
from pdfchat.core.exceptions import ValidationError
from pdfchat.models.document import Document
from pdfchat.models.job import IngestionJob

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Document service orchestrator.

    Handles the submission side of ingestion: validate, store, enqueue.
    """

    def __init__(
        self,
        store: LocalDocumentStore,
        job_queue: CeleryJobQueue,
        settings: StorageSettings | None = None,
    ) -> None:
        """
        Initialize document service.

        Args:
            store: Upload storage
            job_queue: Ingestion queue client
            settings: Upload limits (uses defaults if None)
        """
        self.store = store
        self.job_queue = job_queue
        self.settings = settings or StorageSettings()

    def validate_upload(self, content: bytes, content_type: str | None) -> None:
        """
        Check type and size limits.

        Args:
            content: Uploaded bytes
            content_type: Declared MIME type

        Raises:
            ValidationError: Unsupported type, empty or oversized file
        """
        if content_type not in self.settings.allowed_content_types:
            raise ValidationError(
                "Only PDF files are allowed",
                field="pdf",
                details={"content_type": content_type},
            )
        if not content:
            raise ValidationError("No file uploaded", field="pdf")
        self.validate_size(len(content))

    def validate_size(self, size: int | None) -> None:
        """
        Check a size against the upload limit.

        Called with the declared multipart size before the body is read,
        and again with the bytes actually read.

        Args:
            size: Size in bytes, None when unknown

        Raises:
            ValidationError: Size above max_upload_bytes
        """
        if size is not None and size > self.settings.max_upload_bytes:
            raise ValidationError(
                f"File exceeds the {self.settings.max_upload_bytes} byte limit",
                field="pdf",
                details={"size": size},
            )

    @property
    def read_limit(self) -> int:
        """Bytes to read from an upload: one past the limit, so oversize is detectable."""
        return self.settings.max_upload_bytes + 1

    async def upload_document(
        self,
        content: bytes,
        content_type: str | None,
    ) -> tuple[Document, IngestionJob]:
        """
        Store an upload and enqueue its ingestion.

        Steps:
        1. Validate type and size
        2. Write the file under a unique name
        3. Enqueue {filename, destination, path} on the ingestion queue

        Args:
            content: Uploaded bytes
            content_type: Declared MIME type

        Returns:
            tuple[Document, IngestionJob]: Stored document and its pending job

        Raises:
            ValidationError: Upload rejected
            JobQueueError: Queue unavailable
        """
        self.validate_upload(content, content_type)

        document = await run_in_threadpool(self.store.save, content, content_type)
        message = IngestionMessage(
            filename=document.filename,
            destination=document.destination,
            path=document.path,
        )
        job = await run_in_threadpool(self.job_queue.enqueue, message)

        logger.info(
            f"{__name__}:upload_document - Uploaded and enqueued",
            extra={"document_id": document.id, "job_id": job.job_id, "size_bytes": document.size_bytes},
        )
        return document, job
