"""
Celery-backed job queue.

Submits ingestion messages to the ingestion queue and reads job state back
from the Celery result backend.

Dependencies: celery
System role: Job submission side of the ingestion queue
"""

import logging
from datetime import datetime, timezone
from typing import Any

from celery import Celery
from celery.result import AsyncResult

from pdfchat.core.document_processing.models import IngestionMessage
from pdfchat.core.exceptions import JobQueueError
from pdfchat.models.job import IngestionJob, JobStatus

logger = logging.getLogger(__name__)

INGEST_TASK_NAME = "file-ready"

_STATE_TO_STATUS: dict[str, JobStatus] = {
    "PENDING": JobStatus.PENDING,
    "RECEIVED": JobStatus.PENDING,
    "STARTED": JobStatus.PROCESSING,
    "RETRY": JobStatus.PROCESSING,
    "SUCCESS": JobStatus.SUCCEEDED,
    "FAILURE": JobStatus.FAILED,
    "REVOKED": JobStatus.FAILED,
}


def _document_id_from_args(task_args: Any) -> str | None:
    """Recover the document ID from the task's stored payload argument."""
    if not task_args:
        return None
    try:
        return IngestionMessage.model_validate_json(task_args[0]).document_id
    except (ValueError, TypeError):
        return None

class CeleryJobQueue:
    """Durable, at-least-once ingestion queue on Celery."""

    def __init__(
        self,
        app: Celery,
        queue_name: str = "fileupload",
        task_name: str = INGEST_TASK_NAME,
    ) -> None:
        """
        Initialize queue client.

        Args:
            app: Celery application
            queue_name: Queue that ingestion workers consume
            task_name: Registered ingestion task name
        """
        self._app = app
        self.queue_name = queue_name
        self.task_name = task_name

    def enqueue(self, message: IngestionMessage) -> IngestionJob:
        """
        Submit an ingestion job.

        Args:
            message: Queue message describing the stored document

        Returns:
            IngestionJob: Pending job handle

        Raises:
            JobQueueError: When the broker rejects the message
        """
        try:
            result = self._app.send_task(
                self.task_name,
                args=[message.model_dump_json()],
                queue=self.queue_name,
            )
        except Exception as e:
            raise JobQueueError(
                f"Failed to enqueue ingestion job: {e}",
                details={"document_id": message.document_id, "queue": self.queue_name},
            ) from e

        logger.info(
            f"{__name__}:enqueue - Job enqueued",
            extra={"job_id": result.id, "document_id": message.document_id, "queue": self.queue_name},
        )
        return IngestionJob(
            job_id=result.id,
            document_id=message.document_id,
            status=JobStatus.PENDING,
            attempts=0,
            enqueued_at=datetime.now(timezone.utc),
        )

    def get_job(self, job_id: str) -> IngestionJob:
        """
        Read job state from the result backend.

        Unknown IDs are reported as pending, as Celery cannot tell them apart.

        Args:
            job_id: Job identifier returned by enqueue

        Returns:
            IngestionJob: Current job view

        Raises:
            JobQueueError: When the result backend is unreachable
        """
        result = AsyncResult(job_id, app=self._app)
        try:
            state = result.state
            info: Any = result.info
            # Stored with result_extended; survive RETRY and FAILURE, unlike the STARTED meta
            retries = result.retries
            task_args = result.args
        except Exception as e:
            raise JobQueueError(f"Failed to read job state: {e}", details={"job_id": job_id}) from e

        status = _STATE_TO_STATUS.get(state, JobStatus.PENDING)
        meta = info if isinstance(info, dict) else {}
        attempts = meta.get("attempt")
        if attempts is None and isinstance(retries, int):
            attempts = retries + 1
        job = IngestionJob(
            job_id=job_id,
            document_id=meta.get("document_id") or _document_id_from_args(task_args),
            status=status,
            attempts=int(attempts or 0),
        )
        if status is JobStatus.SUCCEEDED:
            job.result = meta
            job.attempts = job.attempts or 1
        elif status is JobStatus.FAILED and info is not None:
            job.error = str(info)
        return job
