"""
Job service orchestrator.

Reports ingestion job status read from the job queue.

Dependencies: fastapi.concurrency, pdfchat.boundary.queue
System role: Job status orchestration
"""

from fastapi.concurrency import run_in_threadpool

from pdfchat.boundary.queue.celery_queue import CeleryJobQueue
from pdfchat.models.job import IngestionJob


class JobService:
    """Read-only view of ingestion jobs."""

    def __init__(self, job_queue: CeleryJobQueue) -> None:
        """
        Initialize job service.

        Args:
            job_queue: Queue client used to read job state
        """
        self.job_queue = job_queue

    async def get_job(self, job_id: str) -> IngestionJob:
        """
        Get current status of an ingestion job.

        Args:
            job_id: Job identifier returned at upload

        Returns:
            IngestionJob: Current job view
        """
        return await run_in_threadpool(self.job_queue.get_job, job_id)
