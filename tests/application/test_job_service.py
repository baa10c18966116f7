"""
Test suite for JobService.

System role: Verification of job status reads
"""

from unittest.mock import MagicMock

import pytest

from pdfchat.application.services.job_service import JobService
from pdfchat.boundary.queue.celery_queue import CeleryJobQueue
from pdfchat.core.exceptions import JobQueueError
from pdfchat.models.job import IngestionJob, JobStatus


class TestJobService:
    """Test suite for JobService.get_job."""

    @pytest.mark.asyncio
    async def test_get_job_should_delegate_to_queue(self) -> None:
        """Test job state is read from the queue client."""
        # Arrange
        queue = MagicMock(spec=CeleryJobQueue)
        queue.get_job.return_value = IngestionJob(job_id="job-1", status=JobStatus.PROCESSING, attempts=2)
        service = JobService(job_queue=queue)

        # Act
        job = await service.get_job("job-1")

        # Assert
        assert job.status is JobStatus.PROCESSING
        assert job.attempts == 2
        queue.get_job.assert_called_once_with("job-1")

    @pytest.mark.asyncio
    async def test_backend_failure_should_propagate(self) -> None:
        """Test result backend errors reach the caller."""
        # Arrange
        queue = MagicMock(spec=CeleryJobQueue)
        queue.get_job.side_effect = JobQueueError("redis down")

        # Act & Assert
        with pytest.raises(JobQueueError):
            await JobService(job_queue=queue).get_job("job-1")
