"""
Job API endpoints.

Routes: GET /jobs/{job_id}

Dependencies: pdfchat.application.services.job_service, pdfchat.models
System role: Job status HTTP API
"""

from fastapi import APIRouter, Depends

from pdfchat.api.deps import get_job_service
from pdfchat.api.routers.router_utils import error_response
from pdfchat.application.services.job_service import JobService
from pdfchat.core.exceptions import JobQueueError
from pdfchat.models.chat import ErrorResponse
from pdfchat.models.job import IngestionJob

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get(
    "/{job_id}",
    response_model=IngestionJob,
    responses={503: {"model": ErrorResponse}},
)
async def get_job_status(
    job_id: str,
    job_service: JobService = Depends(get_job_service),
):
    """
    Get ingestion job status for frontend polling.

    Unknown ids report as pending, since the queue cannot tell an unknown
    job from one that has not started yet.

    Args:
        job_id: Job id returned by the upload endpoint
        job_service: Injected JobService

    Returns:
        IngestionJob: status, attempts, and result or error

    Example Response:
        {
            "job_id": "0b8e3c1e-...",
            "document_id": "pdf-1718000000000-123456789.pdf",
            "status": "succeeded",
            "attempts": 1,
            "result": {"document_id": "...", "chunk_count": 4, ...},
            "error": null
        }
    """
    try:
        return await job_service.get_job(job_id)
    except JobQueueError as e:
        return error_response(503, "Job status unavailable", e.message)
