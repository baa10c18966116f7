"""
Document API endpoints.

Routes:
- POST /upload/pdf - Store a PDF and enqueue its ingestion
- DELETE /cleanup/files - Delete every stored upload

Dependencies: pdfchat.application.services
System role: Upload and manual cleanup HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool

from pdfchat.api.deps import get_document_service, get_retention_service
from pdfchat.api.routers.router_utils import error_response
from pdfchat.application.services.document_service import DocumentService
from pdfchat.application.services.retention_service import RetentionService
from pdfchat.core.exceptions import PdfChatException, ValidationError
from pdfchat.models.chat import ErrorResponse
from pdfchat.models.document import CleanupResponse, UploadedFileInfo, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])


@router.post(
    "/upload/pdf",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_pdf(
    pdf: UploadFile | None = File(default=None),
    document_service: DocumentService = Depends(get_document_service),
):
    """
    Upload a PDF for ingestion.

    The file is stored under a unique name and a job is enqueued. The
    response returns as soon as the job is accepted; poll /jobs/{job_id}
    for progress.

    Args:
        pdf: Multipart file field "pdf"
        document_service: Injected DocumentService

    Returns:
        UploadResponse: Stored file info with document and job ids
    """
    if pdf is None:
        return error_response(400, "No file uploaded")

    try:
        document_service.validate_size(pdf.size)
        content = await pdf.read(document_service.read_limit)
        document, job = await document_service.upload_document(content, pdf.content_type)
    except ValidationError as e:
        return error_response(400, e.message, e.details)
    except Exception as e:
        logger.error(f"{__name__}:upload_pdf - {type(e).__name__}: {e}")
        detail = e.message if isinstance(e, PdfChatException) else str(e)
        return error_response(500, "Failed to upload file", detail)
    finally:
        await pdf.close()

    return UploadResponse(
        message="File uploaded successfully",
        file=UploadedFileInfo(
            filename=document.filename,
            size=document.size_bytes,
            mimetype=document.content_type,
        ),
        document_id=document.id,
        job_id=job.job_id,
    )


@router.delete(
    "/cleanup/files",
    response_model=CleanupResponse,
    responses={500: {"model": ErrorResponse}},
)
async def cleanup_files(
    retention_service: RetentionService = Depends(get_retention_service),
):
    """
    Delete every stored upload.

    Indexed chunks are not affected.

    Args:
        retention_service: Injected RetentionService

    Returns:
        CleanupResponse: Number of files deleted
    """
    try:
        deleted = await run_in_threadpool(retention_service.purge_all)
    except OSError as e:
        logger.error(f"{__name__}:cleanup_files - {type(e).__name__}: {e}")
        return error_response(500, "Cleanup failed", str(e))

    return CleanupResponse(message="Cleanup completed", files_deleted=deleted)
