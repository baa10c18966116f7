"""
Document ingestion Celery task.

Task: file-ready(payload) on the fileupload queue
Flow: parse message -> extract -> chunk -> embed -> ensure collection -> upsert

Transient provider failures are retried by Celery with exponential backoff.
Extraction and validation failures fail the job immediately.

Dependencies: celery, pdfchat.core.document_processing, pdfchat.boundary, pdfchat.workers
System role: Async document processing task
"""

import asyncio
import logging

from pdfchat.boundary.capabilities import Capabilities
from pdfchat.boundary.queue.celery_queue import INGEST_TASK_NAME
from pdfchat.boundary.vdb.vector_schemas import Distance
from pdfchat.configs import Settings, get_settings
from pdfchat.core.document_processing import IngestionWorker, parse_message
from pdfchat.core.document_processing.models import IngestionMessage, PipelineResult
from pdfchat.core.exceptions import ExtractionError, ValidationError
from pdfchat.observability.correlation import set_correlation_id
from pdfchat.workers import celery_app, celery_config

logger = logging.getLogger(__name__)


def build_ingestion_worker(capabilities: Capabilities, settings: Settings) -> IngestionWorker:
    """
    Create an IngestionWorker wired to the given capabilities.

    Args:
        capabilities: Opened embedding and vector index capabilities
        settings: Application settings

    Returns:
        IngestionWorker: Worker for the configured collection
    """
    return IngestionWorker(
        embedding_provider=capabilities.embedding_provider,
        vector_index=capabilities.vector_index,
        collection_name=settings.vector_store.collection_name,
        dimension=settings.vector_store.embedding_dimension,
        distance=Distance(settings.vector_store.distance),
        settings=settings.pipeline,
    )


async def run_ingestion(message: IngestionMessage, settings: Settings | None = None) -> PipelineResult:
    """
    Open capabilities, process one message, and close them again.

    Args:
        message: Parsed queue message
        settings: Application settings (uses cached settings if None)

    Returns:
        PipelineResult: Processing result
    """
    settings = settings or get_settings()
    capabilities = Capabilities.from_settings(settings, with_generation=False)
    try:
        worker = build_ingestion_worker(capabilities, settings)
        return await worker.process(message)
    finally:
        await capabilities.aclose()


@celery_app.task(
    bind=True,
    name=INGEST_TASK_NAME,
    queue=celery_config.queue_name,
    max_retries=celery_config.task_max_retries,
    autoretry_for=(Exception,),
    dont_autoretry_for=(ExtractionError, ValidationError),
    retry_backoff=celery_config.task_retry_backoff,
    retry_backoff_max=celery_config.task_retry_backoff_max,
    retry_jitter=True,
)
def ingest_document(self, payload: str) -> dict:
    """
    Ingest one uploaded document.

    Args:
        payload: JSON string {"filename", "destination", "path"}

    Returns:
        dict: Pipeline result with chunk count, plus the attempt number
    """
    message = parse_message(payload)
    attempt = self.request.retries + 1
    set_correlation_id(self.request.id)

    if self.request.id:
        self.update_state(
            state="STARTED",
            meta={"document_id": message.document_id, "attempt": attempt},
        )

    logger.info(
        f"{__name__}:ingest_document - Processing {message.filename}",
        extra={"document_id": message.document_id, "attempt": attempt},
    )
    result = asyncio.run(run_ingestion(message))
    return {**result.model_dump(), "attempt": attempt}
