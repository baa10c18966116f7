"""
Ingestion worker orchestrator.

Coordinates extraction, chunking, embedding, and vector index upload tasks
for one queued document at a time.

Dependencies: All task modules, configs, pdfchat.boundary capabilities
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import json
import logging
import time
from typing import Any

import pydantic

from pdfchat.boundary.embeddings.base import EmbeddingProvider
from pdfchat.boundary.vdb.base import VectorIndex
from pdfchat.boundary.vdb.vector_schemas import Distance
from pdfchat.core.exceptions import DocumentProcessingError, ValidationError
from pdfchat.observability.log_utils import log_exception_with_context

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .models import IngestionMessage, PipelineResult
from .tasks import (
    ChunkingTask,
    EmbeddingTask,
    ExtractionTask,
    IndexingTask,
)

logger = logging.getLogger(__name__)


def parse_message(payload: str | bytes | dict[str, Any]) -> IngestionMessage:
    """
    Parse a queue payload into an IngestionMessage.

    Args:
        payload: JSON string/bytes or already-decoded dict

    Returns:
        IngestionMessage: Validated message

    Raises:
        ValidationError: When the payload is not a valid message
    """
    try:
        if isinstance(payload, dict):
            return IngestionMessage.model_validate(payload)
        return IngestionMessage.model_validate_json(payload)
    except (pydantic.ValidationError, json.JSONDecodeError, TypeError) as e:
        raise ValidationError(f"Invalid ingestion message: {e}", field="payload") from e


class IngestionWorker:
    """Run extract -> chunk -> embed -> index for one job."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_index: VectorIndex,
        collection_name: str,
        dimension: int,
        distance: Distance = Distance.COSINE,
        settings: DocumentPipelineSettings | None = None,
    ) -> None:
        """
        Initialize worker with its capabilities.

        Args:
            embedding_provider: Embedding capability
            vector_index: Vector index capability
            collection_name: Shared collection for every document
            dimension: Collection vector dimension
            distance: Collection distance metric
            settings: Pipeline settings (uses defaults if None)
        """
        self._settings = settings or get_pipeline_settings()
        self.collection_name = collection_name

        self._extraction_task = ExtractionTask()
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )
        self._embedding_task = EmbeddingTask(embedding_provider)
        self._indexing_task = IndexingTask(
            vector_index=vector_index,
            collection_name=collection_name,
            dimension=dimension,
            distance=distance,
        )

    async def process(self, message: IngestionMessage) -> PipelineResult:
        """
        Process one document through the full pipeline.

        Steps run strictly in order. The index is only written after every
        chunk has been embedded.

        Args:
            message: Queue message for the stored document

        Returns:
            PipelineResult: Processing result with chunk count and timing

        Raises:
            ExtractionError: Document missing, unsupported or malformed
            EmbeddingError: Embedding provider failure
            VectorIndexError: Collection or upsert failure
        """
        start_time = time.perf_counter()
        document_id = message.document_id
        logger.info(
            f"{__name__}:process - START",
            extra={"document_id": document_id, "path": message.path},
        )

        try:
            text = await asyncio.to_thread(
                self._extraction_task.extract,
                message.path,
                document_id,
            )
            logger.info(f"{__name__}:process - Step 1 extracted {len(text)} characters")

            chunks = self._chunking_task.chunk(text, document_id)
            logger.info(f"{__name__}:process - Step 2 produced {len(chunks)} chunks")

            chunk_count = 0
            if chunks:
                points = await self._embedding_task.embed(chunks, source=message.path)
                logger.info(f"{__name__}:process - Step 3 embedded {len(points)} chunks")

                chunk_count = await self._indexing_task.index(points, document_id)
                logger.info(f"{__name__}:process - Step 4 indexed into {self.collection_name}")

        except DocumentProcessingError as e:
            logger.error(
                f"{__name__}:process - Failed at {e.stage}: {e}",
                extra={"document_id": document_id, "stage": e.stage},
            )
            raise
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:process - Unexpected failure",
                e,
                document_id=document_id,
                path=message.path,
            )
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:process - COMPLETE",
            extra={"document_id": document_id, "chunk_count": chunk_count, "elapsed_ms": elapsed_ms},
        )
        return PipelineResult(
            document_id=document_id,
            chunk_count=chunk_count,
            collection=self.collection_name,
            processing_time_ms=elapsed_ms,
        )

    async def process_payload(self, payload: str | bytes | dict[str, Any]) -> PipelineResult:
        """
        Parse a raw queue payload and process it.

        Args:
            payload: JSON-encoded IngestionMessage

        Returns:
            PipelineResult: Processing result

        Raises:
            ValidationError: Malformed payload
        """
        return await self.process(parse_message(payload))
