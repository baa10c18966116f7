"""
Document processing pipeline for ingestion.

Extraction, chunking, embedding and indexing of uploaded documents.

Dependencies: langchain_community, langchain_text_splitters, pydantic
System role: Document ingestion pipeline entrypoint
"""

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .entrypoint import IngestionWorker, parse_message
from .models import Chunk, IngestionMessage, PipelineResult

__all__ = [
    "IngestionWorker",
    "parse_message",
    "DocumentPipelineSettings",
    "get_pipeline_settings",
    "Chunk",
    "IngestionMessage",
    "PipelineResult",
]
