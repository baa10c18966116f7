"""
Models for document processing pipeline.

Exports: Chunk, PipelineResult, IngestionMessage, point_id_for
"""

from .chunk import Chunk, point_id_for
from .job_message import IngestionMessage
from .pipeline_result import PipelineResult

__all__ = [
    "Chunk",
    "PipelineResult",
    "IngestionMessage",
    "point_id_for",
]
