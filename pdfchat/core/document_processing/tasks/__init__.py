"""
Task modules for document processing pipeline.

Exports: ExtractionTask, ChunkingTask, EmbeddingTask, IndexingTask
"""

from .chunking_task import ChunkingTask, SlidingWindowTextSplitter
from .embedding_task import EmbeddingTask
from .extraction_task import ExtractionTask
from .indexing_task import IndexingTask

__all__ = [
    "ExtractionTask",
    "ChunkingTask",
    "SlidingWindowTextSplitter",
    "EmbeddingTask",
    "IndexingTask",
]
