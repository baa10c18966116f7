"""
Job queue boundary layer.

Provides the Celery-backed ingestion queue client.
"""

from pdfchat.boundary.queue.celery_queue import INGEST_TASK_NAME, CeleryJobQueue

__all__ = ["CeleryJobQueue", "INGEST_TASK_NAME"]
