"""
Job domain models and schemas.

Request/response schemas for ingestion job tracking.

Dependencies: pydantic
System role: Job status API contracts
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class JobStatus(str, Enum):
    """Lifecycle of an ingestion job."""

    PENDING = "pending"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class IngestionJob(BaseModel):
    """Ingestion job as observed through the job queue."""

    job_id: str = Field(description="Queue-assigned job identifier")
    document_id: str | None = Field(default=None, description="Document being ingested")
    status: JobStatus = Field(description="Current job status")
    attempts: int = Field(default=0, description="Delivery attempts so far")
    enqueued_at: datetime | None = Field(default=None, description="Enqueue timestamp")
    result: dict[str, Any] | None = Field(default=None, description="Pipeline result on success")
    error: str | None = Field(default=None, description="Failure message")
