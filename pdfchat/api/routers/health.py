"""
Health check API endpoints.

Routes:
- GET /health - Liveness
- GET /health/ready - Readiness, reporting the configured collection and queue

Dependencies: fastapi, pdfchat.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from pdfchat.api.deps import get_settings_dependency
from pdfchat.configs import Settings


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str
    message: str


class ReadinessResponse(BaseModel):
    """Readiness response with the wiring the API was started with."""

    status: str
    collection: str
    queue: str
    embedding_dimension: int


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is up."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(settings: Settings = Depends(get_settings_dependency)) -> ReadinessResponse:
    """Report the collection and queue this instance reads from and writes to."""
    return ReadinessResponse(
        status="ready",
        collection=settings.vector_store.collection_name,
        queue=settings.celery.queue_name,
        embedding_dimension=settings.vector_store.embedding_dimension,
    )
