"""
FastAPI application with assembled routers.

Builds the app (CORS, correlation and request-logging middleware, routers
under /api/v1) and owns the provider lifecycle through the lifespan.

Dependencies: fastapi, python-dotenv, pdfchat.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdfchat.api.deps.dependencies import get_service_cache
from pdfchat.configs import get_settings
from pdfchat.observability import configure_logging
from pdfchat.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    chat_router,
    documents_router,
    health_router,
    jobs_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open provider capabilities on startup and close them on shutdown.

    The query engine and upload store are built eagerly so a broken
    configuration fails at boot instead of on the first request.
    """
    load_dotenv()
    cache = get_service_cache()
    configure_logging(cache.settings.log_level)

    _ = cache.query_engine
    _ = cache.document_store
    logger.info(
        f"{__name__}:lifespan - Capabilities ready",
        extra={"collection": cache.settings.vector_store.collection_name},
    )

    yield

    await cache.aclose()
    logger.info(f"{__name__}:lifespan - Capabilities closed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="PDF Chat RAG API",
        description="Upload a PDF and ask questions answered from its content",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    @app.get("/")
    async def root() -> dict:
        """Liveness message."""
        return {"message": "all good"}

    for router in (health_router, chat_router, documents_router, jobs_router):
        app.include_router(router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "pdfchat.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
