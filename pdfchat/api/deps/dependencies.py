"""
Dependency injection container.

Factory functions for FastAPI dependencies. Provider clients are opened
once per process by the service cache and closed at application shutdown.

Dependencies: pdfchat.configs, pdfchat.application, pdfchat.boundary
System role: DI container for service injection
"""

import logging

from fastapi import Depends

from pdfchat.application.services import (
    ChatService,
    DocumentService,
    JobService,
    RetentionService,
)
from pdfchat.configs import Settings, get_settings

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for long-lived capabilities and clients."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._capabilities = None
        self._query_engine = None
        self._document_store = None
        self._job_queue = None

    @property
    def settings(self) -> Settings:
        """Get settings used to build cached instances."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def capabilities(self):
        """Get opened embedding, vector index and generation capabilities."""
        if self._capabilities is None:
            from pdfchat.boundary.capabilities import Capabilities

            self._capabilities = Capabilities.from_settings(self.settings)
        return self._capabilities

    @property
    def query_engine(self):
        """Get cached RAG query engine."""
        if self._query_engine is None:
            from pdfchat.boundary.llm.llm_factory import default_generation_options
            from pdfchat.core.rag_query.query_engine import RAGQueryEngine

            capabilities = self.capabilities
            self._query_engine = RAGQueryEngine(
                embedding_provider=capabilities.embedding_provider,
                vector_index=capabilities.vector_index,
                generation_provider=capabilities.generation_provider,
                collection_name=self.settings.vector_store.collection_name,
                top_k=self.settings.vector_store.top_k,
                options=default_generation_options(self.settings.generation),
            )
        return self._query_engine

    @property
    def document_store(self):
        """Get cached local upload store."""
        if self._document_store is None:
            from pdfchat.boundary.storage.local_store import LocalDocumentStore

            self._document_store = LocalDocumentStore(self.settings.storage.upload_dir)
        return self._document_store

    @property
    def job_queue(self):
        """Get cached Celery ingestion queue client."""
        if self._job_queue is None:
            from pdfchat.boundary.queue.celery_queue import CeleryJobQueue
            from pdfchat.workers import celery_app

            self._job_queue = CeleryJobQueue(
                celery_app,
                queue_name=self.settings.celery.queue_name,
            )
        return self._job_queue

    async def aclose(self) -> None:
        """Close opened capabilities and drop every cached instance."""
        if self._capabilities is not None:
            await self._capabilities.aclose()
        self._capabilities = None
        self._query_engine = None
        self._document_store = None
        self._job_queue = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_chat_service(cache: ServiceCache = Depends(get_service_cache)) -> ChatService:
    """
    Get chat service instance.

    Args:
        cache: Service cache holding the query engine

    Returns:
        ChatService: Chat service with the configured retry policy
    """
    chat_settings = cache.settings.chat
    return ChatService(
        query_engine=cache.query_engine,
        retry_attempts=chat_settings.query_retry_attempts,
        retry_max_wait=chat_settings.query_retry_max_wait,
    )


def get_document_service(cache: ServiceCache = Depends(get_service_cache)) -> DocumentService:
    """
    Get document service instance.

    Args:
        cache: Service cache holding the store and queue client

    Returns:
        DocumentService: Upload service
    """
    return DocumentService(
        store=cache.document_store,
        job_queue=cache.job_queue,
        settings=cache.settings.storage,
    )


def get_job_service(cache: ServiceCache = Depends(get_service_cache)) -> JobService:
    """Get job service instance."""
    return JobService(job_queue=cache.job_queue)


def get_retention_service(cache: ServiceCache = Depends(get_service_cache)) -> RetentionService:
    """Get retention service instance."""
    return RetentionService(
        store=cache.document_store,
        retention_seconds=cache.settings.storage.retention_seconds,
    )
