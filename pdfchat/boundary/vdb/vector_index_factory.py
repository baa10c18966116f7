"""
Vector index factory.

Builds the Qdrant adapter from settings: local mode when a location is
configured, otherwise a remote server URL.

Dependencies: qdrant_client, pdfchat.configs
System role: Vector index instantiation and selection
"""

import logging

from qdrant_client import AsyncQdrantClient

from pdfchat.boundary.vdb.qdrant_index import QdrantVectorIndex
from pdfchat.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)


def build_vector_index(settings: VectorStoreSettings) -> QdrantVectorIndex:
    """
    Create the vector index adapter.

    Args:
        settings: Vector store settings

    Returns:
        QdrantVectorIndex: Adapter owning a fresh AsyncQdrantClient
    """
    if settings.location:
        logger.info(
            f"{__name__}:build_vector_index - Using Qdrant local mode at {settings.location}"
        )
        client = AsyncQdrantClient(location=settings.location)
    else:
        logger.info(f"{__name__}:build_vector_index - Using Qdrant server at {settings.url}")
        client = AsyncQdrantClient(
            url=settings.url,
            api_key=settings.api_key,
            timeout=settings.timeout,
        )
    return QdrantVectorIndex(client)
