"""
Vector store configuration settings.

Manages Qdrant connection and collection layout for vector storage and retrieval.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Qdrant vector store configuration (remote URL, or local mode for dev)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default="http://localhost:6333",
        description="Qdrant server URL",
    )
    api_key: str | None = Field(default=None, description="Qdrant API key")
    location: str | None = Field(
        default=None,
        description="Local mode location, e.g. ':memory:'. Overrides url when set",
    )
    timeout: int = Field(default=30, description="Request timeout in seconds")

    collection_name: str = Field(
        default="pdf-with-chat",
        description="Single logical collection shared by every document",
    )
    distance: Literal["cosine", "dot", "euclid"] = Field(
        default="cosine",
        description="Distance metric for the collection",
    )
    embedding_dimension: int = Field(
        default=1024,
        description="Vector dimension, must match the embedding model output",
    )
    top_k: int = Field(default=5, description="Number of top results to retrieve")
