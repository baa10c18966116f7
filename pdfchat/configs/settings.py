"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field, model_validator

from pdfchat.configs.base import BaseSettings
from pdfchat.configs.celery_config import CelerySettings
from pdfchat.configs.chat import ChatSettings
from pdfchat.configs.embedding import EmbeddingSettings
from pdfchat.configs.generation import GenerationSettings
from pdfchat.configs.storage import StorageSettings
from pdfchat.configs.vector_store import VectorStoreSettings
from pdfchat.core.document_processing.configs import DocumentPipelineSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    celery: CelerySettings = Field(default_factory=CelerySettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)
    pipeline: DocumentPipelineSettings = Field(default_factory=DocumentPipelineSettings)

    @model_validator(mode="after")
    def _check_embedding_dimension(self) -> "Settings":
        # Every vector written to or searched in the collection comes from the embedding model
        if self.embedding.dimension != self.vector_store.embedding_dimension:
            raise ValueError(
                f"EMBEDDING_DIMENSION ({self.embedding.dimension}) must equal "
                f"VECTOR_STORE_EMBEDDING_DIMENSION ({self.vector_store.embedding_dimension})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from pdfchat.configs import get_settings
        settings = get_settings()
    """
    return Settings()
