"""
Embedding provider configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Embedding model selection
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    provider: Literal["google", "fake"] = Field(
        default="google",
        description="'google' for Gemini embeddings, 'fake' for deterministic local vectors",
    )
    model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    dimension: int = Field(
        default=1024,
        description="Output dimensionality requested from the model",
    )
