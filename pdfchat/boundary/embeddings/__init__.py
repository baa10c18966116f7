"""
Embedding boundary layer.

Provides the EmbeddingProvider capability and its LangChain adapter.
"""

from pdfchat.boundary.embeddings.base import EmbeddingProvider
from pdfchat.boundary.embeddings.langchain_provider import LangChainEmbeddingProvider

__all__ = ["EmbeddingProvider", "LangChainEmbeddingProvider"]
