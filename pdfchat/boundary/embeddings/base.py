"""
Embedding provider capability interface.

Dependencies: abc
System role: Contract between the pipelines and any embedding backend
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class EmbeddingProvider(ABC):
    """Map texts to fixed-dimension vectors.

    Implementations raise EmbeddingError on provider failure or empty input.
    """

    @abstractmethod
    async def embed(self, texts: Sequence[str]) -> list[list[float]]:
        """Embed texts, returning one vector per input in the same order."""

    async def embed_query(self, text: str) -> list[float]:
        """Embed a single text as a one-item batch."""
        vectors = await self.embed([text])
        return vectors[0]

    async def close(self) -> None:
        """Release client resources."""
        return None
