"""
Generation provider capability interface.

Dependencies: abc, pydantic
System role: Contract between the query engine and any chat model backend
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from pydantic import BaseModel, ConfigDict, Field


class GenerationOptions(BaseModel):
    """Decoding parameters for one generation call."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=2048, gt=0)
    top_p: float = Field(default=0.9, gt=0.0, le=1.0)


class GenerationProvider(ABC):
    """Produce text from a system instruction and a user message.

    Implementations raise GenerationError on provider failure.
    """

    @abstractmethod
    async def complete(
        self,
        system_instruction: str,
        user_message: str,
        options: GenerationOptions,
    ) -> str:
        """Return the full generated text."""

    @abstractmethod
    def stream(
        self,
        system_instruction: str,
        user_message: str,
        options: GenerationOptions,
    ) -> AsyncIterator[str]:
        """Yield text fragments in arrival order. Exhaustion is the end marker.

        Closing the iterator early (aclose) stops the underlying provider stream.
        """

    async def close(self) -> None:
        """Release client resources."""
        return None
