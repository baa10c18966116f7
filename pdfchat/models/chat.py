"""
Chat request and response schemas.

Dependencies: pydantic
System role: Query endpoint API contracts
"""

from typing import Any

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Question to answer from the indexed document."""

    query: str = Field(default="", description="Natural-language question")


class ChatSource(BaseModel):
    """Retrieved chunk cited by an answer."""

    chunk_index: int = Field(description="1-based rank of the chunk in the retrieved context")
    text_preview: str = Field(description="First 200 characters of the chunk")
    score: float = Field(description="Similarity score")
    source: str = Field(description="Source document reference")


class ChatResponse(BaseModel):
    """Answer with cited sources."""

    answer: str
    sources: list[ChatSource] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body shared by all endpoints."""

    error: str
    details: Any = None
