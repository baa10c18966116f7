"""
Query engine response schemas.

Dependencies: pydantic
System role: Answer and citation definitions
"""

from pydantic import BaseModel, Field

PREVIEW_LENGTH = 200


class AnswerSource(BaseModel):
    """Retrieved chunk cited by an answer."""

    rank: int = Field(description="1-based position in the retrieved context")
    text_preview: str = Field(description="Truncated chunk text")
    score: float = Field(description="Similarity score")
    source: str = Field(description="Source document reference")


class ChatAnswer(BaseModel):
    """Generated answer with cited sources."""

    answer: str = Field(description="Answer text")
    sources: list[AnswerSource] = Field(default_factory=list)


def preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Return the first `length` characters followed by an ellipsis."""
    return text[:length] + "..."
