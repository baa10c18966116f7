"""
Test suite for RAG prompt construction.

System role: Verification of grounding instruction formatting
"""

from pdfchat.boundary.vdb.vector_schemas import SearchResult
from pdfchat.core.rag_query.prompt import (
    NOT_FOUND_STATEMENT,
    build_system_instruction,
    format_context,
)
from pdfchat.core.rag_query.schemas import preview


class TestFormatContext:
    """Test suite for format_context."""

    def test_chunks_should_be_numbered_from_one(self) -> None:
        """Test rank labels and blank-line separators."""
        # Arrange
        results = [
            SearchResult(id="a", score=0.9, payload={"text": "alpha"}),
            SearchResult(id="b", score=0.7, payload={"text": "beta"}),
        ]

        # Act
        context = format_context(results)

        # Assert
        assert context == "[Chunk 1] alpha\n\n[Chunk 2] beta"

    def test_braces_in_chunk_text_should_survive_rendering(self) -> None:
        """Test document text containing template braces is inserted verbatim."""
        # Arrange
        results = [SearchResult(id="a", score=0.9, payload={"text": "f(x) = {x: 1}"})]

        # Act
        instruction = build_system_instruction(results)

        # Assert
        assert "[Chunk 1] f(x) = {x: 1}" in instruction
        assert NOT_FOUND_STATEMENT in instruction


class TestPreview:
    """Test suite for source previews."""

    def test_preview_should_truncate_to_200_characters(self) -> None:
        """Test previews keep the first 200 characters plus an ellipsis."""
        # Act
        result = preview("x" * 500)

        # Assert
        assert result == "x" * 200 + "..."

    def test_short_text_should_still_get_ellipsis(self) -> None:
        """Test short chunks are shown whole with the ellipsis."""
        # Act & Assert
        assert preview("short") == "short..."
