"""
Test suite for the sliding-window chunking task.

Covers window positions, the chunk count formula, lossless reconstruction,
empty input, and configuration validation.

System role: Verification of ingestion step 2
"""

import math

import pytest

from conftest import make_text
from pdfchat.core.document_processing.configs import DocumentPipelineSettings
from pdfchat.core.document_processing.models import Chunk, point_id_for
from pdfchat.core.document_processing.tasks.chunking_task import (
    ChunkingTask,
    SlidingWindowTextSplitter,
)


def expected_count(length: int, size: int, overlap: int) -> int:
    if length == 0:
        return 0
    if length <= size:
        return 1
    return math.ceil((length - size) / (size - overlap)) + 1


def reconstruct(chunks: list[Chunk], overlap: int) -> str:
    if not chunks:
        return ""
    return chunks[0].text + "".join(chunk.text[overlap:] for chunk in chunks[1:])


class TestChunkingWindows:
    """Test suite for window positions and lengths."""

    def test_3000_characters_should_give_four_windows(self) -> None:
        """Test 3000 characters with size 1000 and overlap 100."""
        # Arrange
        text = make_text(3000)
        task = ChunkingTask(chunk_size=1000, chunk_overlap=100)

        # Act
        chunks = task.chunk(text, "doc-a")

        # Assert
        assert len(chunks) == 4
        assert [chunk.text for chunk in chunks] == [
            text[0:1000],
            text[900:1900],
            text[1800:2800],
            text[2700:3000],
        ]
        assert [chunk.length for chunk in chunks] == [1000, 1000, 1000, 300]
        assert [chunk.index for chunk in chunks] == [0, 1, 2, 3]

    def test_consecutive_windows_should_share_overlap(self) -> None:
        """Test the last 100 characters of a window start the next one."""
        # Arrange
        text = make_text(2500)

        # Act
        chunks = ChunkingTask(1000, 100).chunk(text, "doc")

        # Assert
        for previous, current in zip(chunks, chunks[1:]):
            assert previous.text[-100:] == current.text[:100]

    def test_whitespace_should_be_preserved(self) -> None:
        """Test windows are not stripped."""
        # Arrange
        text = "   leading and trailing   "

        # Act
        chunks = ChunkingTask(chunk_size=10, chunk_overlap=2).chunk(text, "doc")

        # Assert
        assert chunks[0].text == text[:10]
        assert reconstruct(chunks, 2) == text

    def test_chunks_should_carry_document_id(self) -> None:
        """Test every chunk records its parent document."""
        # Act
        chunks = ChunkingTask().chunk(make_text(1500), "doc-xyz")

        # Assert
        assert {chunk.document_id for chunk in chunks} == {"doc-xyz"}


class TestChunkingCount:
    """Test suite for the chunk count formula."""

    @pytest.mark.parametrize("length", [1, 999, 1000, 1001, 1900, 1901, 2800, 5000, 12345])
    def test_count_should_match_formula(self, length: int) -> None:
        """Test count equals ceil((L - S) / (S - O)) + 1 for L > S, else 1."""
        # Act
        chunks = ChunkingTask(1000, 100).chunk(make_text(length), "doc")

        # Assert
        assert len(chunks) == expected_count(length, 1000, 100)

    @pytest.mark.parametrize(
        ("length", "size", "overlap"),
        [(50, 10, 3), (101, 20, 19), (1000, 256, 0), (7, 3, 1)],
    )
    def test_dropping_overlap_should_reconstruct_text(self, length: int, size: int, overlap: int) -> None:
        """Test concatenating windows minus their overlap yields the input."""
        # Arrange
        text = make_text(length)

        # Act
        chunks = ChunkingTask(size, overlap).chunk(text, "doc")

        # Assert
        assert reconstruct(chunks, overlap) == text
        assert len(chunks) == expected_count(length, size, overlap)

    def test_empty_text_should_give_no_chunks(self) -> None:
        """Test empty input produces an empty list."""
        # Act
        chunks = ChunkingTask().chunk("", "doc")

        # Assert
        assert chunks == []


class TestChunkingConfiguration:
    """Test suite for splitter configuration."""

    @pytest.mark.parametrize(("size", "overlap"), [(100, 100), (100, 150), (0, 0)])
    def test_invalid_window_should_raise(self, size: int, overlap: int) -> None:
        """Test overlap must be smaller than size and size positive."""
        # Act & Assert
        with pytest.raises(ValueError):
            SlidingWindowTextSplitter(chunk_size=size, chunk_overlap=overlap)

    def test_pipeline_settings_should_reject_overlap_not_below_size(self) -> None:
        """Test settings validation mirrors the splitter rule."""
        # Act & Assert
        with pytest.raises(ValueError):
            DocumentPipelineSettings(chunk_size=500, chunk_overlap=500)

    def test_pipeline_settings_defaults(self) -> None:
        """Test default window is 1000 characters with 100 overlap."""
        # Act
        settings = DocumentPipelineSettings()

        # Assert
        assert settings.chunk_size == 1000
        assert settings.chunk_overlap == 100


class TestPointIds:
    """Test suite for deterministic point identifiers."""

    def test_point_id_should_be_stable(self) -> None:
        """Test the same document and index always map to the same id."""
        # Act
        first = ChunkingTask().chunk(make_text(1500), "doc-1")
        second = ChunkingTask().chunk(make_text(1500), "doc-1")

        # Assert
        assert [c.point_id for c in first] == [c.point_id for c in second]
        assert first[1].point_id == point_id_for("doc-1", 1)

    def test_point_ids_should_differ_across_documents_and_indexes(self) -> None:
        """Test ids are unique per (document, index)."""
        # Act
        ids = {point_id_for(doc, index) for doc in ("a", "b") for index in range(3)}

        # Assert
        assert len(ids) == 6
