"""
Text chunking task using a fixed sliding-window splitter.

Splits extracted text into equal-length windows that overlap by a fixed
number of characters, so dropping the overlap from every window after the
first reconstructs the original text exactly.

Dependencies: langchain_text_splitters
System role: Second stage of document ingestion pipeline
"""

from collections.abc import Iterator

from langchain_text_splitters import TextSplitter

from ..models import Chunk


def iter_windows(text: str, chunk_size: int, chunk_overlap: int) -> Iterator[str]:
    """
    Yield consecutive windows of text.

    Every window except possibly the last has length chunk_size, and each
    window starts chunk_size - chunk_overlap characters after the previous one.

    Args:
        text: Text to split
        chunk_size: Window length in characters
        chunk_overlap: Characters shared with the previous window

    Yields:
        str: Text windows in document order
    """
    if not text:
        return

    step = chunk_size - chunk_overlap
    start = 0
    while True:
        yield text[start:start + chunk_size]
        if start + chunk_size >= len(text):
            return
        start += step


class SlidingWindowTextSplitter(TextSplitter):
    """LangChain splitter producing fixed-size windows with exact overlap."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 100, **kwargs) -> None:
        """
        Initialize splitter.

        Args:
            chunk_size: Window length in characters
            chunk_overlap: Characters shared by consecutive windows
            **kwargs: Additional TextSplitter arguments

        Raises:
            ValueError: When chunk_overlap is not smaller than chunk_size
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if chunk_overlap >= chunk_size:
            raise ValueError(
                f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})"
            )
        # Windows are cut at exact offsets; stripping would break reconstruction
        kwargs["strip_whitespace"] = False
        super().__init__(chunk_size=chunk_size, chunk_overlap=chunk_overlap, **kwargs)

    def split_text(self, text: str) -> list[str]:
        """Split text into overlapping windows."""
        return list(iter_windows(text, self._chunk_size, self._chunk_overlap))


class ChunkingTask:
    """Split extracted text into ordered Chunk models."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 100,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
        """
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = SlidingWindowTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
        )

    def chunk(self, text: str, document_id: str) -> list[Chunk]:
        """
        Split text into chunks.

        Args:
            text: Extracted document text (may be empty)
            document_id: Parent document identifier

        Returns:
            list[Chunk]: Chunks in document order, empty for empty text
        """
        return [
            Chunk(document_id=document_id, index=index, text=window)
            for index, window in enumerate(self._splitter.split_text(text))
        ]
