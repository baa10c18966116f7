"""
Text extraction task using LangChain PyPDFLoader.

Reads a stored PDF and returns its plain text.

Dependencies: langchain_community.document_loaders, pypdf
System role: First stage of document ingestion pipeline
"""

import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from pdfchat.core.exceptions import ExtractionError

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class ExtractionTask:
    """Extract plain text from PDF documents."""

    supported_suffixes: tuple[str, ...] = (".pdf",)

    def extract(self, file_path: str, document_id: str | None = None) -> str:
        """
        Extract the text of every page, joined by blank lines.

        A readable PDF without a text layer yields an empty string.

        Args:
            file_path: Path to the stored document
            document_id: Document identifier for error attribution

        Returns:
            str: Extracted text

        Raises:
            ExtractionError: When the file is missing, unsupported or malformed
        """
        path = Path(file_path)
        if not path.is_file():
            raise ExtractionError(f"File not found: {file_path}", document_id, file_path)

        if path.suffix.lower() not in self.supported_suffixes:
            raise ExtractionError(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                document_id,
                file_path,
            )

        try:
            pages = PyPDFLoader(str(path)).load()
        except Exception as e:
            raise ExtractionError(f"Failed to parse PDF: {e}", document_id, file_path) from e

        if not pages:
            raise ExtractionError("PDF document contains no pages", document_id, file_path)

        text = PAGE_SEPARATOR.join(page.page_content for page in pages if page.page_content)
        if not text.strip():
            logger.warning(
                f"{__name__}:extract - No extractable text",
                extra={"document_id": document_id, "file_path": file_path, "pages": len(pages)},
            )

        return text
