"""
Local upload storage.

Stores uploaded documents under a single directory with unique filenames,
and deletes them on demand or once they exceed a retention age.

Dependencies: pathlib (stdlib)
System role: Document storage for the upload and retention flows
"""

import logging
import random
import time
from datetime import datetime, timezone
from pathlib import Path

from pdfchat.models.document import Document

logger = logging.getLogger(__name__)


class LocalDocumentStore:
    """Filesystem storage for uploaded documents."""

    def __init__(self, upload_dir: str | Path) -> None:
        """
        Initialize store, creating the upload directory if needed.

        Args:
            upload_dir: Directory for uploaded files
        """
        self.upload_dir = Path(upload_dir)
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def unique_filename(prefix: str = "pdf", suffix: str = ".pdf") -> str:
        """Return a collision-resistant filename like pdf-1718000000000-123456789.pdf."""
        millis = int(time.time() * 1000)
        return f"{prefix}-{millis}-{random.randint(0, 10**9 - 1)}{suffix}"

    def save(self, content: bytes, content_type: str = "application/pdf") -> Document:
        """
        Write bytes to a new file.

        Args:
            content: File bytes
            content_type: MIME type of the upload

        Returns:
            Document: Stored document metadata
        """
        filename = self.unique_filename()
        path = self.upload_dir / filename
        path.write_bytes(content)

        logger.info(
            f"{__name__}:save - Stored upload",
            extra={"document_id": filename, "size_bytes": len(content)},
        )
        return Document(
            id=filename,
            filename=filename,
            destination=f"{self.upload_dir}/",
            path=str(path),
            size_bytes=len(content),
            content_type=content_type,
            uploaded_at=datetime.now(timezone.utc),
        )

    def delete_older_than(self, max_age_seconds: float, now: float | None = None) -> int:
        """
        Delete files whose modification time is older than max_age_seconds.

        Args:
            max_age_seconds: Retention age
            now: Reference epoch seconds (defaults to current time)

        Returns:
            int: Number of files deleted
        """
        reference = time.time() if now is None else now
        deleted = 0
        for path in self._files():
            try:
                age = reference - path.stat().st_mtime
                if age > max_age_seconds:
                    path.unlink()
                    deleted += 1
                    logger.info(f"{__name__}:delete_older_than - Deleted old file: {path.name}")
            except FileNotFoundError:
                continue
        return deleted

    def delete_all(self) -> int:
        """
        Delete every stored file.

        Returns:
            int: Number of files deleted
        """
        deleted = 0
        for path in self._files():
            try:
                path.unlink()
                deleted += 1
            except FileNotFoundError:
                continue
        return deleted

    def _files(self) -> list[Path]:
        if not self.upload_dir.exists():
            return []
        return [path for path in self.upload_dir.iterdir() if path.is_file()]
