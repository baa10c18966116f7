"""
Retention service.

Deletes uploaded documents once their ingestion window has passed.

Dependencies: pdfchat.boundary.storage
System role: Upload retention policy
"""

import logging

from pdfchat.boundary.storage.local_store import LocalDocumentStore

logger = logging.getLogger(__name__)


class RetentionService:
    """Apply the upload retention policy."""

    def __init__(self, store: LocalDocumentStore, retention_seconds: int = 3600) -> None:
        """
        Initialize retention service.

        Args:
            store: Upload storage
            retention_seconds: Maximum file age before deletion
        """
        self.store = store
        self.retention_seconds = retention_seconds

    def sweep_expired(self) -> int:
        """
        Delete files older than the retention age.

        Returns:
            int: Number of files deleted
        """
        deleted = self.store.delete_older_than(self.retention_seconds)
        if deleted:
            logger.info(f"{__name__}:sweep_expired - Cleaned up {deleted} old file(s)")
        return deleted

    def purge_all(self) -> int:
        """
        Delete every stored upload.

        Returns:
            int: Number of files deleted
        """
        deleted = self.store.delete_all()
        logger.info(f"{__name__}:purge_all - Deleted {deleted} file(s)")
        return deleted
