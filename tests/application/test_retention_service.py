"""
Test suite for RetentionService and local upload storage.

System role: Verification of upload retention policy
"""

import os
import re
import time
from pathlib import Path

from pdfchat.application.services.retention_service import RetentionService
from pdfchat.boundary.storage.local_store import LocalDocumentStore


def write_file(directory: Path, name: str, age_seconds: float) -> Path:
    path = directory / name
    path.write_bytes(b"%PDF-1.4")
    mtime = time.time() - age_seconds
    os.utime(path, (mtime, mtime))
    return path


class TestRetentionService:
    """Test suite for RetentionService."""

    def test_sweep_should_delete_only_expired_files(
        self,
        document_store: LocalDocumentStore,
        upload_dir: Path,
    ) -> None:
        """Test files older than the retention age are removed."""
        # Arrange
        old = write_file(upload_dir, "pdf-1-1.pdf", age_seconds=7200)
        fresh = write_file(upload_dir, "pdf-2-2.pdf", age_seconds=60)
        service = RetentionService(document_store, retention_seconds=3600)

        # Act
        deleted = service.sweep_expired()

        # Assert
        assert deleted == 1
        assert not old.exists()
        assert fresh.exists()

    def test_sweep_with_nothing_expired_should_delete_nothing(
        self,
        document_store: LocalDocumentStore,
        upload_dir: Path,
    ) -> None:
        """Test fresh files survive the sweep."""
        # Arrange
        write_file(upload_dir, "pdf-3-3.pdf", age_seconds=10)

        # Act & Assert
        assert RetentionService(document_store, retention_seconds=3600).sweep_expired() == 0

    def test_purge_should_delete_every_file(
        self,
        document_store: LocalDocumentStore,
        upload_dir: Path,
    ) -> None:
        """Test manual cleanup removes everything regardless of age."""
        # Arrange
        write_file(upload_dir, "pdf-1-1.pdf", age_seconds=0)
        write_file(upload_dir, "pdf-2-2.pdf", age_seconds=0)

        # Act
        deleted = RetentionService(document_store).purge_all()

        # Assert
        assert deleted == 2
        assert list(upload_dir.iterdir()) == []


class TestLocalDocumentStore:
    """Test suite for LocalDocumentStore."""

    def test_unique_filename_should_follow_upload_pattern(self) -> None:
        """Test names look like pdf-{epoch_ms}-{random}.pdf."""
        # Act
        name = LocalDocumentStore.unique_filename()

        # Assert
        assert re.fullmatch(r"pdf-\d{13}-\d+\.pdf", name)

    def test_save_should_return_document_metadata(self, document_store: LocalDocumentStore) -> None:
        """Test saved files are described by a Document."""
        # Act
        document = document_store.save(b"%PDF-1.4 content", "application/pdf")

        # Assert
        assert Path(document.path).is_file()
        assert document.size_bytes == len(b"%PDF-1.4 content")
        assert document.content_type == "application/pdf"

    def test_delete_older_than_should_use_reference_time(
        self,
        document_store: LocalDocumentStore,
        upload_dir: Path,
    ) -> None:
        """Test the age check is relative to the given clock."""
        # Arrange
        write_file(upload_dir, "pdf-1-1.pdf", age_seconds=0)

        # Act
        deleted = document_store.delete_older_than(3600, now=time.time() + 7200)

        # Assert
        assert deleted == 1

    def test_missing_directory_should_be_created(self, tmp_path: Path) -> None:
        """Test the store creates its directory."""
        # Act
        LocalDocumentStore(tmp_path / "new" / "uploads")

        # Assert
        assert (tmp_path / "new" / "uploads").is_dir()
