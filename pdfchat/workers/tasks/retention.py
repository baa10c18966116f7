"""
Upload retention Celery task.

Task: cleanup-old-files(), scheduled by Celery beat.

Dependencies: pdfchat.application.services, pdfchat.boundary.storage, pdfchat.workers
System role: Periodic upload cleanup
"""

from pdfchat.application.services.retention_service import RetentionService
from pdfchat.boundary.storage.local_store import LocalDocumentStore
from pdfchat.configs import get_settings
from pdfchat.workers import celery_app


@celery_app.task(name="cleanup-old-files")
def cleanup_old_files() -> int:
    """
    Delete uploads older than the retention age.

    Returns:
        int: Number of files deleted
    """
    settings = get_settings()
    service = RetentionService(
        store=LocalDocumentStore(settings.storage.upload_dir),
        retention_seconds=settings.storage.retention_seconds,
    )
    return service.sweep_expired()
