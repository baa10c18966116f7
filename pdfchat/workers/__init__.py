"""
Celery workers module.

Async task processing for document ingestion and upload retention.
Start a worker with:

    celery -A pdfchat.workers worker -Q fileupload
    celery -A pdfchat.workers beat

Dependencies: celery, pdfchat.configs
System role: Background task processing
"""

from celery import Celery

from pdfchat.configs import get_settings

settings = get_settings()
celery_config = settings.celery

celery_app = Celery(
    "pdfchat",
    broker=celery_config.broker_url,
    backend=celery_config.result_backend_url,
    include=[
        "pdfchat.workers.tasks.document_ingestion",
        "pdfchat.workers.tasks.retention",
    ],
)

celery_app.conf.update(
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    timezone=celery_config.timezone,
    task_default_queue=celery_config.queue_name,
    worker_concurrency=celery_config.worker_concurrency,
    # At-least-once: acknowledge after completion, requeue if the worker dies
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    task_track_started=True,
    result_extended=True,
    worker_prefetch_multiplier=1,
    beat_schedule={
        "cleanup-old-files": {
            "task": "cleanup-old-files",
            "schedule": float(settings.storage.sweep_interval_seconds),
        },
    },
)

from pdfchat.workers import signals  # noqa: E402,F401  (registers signal handlers)
