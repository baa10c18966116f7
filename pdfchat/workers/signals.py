"""
Celery signal handlers.

Configures application logging in worker processes and reports job
outcomes (completed, retrying, failed).

Dependencies: celery.signals, pdfchat.observability
System role: Job outcome reporting
"""

import logging

from celery.signals import setup_logging, task_failure, task_retry, task_success

from pdfchat.configs import get_settings
from pdfchat.observability.logger import configure_logging

logger = logging.getLogger(__name__)


@setup_logging.connect
def on_setup_logging(**kwargs) -> None:
    """Use the application log format instead of Celery's default."""
    configure_logging(get_settings().log_level)


@task_success.connect
def on_task_success(sender=None, result=None, **kwargs) -> None:
    """Log a completed job."""
    task_id = sender.request.id if sender is not None else None
    logger.info(
        f"{__name__}:on_task_success - Job {task_id} completed",
        extra={"task": getattr(sender, "name", None), "result": result},
    )


@task_retry.connect
def on_task_retry(sender=None, request=None, reason=None, **kwargs) -> None:
    """Log a job scheduled for retry."""
    logger.warning(
        f"{__name__}:on_task_retry - Job {getattr(request, 'id', None)} retrying: {reason}",
        extra={"task": getattr(sender, "name", None)},
    )


@task_failure.connect
def on_task_failure(sender=None, task_id=None, exception=None, **kwargs) -> None:
    """Log a job that failed permanently."""
    logger.error(
        f"{__name__}:on_task_failure - Job {task_id} failed: {type(exception).__name__}: {exception}",
        extra={"task": getattr(sender, "name", None)},
    )
