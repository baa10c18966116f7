"""
Structured logging helpers.

Keep log records small and serializable: uploaded bytes, chunk lists and
embedding vectors are summarized instead of dumped.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

# Attributes LogRecord sets itself; passing any of them in `extra` raises KeyError
RESERVED_RECORD_KEYS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a value for a log record.

    Args:
        value: Value to render
        max_length: Maximum length before truncating

    Returns:
        str: Short string representation
    """
    if value is None:
        return "None"
    if isinstance(value, (bytes, bytearray)):
        return f"bytes({len(value)})"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    try:
        text = value if isinstance(value, str) else str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def safe_extra(fields: dict[str, Any]) -> dict[str, str]:
    """
    Build an `extra` mapping from arbitrary context.

    Keys that clash with LogRecord attributes are prefixed with "ctx_".

    Args:
        fields: Context key-value pairs

    Returns:
        dict[str, str]: Values rendered with safe_log_value
    """
    return {
        (f"ctx_{key}" if key in RESERVED_RECORD_KEYS else key): safe_log_value(val)
        for key, val in fields.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with every context value passed through safe_log_value.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Extra fields for the record
    """
    logger.log(level, message, extra=safe_extra(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an exception with traceback, context and any attached error details.

    Application errors carry a `details` dict (document_id, stage, operation);
    its entries are added to the record without overriding explicit context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Extra fields for the record
    """
    fields = dict(getattr(exc, "details", None) or {})
    fields.update(context)
    extra = safe_extra(fields)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(getattr(exc, "message", None) or str(exc))
    logger.error(message, exc_info=exc, extra=extra)
