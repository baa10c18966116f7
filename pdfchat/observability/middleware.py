"""
FastAPI middleware for observability.

Correlation ID propagation and request logging. Health checks are logged
at DEBUG so they do not drown out real traffic.

Dependencies: fastapi, starlette, pdfchat.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from pdfchat.observability.correlation import clear_correlation_id, set_correlation_id
from pdfchat.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATH_PREFIXES = ("/api/v1/health",)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and timing.

    For streaming responses the timing covers the time to first byte,
    since call_next returns once headers are ready.
    """

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        method = request.method
        path = request.url.path
        level = logging.DEBUG if path.startswith(QUIET_PATH_PREFIXES) else logging.INFO

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - Unhandled {type(e).__name__}",
                extra={"method": method, "path": path, "process_time_ms": _elapsed_ms(start)},
            )
            raise

        log_with_context(
            logger,
            level,
            f"{method} {path} - {response.status_code}",
            method=method,
            path=path,
            status_code=response.status_code,
            client_host=request.client.host if request.client else None,
            process_time_ms=_elapsed_ms(start),
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID to the request context and echo it in the response."""

    async def dispatch(self, request: Request, call_next):
        """
        Reuse the caller's X-Correlation-ID or generate one.

        Args:
            request: Incoming request
            call_next: Next middleware in chain

        Returns:
            Response: Response carrying the correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
