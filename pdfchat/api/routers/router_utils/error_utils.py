"""
Error response helpers.

Every endpoint reports failures with the same {error, details} body.

Dependencies: fastapi, pdfchat.models.chat
System role: Shared HTTP error formatting
"""

from typing import Any

from fastapi.responses import JSONResponse

from pdfchat.models.chat import ErrorResponse


def error_response(status_code: int, error: str, details: Any = None) -> JSONResponse:
    """
    Build a JSON error response.

    Args:
        status_code: HTTP status code
        error: Short error message
        details: Optional detail (message string or context dict)

    Returns:
        JSONResponse: Response with an ErrorResponse body
    """
    body = ErrorResponse(error=error, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())
