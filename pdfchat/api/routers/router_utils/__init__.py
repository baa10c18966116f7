"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from pdfchat.api.routers.router_utils.error_utils import error_response

__all__ = ["error_response"]
