"""
Upload storage boundary layer.
"""

from pdfchat.boundary.storage.local_store import LocalDocumentStore

__all__ = ["LocalDocumentStore"]
