"""
Box View API resources.

Provides:
- Document: upload (URL or file), get, find, update, delete, download, thumbnail
- Session: create and delete viewing sessions
- to_rfc3339: date normalization used for all date parameters
"""

from .base import Resource, to_rfc3339
from .document import Document, DocumentStatus
from .session import Session, SessionUrls

__all__ = [
    "Resource",
    "to_rfc3339",
    "Document",
    "DocumentStatus",
    "Session",
    "SessionUrls",
]
