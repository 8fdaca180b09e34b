"""
Box View API client.

Upload documents by URL or file, read their conversion status, download
converted output and thumbnails, and create time-limited viewing sessions.
"""

__version__ = "0.1.0"

from .client import Client
from .config import ClientConfig, ConfigValidationError, load_config
from .request import BoxViewError, Request, RequestHandler
from .resources import Document, DocumentStatus, Session, SessionUrls

__all__ = [
    "Client",
    "ClientConfig",
    "ConfigValidationError",
    "load_config",
    "BoxViewError",
    "Request",
    "RequestHandler",
    "Document",
    "DocumentStatus",
    "Session",
    "SessionUrls",
]
