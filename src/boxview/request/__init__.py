"""
Box View request dispatching.

Provides:
- Request: authenticated sender with throttle retry and error classification
- RequestHandler: the send() protocol resources depend on
- BoxViewError and its error codes
"""

from .handler import (
    BAD_REQUEST_ERROR,
    INVALID_DATE_ERROR,
    INVALID_FILE_ERROR,
    INVALID_RESPONSE_ERROR,
    JSON_RESPONSE_ERROR,
    METHOD_NOT_ALLOWED_ERROR,
    NOT_FOUND_ERROR,
    REQUEST_TIMEOUT_ERROR,
    SERVER_ERROR,
    TOO_MANY_REQUESTS_ERROR,
    TRANSPORT_ERROR,
    UNAUTHORIZED_ERROR,
    UNSUPPORTED_MEDIA_TYPE_ERROR,
    BoxViewError,
    Request,
    RequestHandler,
)

__all__ = [
    "Request",
    "RequestHandler",
    "BoxViewError",
    "BAD_REQUEST_ERROR",
    "UNAUTHORIZED_ERROR",
    "NOT_FOUND_ERROR",
    "METHOD_NOT_ALLOWED_ERROR",
    "UNSUPPORTED_MEDIA_TYPE_ERROR",
    "TOO_MANY_REQUESTS_ERROR",
    "SERVER_ERROR",
    "TRANSPORT_ERROR",
    "JSON_RESPONSE_ERROR",
    "REQUEST_TIMEOUT_ERROR",
    "INVALID_FILE_ERROR",
    "INVALID_RESPONSE_ERROR",
    "INVALID_DATE_ERROR",
]
