"""
Shared plumbing for Box View resources.
"""

from datetime import date, datetime, time, timezone
from typing import TYPE_CHECKING, Any

from dateutil import parser as date_parser

from ..request import INVALID_DATE_ERROR, BoxViewError

if TYPE_CHECKING:
    from ..client import Client


def to_rfc3339(value: str | date | datetime) -> str:
    """
    Normalize a date to an RFC 3339 UTC timestamp.

    Accepts a datetime, a date or a date string in almost any format.
    Naive values are taken to be UTC. Output looks like
    ``2024-11-19T10:00:00+00:00`` and feeding it back returns it unchanged.

    Raises:
        BoxViewError: With code invalid_date if the value cannot be parsed
    """
    if isinstance(value, str):
        try:
            value = date_parser.parse(value)
        except (ValueError, OverflowError) as e:
            raise BoxViewError(INVALID_DATE_ERROR, f"Could not parse date {value!r}: {e}") from e
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    elif not isinstance(value, datetime):
        raise BoxViewError(
            INVALID_DATE_ERROR,
            f"Expected a date string, date or datetime, got {type(value).__name__}",
        )

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    return value.astimezone(timezone.utc).isoformat(timespec="seconds")


class Resource:
    """Base class for API resources.

    Subclasses set ``path``; request() prefixes it to the sub-path and hands
    the call to the client's request handler.
    """

    path = "/"

    @classmethod
    def request(
        cls,
        client: "Client",
        path: str = "",
        get_params: dict | None = None,
        post_params: dict | None = None,
        **options: Any,
    ) -> Any:
        return client.request_handler.send(
            cls.path + (path or ""),
            get_params,
            post_params,
            **options,
        )
