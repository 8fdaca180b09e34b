"""
Box View Session API: time-limited viewing grants for a document.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Any

from .base import Resource, to_rfc3339
from .document import Document

if TYPE_CHECKING:
    from ..client import Client


@dataclass
class SessionUrls:
    """Endpoints handed out with a session."""

    view: str | None = None
    assets: str | None = None
    realtime: str | None = None


@dataclass
class Session(Resource):
    """
    A viewing session.

    ``document`` refers to the document the session was created for; the
    session does not own it. Sessions expire on their own at ``expires_at``
    (RFC 3339) or can be deleted early.
    """

    path = "/sessions"

    client: "Client" = field(repr=False, compare=False)
    id: str
    document: Document | None = None
    expires_at: str | None = None
    urls: SessionUrls = field(default_factory=SessionUrls)

    @classmethod
    def from_api_response(cls, client: "Client", data: dict) -> "Session":
        """Create from a Box View session payload."""
        session = cls(client=client, id=data["id"])
        session._set_values(data)
        return session

    def _set_values(self, data: dict) -> None:
        if isinstance(data.get("document"), dict):
            self.document = Document.from_api_response(self.client, data["document"])

        expires_at = data.get("expires_at", data.get("expiresAt"))
        if expires_at:
            self.expires_at = to_rfc3339(expires_at)

        urls = data.get("urls")
        if isinstance(urls, dict):
            self.urls = SessionUrls(
                view=urls.get("view", self.urls.view),
                assets=urls.get("assets", self.urls.assets),
                realtime=urls.get("realtime", self.urls.realtime),
            )

    @property
    def view_url(self) -> str | None:
        return self.urls.view

    @property
    def assets_url(self) -> str | None:
        return self.urls.assets

    @property
    def realtime_url(self) -> str | None:
        return self.urls.realtime

    @classmethod
    def create(
        cls,
        client: "Client",
        document_id: str,
        duration: int | None = None,
        expires_at: str | date | None = None,
        is_downloadable: bool | None = None,
        is_text_selectable: bool | None = None,
    ) -> "Session":
        """
        Create a session for a document.

        Args:
            client: Client to send the request with
            document_id: ID of the document to view
            duration: Session length in minutes
            expires_at: Explicit expiry (string or date)
            is_downloadable: Allow downloading the original file
            is_text_selectable: Allow selecting text in the viewer

        Returns:
            The new Session, with its document back-reference populated
        """
        post_params: dict[str, Any] = {"document_id": document_id}

        if duration is not None:
            post_params["duration"] = duration
        if expires_at is not None:
            post_params["expires_at"] = to_rfc3339(expires_at)
        if is_downloadable is not None:
            post_params["is_downloadable"] = is_downloadable
        if is_text_selectable is not None:
            post_params["is_text_selectable"] = is_text_selectable

        metadata = cls.request(client, "", None, post_params)
        return cls.from_api_response(client, metadata)

    def delete(self) -> bool:
        """Delete the session. True when the API answers with an empty body."""
        response = self.request(
            self.client,
            f"/{self.id}",
            http_method="DELETE",
            raw_response=True,
        )
        return not response
