"""
Box View Document API: upload, status, download, thumbnails and deletion.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import IO, TYPE_CHECKING, Any

from ..request import INVALID_FILE_ERROR, INVALID_RESPONSE_ERROR, BoxViewError
from .base import Resource, to_rfc3339

if TYPE_CHECKING:
    from ..client import Client
    from .session import Session

logger = logging.getLogger(__name__)


class DocumentStatus(str, Enum):
    """Conversion status, owned by the server."""

    QUEUED = "queued"
    PROCESSING = "processing"
    DONE = "done"
    ERROR = "error"


def _parse_status(value: Any) -> DocumentStatus | None:
    if value is None:
        return None
    try:
        return DocumentStatus(value)
    except ValueError:
        logger.warning(f"Unknown document status from Box View: {value!r}")
        return None


def _is_readable_stream(file: Any) -> bool:
    """True for an open, readable file-like object."""
    if file is None or isinstance(file, (str, bytes)):
        return False
    if not callable(getattr(file, "read", None)):
        return False
    if getattr(file, "closed", False):
        return False
    readable = getattr(file, "readable", None)
    return bool(readable()) if callable(readable) else True


def _upload_params(
    name: str | None,
    thumbnails: Sequence[str] | str | None,
    non_svg: bool | None,
) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if name:
        params["name"] = name
    if thumbnails:
        if not isinstance(thumbnails, str):
            thumbnails = ",".join(thumbnails)
        params["thumbnails"] = thumbnails
    if non_svg:
        params["non_svg"] = non_svg
    return params


@dataclass
class Document(Resource):
    """
    A document stored in Box View.

    Only ``name`` can be changed, through update(). The id, status and
    created_at (RFC 3339) values come from the server.
    """

    path = "/documents"

    # Document fields that update() is allowed to send
    UPDATEABLE_FIELDS = ("name",)

    # Fields requested by get()
    METADATA_FIELDS = ("id", "created_at", "name", "status")

    client: "Client" = field(repr=False, compare=False)
    id: str
    name: str | None = None
    status: DocumentStatus | None = None
    created_at: str | None = None

    @classmethod
    def from_api_response(cls, client: "Client", data: dict) -> "Document":
        """Create from a Box View document payload."""
        document = cls(client=client, id=data["id"])
        document._set_values(data)
        return document

    def _set_values(self, data: dict) -> None:
        created_at = data.get("created_at", data.get("createdAt"))
        if created_at:
            self.created_at = to_rfc3339(created_at)
        if data.get("name") is not None:
            self.name = data["name"]
        if data.get("status") is not None:
            self.status = _parse_status(data["status"])

    # --- Lookup ---

    @classmethod
    def get(cls, client: "Client", document_id: str) -> "Document":
        """
        Fetch a document's metadata by ID.

        Args:
            client: Client to send the request with
            document_id: Box View document ID

        Returns:
            Document populated from the API
        """
        metadata = cls.request(
            client,
            f"/{document_id}",
            {"fields": ",".join(cls.METADATA_FIELDS)},
        )
        return cls.from_api_response(client, metadata)

    @classmethod
    def find(
        cls,
        client: "Client",
        limit: int | None = None,
        created_before: str | date | None = None,
        created_after: str | date | None = None,
    ) -> list["Document"]:
        """
        List documents matching the given filters.

        Args:
            client: Client to send the request with
            limit: Maximum number of documents to return
            created_before: Upper bound on creation date (string or date)
            created_after: Lower bound on creation date (string or date)

        Returns:
            Documents in the order the API returned them

        Raises:
            BoxViewError: invalid_response if the document collection is missing
        """
        get_params: dict[str, Any] = {}
        if limit:
            get_params["limit"] = limit
        if created_before:
            get_params["created_before"] = to_rfc3339(created_before)
        if created_after:
            get_params["created_after"] = to_rfc3339(created_after)

        response = cls.request(client, "", get_params)

        collection = response.get("document_collection") if isinstance(response, dict) else None
        if not collection or not isinstance(collection, dict) or "entries" not in collection:
            raise BoxViewError(
                INVALID_RESPONSE_ERROR,
                f"Document list response is not in a valid format: {response!r}",
            )

        return [cls.from_api_response(client, entry) for entry in collection["entries"]]

    # --- Upload ---

    @classmethod
    def upload(cls, client: "Client", source: str | IO[bytes], **params: Any) -> "Document":
        """Upload by URL if ``source`` is a string, otherwise as a file stream."""
        if isinstance(source, str):
            return cls.upload_url(client, source, **params)
        return cls.upload_file(client, source, **params)

    @classmethod
    def upload_url(
        cls,
        client: "Client",
        url: str,
        name: str | None = None,
        thumbnails: Sequence[str] | str | None = None,
        non_svg: bool | None = None,
    ) -> "Document":
        """
        Have Box View fetch and convert the file at ``url``.

        Args:
            client: Client to send the request with
            url: Publicly reachable URL of the file
            name: Override the document name
            thumbnails: "WxH" sizes to pre-render, as a list or comma string
            non_svg: Also create a non-SVG version for older browsers

        Returns:
            The new Document
        """
        post_params = {"url": url}
        post_params.update(_upload_params(name, thumbnails, non_svg))

        metadata = cls.request(client, "", None, post_params)
        logger.info(f"Uploaded {url} as Box View document {metadata.get('id')}")
        return cls.from_api_response(client, metadata)

    @classmethod
    def upload_file(
        cls,
        client: "Client",
        file: IO[bytes],
        name: str | None = None,
        thumbnails: Sequence[str] | str | None = None,
        non_svg: bool | None = None,
    ) -> "Document":
        """
        Upload file content as a multipart request to the upload host.

        Args:
            client: Client to send the request with
            file: Open binary stream to upload
            name: Override the document name
            thumbnails: "WxH" sizes to pre-render, as a list or comma string
            non_svg: Also create a non-SVG version for older browsers

        Returns:
            The new Document

        Raises:
            BoxViewError: invalid_file if ``file`` is not a readable stream
        """
        if not _is_readable_stream(file):
            raise BoxViewError(
                INVALID_FILE_ERROR,
                f"Expected a readable file stream, got {type(file).__name__}",
            )

        metadata = cls.request(
            client,
            "",
            None,
            _upload_params(name, thumbnails, non_svg),
            file=file,
            host=client.config.upload_host,
        )
        logger.info(f"Uploaded file as Box View document {metadata.get('id')}")
        return cls.from_api_response(client, metadata)

    # --- Instance operations ---

    def update(self, **fields: Any) -> bool:
        """
        Update document metadata. Only ``name`` is supported; other fields
        are dropped.

        Returns:
            True once the API accepted the update
        """
        post_params = {k: fields[k] for k in self.UPDATEABLE_FIELDS if fields.get(k) is not None}

        metadata = self.request(self.client, f"/{self.id}", None, post_params, http_method="PUT")
        self._set_values(metadata)
        return True

    def delete(self) -> bool:
        """Delete the document. True when the API answers with an empty body."""
        response = self.request(
            self.client,
            f"/{self.id}",
            http_method="DELETE",
            raw_response=True,
        )
        return not response

    def download(self, extension: str | None = None) -> bytes:
        """
        Download the document content.

        Args:
            extension: "pdf" or "zip"; the original format if omitted

        Returns:
            File bytes
        """
        suffix = f".{extension}" if extension else ""
        return self.request(self.client, f"/{self.id}/content{suffix}", raw_response=True)

    def thumbnail(self, width: int, height: int) -> bytes:
        """Download a thumbnail image of the given size in pixels."""
        return self.request(
            self.client,
            f"/{self.id}/thumbnail",
            {"width": width, "height": height},
            raw_response=True,
        )

    def create_session(self, **params: Any) -> "Session":
        """Create a viewing session for this document (see Session.create)."""
        from .session import Session

        return Session.create(self.client, self.id, **params)
