"""
Box View client: one API key, one request handler.
"""

from collections.abc import Sequence
from datetime import date
from pathlib import Path
from typing import IO, Any

from .config import ClientConfig, ConfigValidationError, load_config
from .request import Request, RequestHandler
from .resources import Document, Session


class Client:
    """
    Entry point to the Box View API.

    Each client owns its API key and request handler, so clients with
    different keys can be used side by side. Pass ``request_handler`` to
    substitute the dispatcher (e.g. a test double).
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: ClientConfig | None = None,
        request_handler: RequestHandler | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Box View API key (falls back to config.api_key)
            config: Hosts, base path and timeouts
            request_handler: Dispatcher used for every call
        """
        self._config = config or ClientConfig(api_key=api_key)
        self._api_key = api_key if api_key is not None else self._config.api_key
        self._request_handler = request_handler or Request(self._api_key, self._config)

    @classmethod
    def from_config_file(cls, config_path: Path) -> "Client":
        """
        Build a client from a YAML config file (see load_config).

        Raises:
            ConfigValidationError: If the resulting configuration is invalid
        """
        config = load_config(config_path)
        errors = config.validate()
        if errors:
            raise ConfigValidationError("; ".join(errors))
        return cls(config=config)

    @property
    def api_key(self) -> str | None:
        return self._api_key

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def request_handler(self) -> RequestHandler:
        return self._request_handler

    def find_documents(
        self,
        limit: int | None = None,
        created_before: str | date | None = None,
        created_after: str | date | None = None,
    ) -> list[Document]:
        """List documents, see Document.find."""
        return Document.find(
            self,
            limit=limit,
            created_before=created_before,
            created_after=created_after,
        )

    def get_document(self, document_id: str) -> Document:
        """Fetch a document by ID."""
        return Document.get(self, document_id)

    def upload_file(
        self,
        file: IO[bytes],
        name: str | None = None,
        thumbnails: Sequence[str] | str | None = None,
        non_svg: bool | None = None,
    ) -> Document:
        """Upload a file stream, see Document.upload_file."""
        return Document.upload_file(
            self, file, name=name, thumbnails=thumbnails, non_svg=non_svg
        )

    def upload_url(
        self,
        url: str,
        name: str | None = None,
        thumbnails: Sequence[str] | str | None = None,
        non_svg: bool | None = None,
    ) -> Document:
        """Upload a file by URL, see Document.upload_url."""
        return Document.upload_url(
            self, url, name=name, thumbnails=thumbnails, non_svg=non_svg
        )

    def create_session(self, document_id: str, **params: Any) -> Session:
        """Create a viewing session, see Session.create."""
        return Session.create(self, document_id, **params)
