"""Tests for the Box View client."""

import io

import pytest
from fixtures import API_KEY, SAMPLE_DOCUMENT

from boxview import Client, ClientConfig, Document, Request


class TestClient:
    def test_api_key(self):
        assert Client(API_KEY).api_key == API_KEY

    def test_no_api_key(self):
        assert Client().api_key is None

    def test_api_key_from_config(self):
        client = Client(config=ClientConfig(api_key="from-config"))

        assert client.api_key == "from-config"
        assert client.request_handler.api_key == "from-config"

    def test_default_request_handler(self):
        client = Client(API_KEY)

        assert isinstance(client.request_handler, Request)
        assert client.request_handler.api_key == API_KEY
        assert client.request_handler.config is client.config

    def test_injected_request_handler(self, client, request_handler):
        assert client.request_handler is request_handler

    def test_clients_do_not_share_handlers(self):
        first = Client("key-one")
        second = Client("key-two")

        assert first.request_handler is not second.request_handler
        assert first.request_handler.session is not second.request_handler.session


class TestClientShortcuts:
    """The client forwards to Document / Session with itself as client."""

    def test_find_documents(self, client, request_handler):
        request_handler.send.return_value = {"document_collection": {"entries": [SAMPLE_DOCUMENT]}}

        documents = client.find_documents(limit=1)

        request_handler.send.assert_called_once_with("/documents", {"limit": 1}, None)
        assert documents[0].client is client

    def test_get_document(self, client, request_handler):
        request_handler.send.return_value = SAMPLE_DOCUMENT

        document = client.get_document(SAMPLE_DOCUMENT["id"])

        assert isinstance(document, Document)
        assert document.id == SAMPLE_DOCUMENT["id"]

    def test_upload_url(self, client, request_handler):
        request_handler.send.return_value = SAMPLE_DOCUMENT

        client.upload_url("http://example.test/a.pdf", name="A", non_svg=True)

        request_handler.send.assert_called_once_with(
            "/documents", None, {"url": "http://example.test/a.pdf", "name": "A", "non_svg": True}
        )

    def test_upload_file_uses_configured_upload_host(self, request_handler):
        config = ClientConfig(api_key=API_KEY, upload_host="upload.example.test")
        client = Client(config=config, request_handler=request_handler)
        request_handler.send.return_value = SAMPLE_DOCUMENT
        file = io.BytesIO(b"%PDF")

        client.upload_file(file)

        assert request_handler.send.call_args.kwargs == {"file": file, "host": "upload.example.test"}

    @pytest.mark.parametrize("non_svg", [False, None])
    def test_falsy_non_svg_not_sent(self, client, request_handler, non_svg):
        request_handler.send.return_value = SAMPLE_DOCUMENT

        client.upload_url("http://example.test/a.pdf", non_svg=non_svg)

        assert "non_svg" not in request_handler.send.call_args.args[2]
