"""Shared pytest fixtures."""

from unittest.mock import MagicMock

import pytest
from fixtures import API_KEY

from boxview import Client


@pytest.fixture
def request_handler() -> MagicMock:
    """Request handler double; tests set send.return_value / side_effect."""
    return MagicMock()


@pytest.fixture
def client(request_handler: MagicMock) -> Client:
    """Client wired to the request handler double."""
    return Client(API_KEY, request_handler=request_handler)
