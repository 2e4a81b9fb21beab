from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from tests.helpers import RecordingHandler, create_paste_json, create_user_json

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_client() -> httpx.Client:
    """Create a mock httpx.Client for testing."""
    return Mock(spec=httpx.Client)


@pytest.fixture
def mock_async_client() -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient for testing."""
    return Mock(spec=httpx.AsyncClient, aclose=AsyncMock())


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()


@pytest.fixture
def paste_json() -> dict[str, Any]:
    """Create the JSON object of a paste with two pasties."""
    return create_paste_json()


@pytest.fixture
def user_json() -> dict[str, Any]:
    """Create the JSON object of a user."""
    return create_user_json()


@pytest.fixture
def handler() -> RecordingHandler:
    """Create a request handler answering 200 with an empty body."""
    return RecordingHandler()


@pytest.fixture
def http_client(handler: RecordingHandler) -> Generator[httpx.Client, None, None]:
    """Create an httpx.Client whose requests are answered by
    ``handler``."""
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        yield client


@pytest.fixture
def http_async_client(handler: RecordingHandler) -> httpx.AsyncClient:
    """Create an httpx.AsyncClient whose requests are answered by
    ``handler``.

    The client is never opened by a ``with`` block, so it does not need
    to be closed.
    """
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
