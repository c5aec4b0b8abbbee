from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from aretry.backoff import BaseBackoffStrategy

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_strategy() -> Mock:
    """Create a mock backoff strategy returning 0 ms on every call.

    Tests can override ``next_backoff.side_effect`` or
    ``next_backoff.return_value`` to script the delays.
    """
    strategy = Mock(spec=BaseBackoffStrategy)
    strategy.next_backoff.return_value = 0
    return strategy


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    return Mock(spec=httpx.Response, status_code=200)


@pytest.fixture
def mock_client(mock_response: httpx.Response) -> httpx.Client:
    """Create a mock httpx.Client answering with ``mock_response``."""
    return Mock(spec=httpx.Client, request=Mock(return_value=mock_response))


@pytest.fixture
def mock_async_client(mock_response: httpx.Response) -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient answering with ``mock_response``."""
    return Mock(
        spec=httpx.AsyncClient,
        request=AsyncMock(return_value=mock_response),
        aclose=AsyncMock(),
    )
