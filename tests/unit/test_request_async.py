r"""Unit tests for request_with_retry_async function."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, call, patch

import httpx
import pytest

from aretry import (
    CancellationToken,
    HttpRequestError,
    OperationCancelledError,
    request_with_retry_async,
)
from aretry.backoff import ConstantBackoff, StopBackoff, ZeroBackoff, upto

TEST_URL = "https://api.example.com/data"


##############################################
#     Tests for request_with_retry_async     #
##############################################


@pytest.mark.asyncio
async def test_request_with_retry_async_successful_request(
    mock_async_client: Mock, mock_response: httpx.Response, mock_asleep: Mock
) -> None:
    response = await request_with_retry_async("GET", TEST_URL, client=mock_async_client)
    assert response is mock_response
    mock_async_client.request.assert_awaited_once_with("GET", TEST_URL)
    mock_async_client.aclose.assert_not_called()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_request_with_retry_async_with_kwargs(mock_async_client: Mock) -> None:
    await request_with_retry_async("PUT", TEST_URL, client=mock_async_client, content=b"data")
    mock_async_client.request.assert_awaited_once_with("PUT", TEST_URL, content=b"data")


@pytest.mark.asyncio
async def test_request_with_retry_async_retry_on_retryable_status(
    mock_async_client: Mock, mock_response: httpx.Response, mock_asleep: Mock
) -> None:
    mock_async_client.request.side_effect = [Mock(spec=httpx.Response, status_code=429), mock_response]
    response = await request_with_retry_async(
        "GET", TEST_URL, client=mock_async_client, strategy=upto(2, ConstantBackoff(delay=250))
    )
    assert response is mock_response
    assert mock_async_client.request.await_count == 2
    mock_asleep.assert_called_once_with(0.25)


@pytest.mark.asyncio
async def test_request_with_retry_async_default_strategy(
    mock_async_client: Mock, mock_asleep: Mock
) -> None:
    mock_async_client.request.return_value = Mock(spec=httpx.Response, status_code=503)
    with pytest.raises(HttpRequestError, match=r"failed with status 503"):
        await request_with_retry_async("GET", TEST_URL, client=mock_async_client)
    assert mock_async_client.request.await_count == 4
    assert mock_asleep.call_args_list == [call(0.3), call(0.6), call(1.2)]


@pytest.mark.asyncio
async def test_request_with_retry_async_non_retryable_status(
    mock_async_client: Mock, mock_asleep: Mock
) -> None:
    mock_async_client.request.return_value = Mock(spec=httpx.Response, status_code=400)
    with pytest.raises(HttpRequestError) as exc_info:
        await request_with_retry_async("GET", TEST_URL, client=mock_async_client)
    assert exc_info.value.status_code == 400
    mock_async_client.request.assert_awaited_once()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_request_with_retry_async_transport_error(
    mock_async_client: Mock, mock_response: httpx.Response, mock_asleep: Mock
) -> None:
    mock_async_client.request.side_effect = [httpx.ConnectTimeout("timeout"), mock_response]
    response = await request_with_retry_async(
        "GET", TEST_URL, client=mock_async_client, strategy=ZeroBackoff()
    )
    assert response is mock_response
    mock_asleep.assert_called_once_with(0)


@pytest.mark.asyncio
async def test_request_with_retry_async_transport_error_exhausted(mock_async_client: Mock) -> None:
    mock_async_client.request.side_effect = httpx.ConnectError("refused")
    with pytest.raises(httpx.ConnectError, match=r"refused"):
        await request_with_retry_async("GET", TEST_URL, client=mock_async_client, strategy=StopBackoff())


@pytest.mark.asyncio
async def test_request_with_retry_async_cancelled_token(mock_async_client: Mock) -> None:
    mock_async_client.request.return_value = Mock(spec=httpx.Response, status_code=500)
    token = CancellationToken()
    token.cancel("shutdown")
    with pytest.raises(OperationCancelledError, match=r"operation was cancelled: shutdown"):
        await request_with_retry_async(
            "GET", TEST_URL, client=mock_async_client, strategy=ZeroBackoff(), token=token
        )
    mock_async_client.request.assert_awaited_once()


@pytest.mark.asyncio
async def test_request_with_retry_async_creates_and_closes_client(
    mock_response: httpx.Response,
) -> None:
    with patch("httpx.AsyncClient") as client_cls:
        client_cls.return_value.request = AsyncMock(return_value=mock_response)
        client_cls.return_value.aclose = AsyncMock()
        response = await request_with_retry_async("GET", TEST_URL)
    assert response is mock_response
    client_cls.assert_called_once_with(timeout=10.0)
    client_cls.return_value.aclose.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_request_with_retry_async_with_mock_transport(mock_asleep: Mock) -> None:
    statuses = iter([502, 200])

    async def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(next(statuses), text="ok")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        response = await request_with_retry_async(
            "GET", TEST_URL, client=client, strategy=upto(1, ConstantBackoff(delay=100))
        )
    assert response.status_code == 200
    assert response.text == "ok"
    mock_asleep.assert_called_once_with(0.1)


@pytest.mark.asyncio
async def test_request_with_retry_async_invalid_timeout() -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        await request_with_retry_async("GET", TEST_URL, timeout=0)
