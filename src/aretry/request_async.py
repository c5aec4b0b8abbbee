r"""Contains utility functions for asynchronous HTTP requests with
automatic retry logic."""

from __future__ import annotations

__all__ = ["request_with_retry_async"]

from typing import TYPE_CHECKING, Any

import httpx

from aretry.config import DEFAULT_TIMEOUT, RETRY_STATUS_CODES
from aretry.core.http_logic import (
    check_response,
    default_http_strategy,
    make_http_stop,
    validate_timeout,
)
from aretry.loop.executor_async import retry_async

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.cancellation import CancellationToken
    from aretry.loop.executor_core import StopPredicate


async def request_with_retry_async(
    method: str,
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    strategy: BaseBackoffStrategy | None = None,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    stop: StopPredicate | None = None,
    token: CancellationToken | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send an HTTP request asynchronously, retrying transient
    failures.

    This is the asynchronous version of ``request_with_retry``; see it
    for the retry rules.

    Args:
        method: The HTTP method (e.g. ``"GET"``).
        url: The URL to send the request to.
        client: An optional ``httpx.AsyncClient``. If None, a new client
            is created and closed after use.
        timeout: Maximum seconds to wait for the server response. Only
            used if ``client`` is None. Must be > 0.
        strategy: The backoff strategy. Defaults to a fresh
            ``default_http_strategy()``.
        status_forcelist: Status codes that trigger a retry.
        stop: Optional predicate ending the retries early, called with
            retryable errors only.
        token: Optional cancellation token interrupting the waits.
        **kwargs: Additional keyword arguments passed to
            ``httpx.AsyncClient.request``.

    Returns:
        The successful response.

    Raises:
        HttpRequestError: If the last response has an error status code.
        httpx.TransportError: If the last attempt failed at the transport
            level.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import request_with_retry_async
        >>> async def main():
        ...     return await request_with_retry_async("GET", "https://api.example.com/data")
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """
    validate_timeout(timeout)
    if strategy is None:
        strategy = default_http_strategy()
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=timeout)

    async def send() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        return check_response(response, method=method, url=url, status_forcelist=status_forcelist)

    try:
        return await retry_async(send, strategy, stop=make_http_stop(stop), token=token)
    finally:
        if owns_client:
            await client.aclose()
