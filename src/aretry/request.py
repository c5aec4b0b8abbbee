r"""Contains utility functions for synchronous HTTP requests with
automatic retry logic."""

from __future__ import annotations

__all__ = ["request_with_retry"]

from typing import TYPE_CHECKING, Any

import httpx

from aretry.config import DEFAULT_TIMEOUT, RETRY_STATUS_CODES
from aretry.core.http_logic import (
    check_response,
    default_http_strategy,
    make_http_stop,
    validate_timeout,
)
from aretry.loop.executor import retry

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.cancellation import CancellationToken
    from aretry.loop.executor_core import StopPredicate


def request_with_retry(
    method: str,
    url: str,
    *,
    client: httpx.Client | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    strategy: BaseBackoffStrategy | None = None,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    stop: StopPredicate | None = None,
    token: CancellationToken | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send an HTTP request, retrying transient failures.

    Transport errors (``httpx.TransportError``) and responses whose status
    code is in ``status_forcelist`` are retried according to
    ``strategy``. Any other error status raises ``HttpRequestError``
    immediately, and any other exception is re-raised as is.

    Args:
        method: The HTTP method (e.g. ``"GET"``).
        url: The URL to send the request to.
        client: An optional ``httpx.Client``. If None, a new client is
            created and closed after use.
        timeout: Maximum seconds to wait for the server response. Only
            used if ``client`` is None. Must be > 0.
        strategy: The backoff strategy. Defaults to a fresh
            ``default_http_strategy()``. Do not share a strategy between
            concurrent requests.
        status_forcelist: Status codes that trigger a retry.
        stop: Optional predicate ending the retries early, called with
            retryable errors only.
        token: Optional cancellation token interrupting the waits.
        **kwargs: Additional keyword arguments passed to
            ``httpx.Client.request``.

    Returns:
        The successful response.

    Raises:
        HttpRequestError: If the last response has an error status code.
        httpx.TransportError: If the last attempt failed at the transport
            level.

    Example:
        ```pycon
        >>> from aretry import request_with_retry
        >>> from aretry.backoff import ConstantBackoff, upto
        >>> response = request_with_retry(
        ...     "GET",
        ...     "https://api.example.com/data",
        ...     strategy=upto(5, ConstantBackoff(delay=500)),
        ... )  # doctest: +SKIP

        ```
    """
    validate_timeout(timeout)
    if strategy is None:
        strategy = default_http_strategy()
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout)

    def send() -> httpx.Response:
        response = client.request(method, url, **kwargs)
        return check_response(response, method=method, url=url, status_forcelist=status_forcelist)

    try:
        return retry(send, strategy, stop=make_http_stop(stop), token=token)
    finally:
        if owns_client:
            client.close()
