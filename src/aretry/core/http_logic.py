r"""Shared HTTP logic for the sync and async request helpers.

This module decides which HTTP failures are worth retrying and builds
the pieces (default strategy, stop predicate) both helpers hand to the
retry loops.
"""

from __future__ import annotations

__all__ = [
    "check_response",
    "default_http_strategy",
    "is_retryable_error",
    "make_http_stop",
    "validate_timeout",
]

import logging
from typing import TYPE_CHECKING

import httpx

from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.limit import RetryLimitBackoff, upto
from aretry.config import DEFAULT_BASE_DELAY, DEFAULT_MAX_DELAY, DEFAULT_MAX_RETRIES
from aretry.exceptions import HttpRequestError

if TYPE_CHECKING:
    from aretry.loop.executor_core import StopPredicate

logger: logging.Logger = logging.getLogger(__name__)


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for the server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from aretry.core.http_logic import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def default_http_strategy() -> RetryLimitBackoff:
    """Create the backoff strategy used when none is provided.

    A new instance is created for every request so concurrent requests
    never share state.

    Returns:
        ``DEFAULT_MAX_RETRIES`` retries of exponential backoff starting at
        ``DEFAULT_BASE_DELAY`` ms and capped at ``DEFAULT_MAX_DELAY`` ms.
    """
    return upto(DEFAULT_MAX_RETRIES, ExponentialBackoff(DEFAULT_BASE_DELAY, DEFAULT_MAX_DELAY))


def check_response(
    response: httpx.Response,
    method: str,
    url: str,
    status_forcelist: tuple[int, ...],
) -> httpx.Response:
    """Return the response, or raise if its status code is an error.

    Args:
        response: The HTTP response to check.
        method: The HTTP method of the request.
        url: The requested URL.
        status_forcelist: Status codes that are worth retrying.

    Returns:
        The response, if its status code is not an error.

    Raises:
        HttpRequestError: If the status code is in ``status_forcelist``
            (retryable) or is any other code >= 400 (not retryable).
    """
    status_code = response.status_code
    retryable = status_code in status_forcelist
    if status_code < 400 and not retryable:
        return response
    logger.debug(f"{method} request to {url} failed with status {status_code}")
    raise HttpRequestError(
        method=method,
        url=url,
        message=f"{method} request to {url} failed with status {status_code}",
        status_code=status_code,
        response=response,
        retryable=retryable,
    )


def is_retryable_error(error: Exception) -> bool:
    """Indicate if another attempt may fix the error.

    Retryable errors are transport errors (timeouts, connection and
    protocol errors) and ``HttpRequestError`` flagged as retryable.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.core.http_logic import is_retryable_error
        >>> is_retryable_error(httpx.ConnectError("refused"))
        True
        >>> is_retryable_error(ValueError("bad input"))
        False

        ```
    """
    if isinstance(error, HttpRequestError):
        return error.retryable
    return isinstance(error, httpx.TransportError)


def make_http_stop(stop: StopPredicate | None = None) -> StopPredicate:
    """Build the stop predicate used by the HTTP helpers.

    Args:
        stop: Optional user predicate, only consulted for retryable
            errors.

    Returns:
        A predicate ending the retries on non-retryable errors or when
        ``stop`` returns ``True``.
    """

    def should_stop(error: Exception, attempt: int) -> bool:
        if not is_retryable_error(error):
            return True
        return stop is not None and stop(error, attempt) is True

    return should_stop
