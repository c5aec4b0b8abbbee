r"""Exceptions raised by the retry machinery."""

from __future__ import annotations

__all__ = ["DelayTooLongError", "HttpRequestError", "OperationCancelledError"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class DelayTooLongError(ValueError):
    """Raised when a requested wait exceeds the largest supported delay.

    Args:
        max_delay: The largest supported delay in milliseconds.
        delay: The requested delay in milliseconds.

    Example:
        ```pycon
        >>> from aretry.exceptions import DelayTooLongError
        >>> err = DelayTooLongError(max_delay=10, delay=11)
        >>> str(err)
        'delay must not exceed 10 ms, got 11'

        ```
    """

    def __init__(self, max_delay: float, delay: float) -> None:
        super().__init__(f"delay must not exceed {max_delay} ms, got {delay}")
        self.max_delay = max_delay
        self.delay = delay


class OperationCancelledError(Exception):
    """Raised when a wait or a retry sequence is cancelled.

    Args:
        reason: The value passed when the cancellation was requested.
            ``None`` when no reason was given.

    Example:
        ```pycon
        >>> from aretry.exceptions import OperationCancelledError
        >>> err = OperationCancelledError("shutting down")
        >>> err.reason
        'shutting down'
        >>> str(err)
        'operation was cancelled: shutting down'

        ```
    """

    def __init__(self, reason: Any = None) -> None:
        msg = "operation was cancelled"
        if reason is not None:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.reason = reason


class HttpRequestError(Exception):
    """Raised when an HTTP request returns an error status code.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: The error message.
        status_code: The HTTP status code of the response, if any.
        response: The response that triggered the error, if any.
        retryable: Whether another attempt may succeed.

    Example:
        ```pycon
        >>> from aretry.exceptions import HttpRequestError
        >>> err = HttpRequestError(
        ...     method="GET",
        ...     url="https://api.example.com/data",
        ...     message="GET request to https://api.example.com/data failed with status 503",
        ...     status_code=503,
        ... )
        >>> err.status_code
        503

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.response = response
        self.retryable = retryable
