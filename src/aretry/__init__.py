r"""aretry - Retry loops and backoff strategies for fallible operations.

This package retries flaky operations (network calls, polling of
asynchronous jobs, rate-limited APIs) with configurable and composable
backoff strategies. All delays are expressed in milliseconds.

Key Features:
    - Synchronous ``retry`` and asynchronous ``retry_async`` loops
    - Backoff strategies: Constant, Zero, Stop, Linear, Exponential,
      Fibonacci, Full/Equal/Decorrelated jitter
    - ``upto`` decorator bounding the number of retries of any strategy
    - Early termination through a stop predicate
    - Cooperative cancellation of waits with ``CancellationToken``
    - HTTP helpers built on httpx

Example:
    ```pycon
    >>> from aretry import retry
    >>> from aretry.backoff import ExponentialBackoff, upto
    >>> def fetch():
    ...     return "data"
    ...
    >>> retry(fetch, upto(5, ExponentialBackoff(base_delay=100, max_delay=2000)))
    'data'

    ```
"""

from __future__ import annotations

__all__ = [
    "MAX_DELAY",
    "STOP",
    "BaseBackoffStrategy",
    "CancellationToken",
    "DelayTooLongError",
    "HttpRequestError",
    "OperationCancelledError",
    "__version__",
    "is_stop",
    "request_with_retry",
    "request_with_retry_async",
    "retry",
    "retry_async",
    "upto",
    "wait_for",
    "wait_for_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import STOP, BaseBackoffStrategy, is_stop, upto
from aretry.cancellation import CancellationToken
from aretry.config import MAX_DELAY
from aretry.exceptions import DelayTooLongError, HttpRequestError, OperationCancelledError
from aretry.loop import retry, retry_async
from aretry.request import request_with_retry
from aretry.request_async import request_with_retry_async
from aretry.utils.wait import wait_for, wait_for_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
