r"""Synchronous retry loop."""

from __future__ import annotations

__all__ = ["retry"]

from typing import TYPE_CHECKING, TypeVar

from aretry.loop.executor_core import next_delay
from aretry.utils.wait import wait_for

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.cancellation import CancellationToken
    from aretry.loop.executor_core import StopPredicate

T = TypeVar("T")


def retry(
    operation: Callable[[], T],
    strategy: BaseBackoffStrategy,
    *,
    stop: StopPredicate | None = None,
    token: CancellationToken | None = None,
) -> T:
    """Call ``operation`` until it succeeds, waiting between attempts as
    dictated by ``strategy``.

    The strategy is reset before the first attempt. After each failure
    (an ``Exception`` raised by ``operation``):

    1. ``strategy.next_backoff()`` is called; ``STOP`` re-raises the
       error.
    2. ``stop(error, attempt)`` is called if provided; ``True`` re-raises
       the error. ``attempt`` is 0 for the first failure and grows by one
       per failure.
    3. The loop blocks for the delay, then tries again. Cancelling
       ``token`` during the wait raises the cancellation exception.

    The loop has no attempt limit of its own: wrap the strategy with
    ``upto`` to bound the number of retries. The strategy keeps state
    and must not be shared with a concurrently running retry sequence.

    Args:
        operation: The zero-argument callable to retry.
        strategy: The backoff strategy computing the delays.
        stop: Optional predicate ending the retries early.
        token: Optional cancellation token interrupting the waits.

    Returns:
        The value returned by the first successful call.

    Raises:
        Exception: The error of the last attempt when the strategy or the
            stop predicate ends the retries.
        BaseException: The token's cancellation exception if the token is
            cancelled while waiting.
        DelayTooLongError: If the strategy returns a delay exceeding
            ``MAX_DELAY``.

    Example:
        ```pycon
        >>> from aretry import retry
        >>> from aretry.backoff import ZeroBackoff, upto
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("unavailable")
        ...     return "ok"
        ...
        >>> retry(flaky, upto(5, ZeroBackoff()))
        'ok'
        >>> len(calls)
        3

        ```
    """
    strategy.reset_backoff()
    attempt = 0
    while True:
        try:
            return operation()
        except Exception as exc:
            delay = next_delay(strategy, stop, exc, attempt)
            if delay is None:
                raise
        attempt += 1
        wait_for(delay, token)
