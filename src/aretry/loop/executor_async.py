r"""Asynchronous retry loop."""

from __future__ import annotations

__all__ = ["retry_async"]

import inspect
from typing import TYPE_CHECKING, TypeVar

from aretry.loop.executor_core import next_delay
from aretry.utils.wait import wait_for_async

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.cancellation import CancellationToken
    from aretry.loop.executor_core import StopPredicate

T = TypeVar("T")


async def retry_async(
    operation: Callable[[], T | Awaitable[T]],
    strategy: BaseBackoffStrategy,
    *,
    stop: StopPredicate | None = None,
    token: CancellationToken | None = None,
) -> T:
    """Call ``operation`` until it succeeds, waiting asynchronously
    between attempts as dictated by ``strategy``.

    ``operation`` may be a coroutine function or a plain callable; an
    awaitable result is awaited. Apart from that the loop behaves exactly
    like ``retry``: the strategy is reset first, ``STOP`` or a truthy
    ``stop(error, attempt)`` re-raises the last error, and cancelling
    ``token`` interrupts the pending wait. An attempt that is already
    running is not interrupted by the token.

    Args:
        operation: The zero-argument callable to retry.
        strategy: The backoff strategy computing the delays.
        stop: Optional predicate ending the retries early.
        token: Optional cancellation token interrupting the waits.

    Returns:
        The value produced by the first successful call.

    Raises:
        Exception: The error of the last attempt when the strategy or the
            stop predicate ends the retries.
        BaseException: The token's cancellation exception if the token is
            cancelled while waiting.
        DelayTooLongError: If the strategy returns a delay exceeding
            ``MAX_DELAY``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import retry_async
        >>> from aretry.backoff import ConstantBackoff, upto
        >>> async def fetch():
        ...     return 42
        ...
        >>> asyncio.run(retry_async(fetch, upto(3, ConstantBackoff(delay=10))))
        42

        ```
    """
    strategy.reset_backoff()
    attempt = 0
    while True:
        try:
            result = operation()
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as exc:
            delay = next_delay(strategy, stop, exc, attempt)
            if delay is None:
                raise
        attempt += 1
        await wait_for_async(delay, token)
