r"""Cancellable waits used between retry attempts.

This module provides a blocking and an asyncio flavour of the same
primitive: wait for a delay in milliseconds, or fail as soon as the
supplied ``CancellationToken`` is cancelled.
"""

from __future__ import annotations

__all__ = ["MAX_DELAY", "wait_for", "wait_for_async"]

import asyncio
import logging
import threading
import time
from typing import TYPE_CHECKING

from aretry.config import MAX_DELAY
from aretry.exceptions import DelayTooLongError

if TYPE_CHECKING:
    from aretry.cancellation import CancellationToken

logger: logging.Logger = logging.getLogger(__name__)


def _check_delay(delay: float) -> float:
    r"""Validate a requested delay and convert it to seconds.

    Raises:
        DelayTooLongError: If the delay exceeds ``MAX_DELAY``.
    """
    if delay > MAX_DELAY:
        raise DelayTooLongError(max_delay=MAX_DELAY, delay=delay)
    return max(delay, 0) / 1000


def wait_for(delay: float, token: CancellationToken | None = None) -> None:
    """Block for ``delay`` milliseconds unless the token is cancelled.

    Args:
        delay: The wait duration in milliseconds. Negative values are
            treated as ``0``.
        token: Optional cancellation token. Cancelling it wakes the
            waiting thread immediately.

    Raises:
        DelayTooLongError: If ``delay`` exceeds ``MAX_DELAY``. Nothing is
            waited in this case.
        BaseException: The token's cancellation exception if the token is
            cancelled before or during the wait.

    Example:
        ```pycon
        >>> from aretry import CancellationToken
        >>> from aretry.utils.wait import wait_for
        >>> wait_for(10)
        >>> token = CancellationToken()
        >>> token.cancel(TimeoutError("too slow"))
        >>> wait_for(1000, token)
        Traceback (most recent call last):
        ...
        TimeoutError: too slow

        ```
    """
    seconds = _check_delay(delay)
    if token is None:
        time.sleep(seconds)
        return

    token.raise_if_cancelled()
    wakeup = threading.Event()

    def listener(_: CancellationToken) -> None:
        wakeup.set()

    token.add_listener(listener)
    try:
        if wakeup.wait(seconds):
            logger.debug(f"Wait of {delay} ms cancelled")
            raise token.exception()
    finally:
        token.remove_listener(listener)


async def wait_for_async(delay: float, token: CancellationToken | None = None) -> None:
    """Wait asynchronously for ``delay`` milliseconds unless the token
    is cancelled.

    The token may be cancelled from any thread; the wake-up is handed to
    the running event loop. When the wait ends, the pending timer is
    cancelled and the token listener is removed.

    Args:
        delay: The wait duration in milliseconds. Negative values are
            treated as ``0``.
        token: Optional cancellation token.

    Raises:
        DelayTooLongError: If ``delay`` exceeds ``MAX_DELAY``. No timer
            is scheduled in this case.
        BaseException: The token's cancellation exception if the token is
            cancelled before or during the wait.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.utils.wait import wait_for_async
        >>> asyncio.run(wait_for_async(10))

        ```
    """
    seconds = _check_delay(delay)
    if token is None:
        await asyncio.sleep(seconds)
        return

    token.raise_if_cancelled()
    loop = asyncio.get_running_loop()
    waiter: asyncio.Future[None] = loop.create_future()

    def resolve() -> None:
        if not waiter.done():
            waiter.set_result(None)

    def reject(cancelled: CancellationToken) -> None:
        if not waiter.done():
            logger.debug(f"Wait of {delay} ms cancelled")
            waiter.set_exception(cancelled.exception())

    def listener(cancelled: CancellationToken) -> None:
        loop.call_soon_threadsafe(reject, cancelled)

    timer = loop.call_later(seconds, resolve)
    token.add_listener(listener)
    try:
        await waiter
    finally:
        timer.cancel()
        token.remove_listener(listener)
