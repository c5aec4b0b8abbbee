r"""Shared core logic for the retry loops.

This module provides the decision step used by both the synchronous and
the asynchronous retry loop: given a failure, either compute the delay
before the next attempt or decide that the loop must end.
"""

from __future__ import annotations

__all__ = ["StopPredicate", "next_delay"]

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from aretry.backoff.base import is_stop

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)

StopPredicate = Callable[[Exception, int], bool]


def next_delay(
    strategy: BaseBackoffStrategy,
    stop: StopPredicate | None,
    error: Exception,
    attempt: int,
) -> float | None:
    """Compute the delay before the next attempt after a failure.

    The strategy is always consulted first. Its ``STOP`` ends the loop
    without calling the stop predicate; otherwise the predicate is called
    and, if it returns ``True``, the computed delay is discarded. Only the
    ``True`` singleton ends the loop; other truthy values keep retrying.

    Args:
        strategy: The backoff strategy of the retry sequence.
        stop: Optional predicate called with the error and the attempt
            index.
        error: The exception raised by the failed attempt.
        attempt: The zero-based index of the failed attempt.

    Returns:
        The delay in milliseconds, or ``None`` if the loop must end and
        surface ``error``.
    """
    delay = strategy.next_backoff()
    if is_stop(delay):
        logger.debug(f"Attempt {attempt} failed ({error!r}), backoff strategy stopped retrying")
        return None
    if stop is not None and stop(error, attempt) is True:
        logger.debug(f"Attempt {attempt} failed ({error!r}), stop predicate ended the retries")
        return None
    logger.debug(f"Attempt {attempt} failed ({error!r}), retrying in {delay} ms")
    return delay
