r"""Decorator limiting the number of retries of a backoff strategy."""

from __future__ import annotations

__all__ = ["RetryLimitBackoff", "upto"]

import logging

from aretry.backoff.base import STOP, BaseBackoffStrategy, Stop
from aretry.utils.validation import validate_non_negative, validate_safe_integer

logger: logging.Logger = logging.getLogger(__name__)


class RetryLimitBackoff(BaseBackoffStrategy):
    """Wrap a backoff strategy and stop after a number of retries.

    The first ``retries`` calls to ``next_backoff`` are delegated to the
    wrapped strategy (whose own ``STOP`` passes through unchanged); every
    later call returns ``STOP`` without consulting it.

    Args:
        strategy: The backoff strategy to wrap.
        retries: The maximum number of retries. Must be an integer >= 0.
            ``0`` means the first call already returns ``STOP``.

    Raises:
        ValueError: If ``retries`` is NaN, not an integer or negative.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff, RetryLimitBackoff
        >>> backoff = RetryLimitBackoff(ConstantBackoff(delay=1000), retries=2)
        >>> [backoff.next_backoff() for _ in range(4)]
        [1000, 1000, STOP, STOP]
        >>> backoff.reset_backoff()
        >>> backoff.next_backoff()
        1000

        ```
    """

    def __init__(self, strategy: BaseBackoffStrategy, retries: int) -> None:
        validate_safe_integer("retries", retries)
        validate_non_negative("retries", retries)

        self.strategy = strategy
        self.retries = int(retries)
        self._remaining = self.retries

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(strategy={self.strategy!r}, retries={self.retries})"

    @property
    def remaining(self) -> int:
        r"""The number of retries left before ``STOP`` is returned."""
        return self._remaining

    def next_backoff(self) -> float | Stop:
        if self._remaining <= 0:
            logger.debug(f"Retry limit of {self.retries} reached")
            return STOP
        self._remaining -= 1
        return self.strategy.next_backoff()

    def reset_backoff(self) -> None:
        self._remaining = self.retries
        self.strategy.reset_backoff()


def upto(retries: int, strategy: BaseBackoffStrategy) -> RetryLimitBackoff:
    r"""Limit a backoff strategy to ``retries`` retries.

    Args:
        retries: The maximum number of retries. Must be an integer >= 0.
        strategy: The backoff strategy to wrap.

    Returns:
        The limited strategy.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff, upto
        >>> backoff = upto(3, ExponentialBackoff(base_delay=100, max_delay=5000))
        >>> [backoff.next_backoff() for _ in range(4)]
        [100.0, 200.0, 400.0, STOP]

        ```
    """
    return RetryLimitBackoff(strategy, retries)
