r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff", "exponential"]

import math

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.numeric import exponential_delay
from aretry.utils.validation import validate_cap, validate_non_negative


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** attempt), capped at max_delay.

    This works well for most scenarios where you want progressively longer
    delays between retries.

    Args:
        base_delay: The delay of the first retry in milliseconds. Must be
            >= 0.
        max_delay: The maximum delay in milliseconds (default: no cap).
            Must be >= ``base_delay``.

    Raises:
        ValueError: If a parameter is NaN or negative, or if ``max_delay``
            is lower than ``base_delay``.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=100, max_delay=500)
        >>> [backoff.next_backoff() for _ in range(5)]
        [100.0, 200.0, 400.0, 500, 500]

        ```
    """

    def __init__(self, base_delay: float, max_delay: float = math.inf) -> None:
        validate_non_negative("base_delay", base_delay)
        validate_cap("max_delay", max_delay, "base_delay", base_delay)

        self.base_delay = base_delay
        self.max_delay = max_delay
        self._attempt = 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def next_backoff(self) -> float:
        delay = min(self.max_delay, exponential_delay(self.base_delay, self._attempt))
        self._attempt += 1
        return delay

    def reset_backoff(self) -> None:
        self._attempt = 0


def exponential(base_delay: float, max_delay: float = math.inf) -> ExponentialBackoff:
    r"""Create an ``ExponentialBackoff``."""
    return ExponentialBackoff(base_delay, max_delay=max_delay)
