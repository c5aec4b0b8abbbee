r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff", "fibonacci"]

import math

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.validation import validate_cap, validate_non_negative


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    Calculates delay as: base_delay * fibonacci(attempt + 1), capped at
    max_delay.

    This strategy provides a middle ground between linear and exponential
    backoff, starting slow and ramping up gradually. The Fibonacci
    sequence (1, 1, 2, 3, 5, 8, 13, ...) provides a more gradual increase
    than exponential backoff.

    The sequence is carried incrementally from the two previous values.
    With a float ``base_delay`` the values lose precision after roughly
    90 calls, far beyond any realistic cap.

    Args:
        base_delay: The delay of the first two retries in milliseconds.
            Must be >= 0.
        max_delay: The maximum delay in milliseconds (default: no cap).
            Must be >= ``base_delay``.

    Raises:
        ValueError: If a parameter is NaN or negative, or if ``max_delay``
            is lower than ``base_delay``.

    Example:
        ```pycon
        >>> from aretry.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=100, max_delay=10_000)
        >>> [backoff.next_backoff() for _ in range(8)]
        [100, 100, 200, 300, 500, 800, 1300, 2100]

        ```
    """

    def __init__(self, base_delay: float, max_delay: float = math.inf) -> None:
        validate_non_negative("base_delay", base_delay)
        validate_cap("max_delay", max_delay, "base_delay", base_delay)

        self.base_delay = base_delay
        self.max_delay = max_delay
        self._previous: float = 0
        self._current: float = base_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def next_backoff(self) -> float:
        delay = min(self.max_delay, self._current)
        self._previous, self._current = self._current, self._previous + self._current
        return delay

    def reset_backoff(self) -> None:
        self._previous = 0
        self._current = self.base_delay


def fibonacci(base_delay: float, max_delay: float = math.inf) -> FibonacciBackoff:
    r"""Create a ``FibonacciBackoff``."""
    return FibonacciBackoff(base_delay, max_delay=max_delay)
