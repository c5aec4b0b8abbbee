r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff", "linear"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import MAX_SAFE_INTEGER
from aretry.utils.validation import validate_cap, validate_non_negative, validate_safe_integer


class LinearBackoff(BaseBackoffStrategy):
    """Linear backoff strategy.

    Calculates delay as: initial_delay + increment * attempt, capped at
    max_delay.

    This strategy provides evenly spaced retry delays, which can be useful
    for services that recover quickly or when you want predictable timing.

    Args:
        increment: The delay added after each attempt, in milliseconds.
        initial_delay: The delay of the first retry, in milliseconds
            (default: 0).
        max_delay: The maximum delay in milliseconds
            (default: ``MAX_SAFE_INTEGER``).

    Raises:
        ValueError: If a parameter is not a safe integer, is negative, or
            if ``max_delay`` is lower than ``initial_delay``.

    Example:
        ```pycon
        >>> from aretry.backoff import LinearBackoff
        >>> backoff = LinearBackoff(increment=50, initial_delay=100)
        >>> [backoff.next_backoff() for _ in range(4)]
        [100, 150, 200, 250]
        >>> # With max_delay cap
        >>> backoff = LinearBackoff(increment=50, initial_delay=100, max_delay=180)
        >>> [backoff.next_backoff() for _ in range(4)]
        [100, 150, 180, 180]

        ```
    """

    def __init__(
        self, increment: int, initial_delay: int = 0, max_delay: int = MAX_SAFE_INTEGER
    ) -> None:
        validate_safe_integer("increment", increment)
        validate_non_negative("increment", increment)
        validate_safe_integer("initial_delay", initial_delay)
        validate_non_negative("initial_delay", initial_delay)
        validate_safe_integer("max_delay", max_delay)
        validate_cap("max_delay", max_delay, "initial_delay", initial_delay)

        self.increment = increment
        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self._attempt = 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(increment={self.increment}, "
            f"initial_delay={self.initial_delay}, max_delay={self.max_delay})"
        )

    def next_backoff(self) -> float:
        delay = min(self.max_delay, self.initial_delay + self.increment * self._attempt)
        self._attempt += 1
        return delay

    def reset_backoff(self) -> None:
        self._attempt = 0


def linear(
    increment: int, initial_delay: int = 0, max_delay: int = MAX_SAFE_INTEGER
) -> LinearBackoff:
    r"""Create a ``LinearBackoff``.

    Args:
        increment: The delay added after each attempt, in milliseconds.
        initial_delay: The delay of the first retry, in milliseconds.
        max_delay: The maximum delay in milliseconds.

    Returns:
        The linear backoff strategy.
    """
    return LinearBackoff(increment, initial_delay=initial_delay, max_delay=max_delay)
