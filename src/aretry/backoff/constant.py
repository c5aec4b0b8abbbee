r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff", "constant"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.validation import validate_non_negative


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every retry attempt.

    Args:
        delay: The fixed delay in milliseconds. Must be >= 0.

    Raises:
        ValueError: If ``delay`` is NaN or negative.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=250)
        >>> backoff.next_backoff()
        250
        >>> backoff.next_backoff()
        250

        ```
    """

    def __init__(self, delay: float) -> None:
        validate_non_negative("delay", delay)
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def next_backoff(self) -> float:
        return self.delay

    def reset_backoff(self) -> None:
        r"""Do nothing, the strategy has no mutable state."""


def constant(delay: float) -> ConstantBackoff:
    r"""Create a ``ConstantBackoff`` returning ``delay`` on every call."""
    return ConstantBackoff(delay)
