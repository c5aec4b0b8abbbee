r"""Abstract base class for backoff strategies and the stop sentinel."""

from __future__ import annotations

__all__ = ["STOP", "BaseBackoffStrategy", "Stop", "is_stop"]

import enum
import math
from abc import ABC, abstractmethod
from typing import Final


class Stop(enum.Enum):
    r"""Type of the ``STOP`` sentinel returned by exhausted strategies."""

    STOP = "STOP"

    def __repr__(self) -> str:
        return "STOP"


STOP: Final = Stop.STOP


def is_stop(delay: float | Stop) -> bool:
    """Indicate if a value returned by ``next_backoff`` means "stop
    retrying".

    Besides the ``STOP`` sentinel, NaN is accepted as a stop signal.

    Args:
        delay: The value returned by ``next_backoff``.

    Returns:
        ``True`` if no further attempt should be made.

    Example:
        ```pycon
        >>> from aretry.backoff import STOP, is_stop
        >>> is_stop(STOP)
        True
        >>> is_stop(float("nan"))
        True
        >>> is_stop(100)
        False

        ```
    """
    if delay is STOP:
        return True
    return isinstance(delay, float) and math.isnan(delay)


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy computes the delay to wait before each retry. It
    may keep per-instance state (attempt counter, previous delay), so an
    instance must not be shared by retry sequences running concurrently.
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    @abstractmethod
    def next_backoff(self) -> float | Stop:
        """Compute the delay before the next retry and advance the
        internal state.

        Returns:
            The delay in milliseconds, or ``STOP`` if no further retry
            should be made.
        """

    @abstractmethod
    def reset_backoff(self) -> None:
        """Restore the state the strategy had right after
        construction."""
