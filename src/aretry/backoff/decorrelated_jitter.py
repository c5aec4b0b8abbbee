r"""Decorrelated jitter backoff strategy."""

from __future__ import annotations

__all__ = ["DecorrelatedJitterBackoff", "decorrelated_jitter"]

import math
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import MAX_SAFE_INTEGER
from aretry.utils.numeric import draw_uniform
from aretry.utils.validation import validate_cap, validate_non_negative, validate_safe_integer

if TYPE_CHECKING:
    import random


class DecorrelatedJitterBackoff(BaseBackoffStrategy):
    """Backoff strategy using the "decorrelated jitter" algorithm.

    Calculates delay as:
    min(max_delay, floor(base_delay + random() * (previous * 3 - base_delay)))
    where ``previous`` is the delay returned by the previous call, seeded
    with ``base_delay``. The delay depends on the previous delay rather
    than on the attempt number, which decorrelates concurrent clients and
    usually yields shorter total waits than the other jittered strategies.

    See https://aws.amazon.com/blogs/architecture/exponential-backoff-and-jitter/

    Args:
        base_delay: The minimum delay in milliseconds. Must be a safe
            integer >= 0.
        max_delay: The maximum delay in milliseconds (default:
            ``MAX_SAFE_INTEGER``). Must be a safe integer >= ``base_delay``.
        rng: Optional random generator. Defaults to the ``random`` module
            generator.

    Raises:
        ValueError: If a parameter is not a safe integer or is negative,
            or if ``max_delay`` is lower than ``base_delay``.

    Example:
        ```pycon
        >>> import random
        >>> from aretry.backoff import DecorrelatedJitterBackoff
        >>> backoff = DecorrelatedJitterBackoff(base_delay=100, max_delay=1000, rng=random.Random(0))
        >>> all(100 <= backoff.next_backoff() <= 1000 for _ in range(10))
        True

        ```
    """

    def __init__(
        self,
        base_delay: int,
        max_delay: int = MAX_SAFE_INTEGER,
        rng: random.Random | None = None,
    ) -> None:
        validate_safe_integer("base_delay", base_delay)
        validate_non_negative("base_delay", base_delay)
        validate_safe_integer("max_delay", max_delay)
        validate_cap("max_delay", max_delay, "base_delay", base_delay)

        self.base_delay = base_delay
        self.max_delay = max_delay
        self._rng = rng
        self._previous: float = base_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def next_backoff(self) -> float:
        spread = self._previous * 3 - self.base_delay
        delay = min(
            self.max_delay,
            math.floor(self.base_delay + draw_uniform(self._rng) * spread),
        )
        self._previous = delay
        return delay

    def reset_backoff(self) -> None:
        self._previous = self.base_delay


def decorrelated_jitter(
    base_delay: int,
    max_delay: int = MAX_SAFE_INTEGER,
    rng: random.Random | None = None,
) -> DecorrelatedJitterBackoff:
    r"""Create a ``DecorrelatedJitterBackoff``."""
    return DecorrelatedJitterBackoff(base_delay, max_delay=max_delay, rng=rng)
