r"""Full jitter backoff strategy."""

from __future__ import annotations

__all__ = ["FullJitterBackoff", "full_jitter"]

import math
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.numeric import draw_uniform, exponential_delay, floor_delay
from aretry.utils.validation import validate_cap, validate_non_negative

if TYPE_CHECKING:
    import random


class FullJitterBackoff(BaseBackoffStrategy):
    """Exponential backoff with "full jitter".

    Calculates delay as: floor(random() * min(max_delay, base_delay * 2 ** attempt)),
    i.e. a value drawn uniformly from ``[0, ceiling)`` where the ceiling
    grows exponentially. Spreading retries over the whole window prevents
    clients that failed together from retrying together.

    See https://aws.amazon.com/blogs/architecture/exponential-backoff-and-jitter/

    Args:
        base_delay: The ceiling of the first retry in milliseconds. Must
            be >= 0.
        max_delay: The maximum ceiling in milliseconds (default: no cap).
            Must be >= ``base_delay``.
        rng: Optional random generator, mostly useful to make tests
            reproducible. Defaults to the ``random`` module generator.

    Raises:
        ValueError: If a parameter is NaN or negative, or if ``max_delay``
            is lower than ``base_delay``.

    Example:
        ```pycon
        >>> import random
        >>> from aretry.backoff import FullJitterBackoff
        >>> backoff = FullJitterBackoff(base_delay=100, max_delay=1000, rng=random.Random(0))
        >>> all(0 <= backoff.next_backoff() < 1000 for _ in range(10))
        True

        ```
    """

    def __init__(
        self,
        base_delay: float,
        max_delay: float = math.inf,
        rng: random.Random | None = None,
    ) -> None:
        validate_non_negative("base_delay", base_delay)
        validate_cap("max_delay", max_delay, "base_delay", base_delay)

        self.base_delay = base_delay
        self.max_delay = max_delay
        self._rng = rng
        self._attempt = 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def next_backoff(self) -> float:
        ceiling = min(self.max_delay, exponential_delay(self.base_delay, self._attempt))
        draw = draw_uniform(self._rng)
        self._attempt += 1
        if draw == 0:
            return 0
        return floor_delay(draw * ceiling)

    def reset_backoff(self) -> None:
        self._attempt = 0


def full_jitter(
    base_delay: float,
    max_delay: float = math.inf,
    rng: random.Random | None = None,
) -> FullJitterBackoff:
    r"""Create a ``FullJitterBackoff``."""
    return FullJitterBackoff(base_delay, max_delay=max_delay, rng=rng)
