r"""Equal jitter backoff strategy."""

from __future__ import annotations

__all__ = ["EqualJitterBackoff", "equal_jitter"]

import math
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.numeric import draw_uniform, exponential_delay, floor_delay
from aretry.utils.validation import validate_cap, validate_non_negative

if TYPE_CHECKING:
    import random


class EqualJitterBackoff(BaseBackoffStrategy):
    """Exponential backoff with "equal jitter".

    Keeps half of the exponential delay and randomizes the other half:
    ``half + floor(random() * half)`` with
    ``half = min(max_delay, base_delay * 2 ** attempt) / 2``.
    Delays are more predictable than with full jitter while retries of
    different clients still spread out.

    See https://aws.amazon.com/blogs/architecture/exponential-backoff-and-jitter/

    Args:
        base_delay: The exponential delay of the first retry in
            milliseconds (default: 0). Must be >= 0.
        max_delay: The maximum exponential delay in milliseconds
            (default: no cap). Must be >= ``base_delay``.
        rng: Optional random generator. Defaults to the ``random`` module
            generator.

    Raises:
        ValueError: If a parameter is NaN or negative, or if ``max_delay``
            is lower than ``base_delay``.

    Example:
        ```pycon
        >>> import random
        >>> from aretry.backoff import EqualJitterBackoff
        >>> backoff = EqualJitterBackoff(base_delay=100, rng=random.Random(0))
        >>> 50 <= backoff.next_backoff() < 100
        True
        >>> 100 <= backoff.next_backoff() < 200
        True

        ```
    """

    def __init__(
        self,
        base_delay: float = 0,
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
        half = min(self.max_delay, exponential_delay(self.base_delay, self._attempt)) / 2
        draw = draw_uniform(self._rng)
        self._attempt += 1
        if draw == 0:
            return half
        return half + floor_delay(draw * half)

    def reset_backoff(self) -> None:
        self._attempt = 0


def equal_jitter(
    base_delay: float = 0,
    max_delay: float = math.inf,
    rng: random.Random | None = None,
) -> EqualJitterBackoff:
    r"""Create an ``EqualJitterBackoff``."""
    return EqualJitterBackoff(base_delay, max_delay=max_delay, rng=rng)
