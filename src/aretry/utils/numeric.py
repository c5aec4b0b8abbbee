r"""Float arithmetic helpers shared by the backoff strategies.

Python raises ``OverflowError`` where IEEE arithmetic would produce
infinity (``2.0 ** 1024``, ``math.floor(math.inf)``). These helpers keep
the infinite results so very long retry sequences saturate at the cap
instead of crashing.
"""

from __future__ import annotations

__all__ = ["draw_uniform", "exponential_delay", "floor_delay"]

import math
import random


def exponential_delay(base_delay: float, attempt: int) -> float:
    """Compute ``base_delay * 2**attempt`` without overflowing.

    Args:
        base_delay: The delay of the first attempt.
        attempt: The zero-based attempt number.

    Returns:
        The delay, ``math.inf`` past the float range, and ``0`` when
        ``base_delay`` is ``0``.

    Example:
        ```pycon
        >>> from aretry.utils.numeric import exponential_delay
        >>> exponential_delay(100, 3)
        800.0
        >>> exponential_delay(100, 5000)
        inf
        >>> exponential_delay(0, 5000)
        0

        ```
    """
    if base_delay == 0:
        return base_delay
    try:
        return base_delay * 2.0**attempt
    except OverflowError:
        return math.inf


def floor_delay(delay: float) -> float:
    """Round a delay down, leaving infinite values untouched.

    Example:
        ```pycon
        >>> from aretry.utils.numeric import floor_delay
        >>> floor_delay(12.7)
        12
        >>> floor_delay(float("inf"))
        inf

        ```
    """
    if math.isinf(delay):
        return delay
    return math.floor(delay)


def draw_uniform(rng: random.Random | None = None) -> float:
    """Draw a float uniformly from ``[0, 1)``.

    Args:
        rng: Optional random generator. The module-level generator of
            ``random`` is used when it is ``None``.

    Returns:
        The drawn value.

    Example:
        ```pycon
        >>> import random
        >>> from aretry.utils.numeric import draw_uniform
        >>> 0 <= draw_uniform(random.Random(42)) < 1
        True

        ```
    """
    if rng is None:
        return random.random()  # noqa: S311
    return rng.random()
