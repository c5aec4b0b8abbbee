r"""Parameter validation utilities for backoff strategies.

Every check raises ``ValueError`` with a message naming the parameter,
the expected constraint and the received value. Strategies call these
from ``__init__`` so invalid configurations fail at construction time.
"""

from __future__ import annotations

__all__ = [
    "validate_cap",
    "validate_non_negative",
    "validate_not_nan",
    "validate_safe_integer",
]

import math

from aretry.config import MAX_SAFE_INTEGER


def validate_not_nan(name: str, value: float) -> None:
    """Validate that a parameter is not NaN.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValueError: If the value is NaN.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_not_nan
        >>> validate_not_nan("base_delay", 100)
        >>> validate_not_nan("base_delay", float("nan"))
        Traceback (most recent call last):
        ...
        ValueError: base_delay must not be NaN

        ```
    """
    if isinstance(value, float) and math.isnan(value):
        msg = f"{name} must not be NaN"
        raise ValueError(msg)


def validate_non_negative(name: str, value: float) -> None:
    """Validate that a parameter is a number greater than or equal to
    0.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValueError: If the value is NaN or negative.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_non_negative
        >>> validate_non_negative("delay", 0)
        >>> validate_non_negative("delay", -1)
        Traceback (most recent call last):
        ...
        ValueError: delay must be >= 0, got -1

        ```
    """
    validate_not_nan(name, value)
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)


def validate_safe_integer(name: str, value: float) -> None:
    """Validate that a parameter is a safe integer.

    A safe integer is an integral value (``int`` or integral ``float``)
    within ``[-(2**53 - 1), 2**53 - 1]``. Booleans are rejected.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValueError: If the value is not a safe integer.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_safe_integer
        >>> validate_safe_integer("increment", 50)
        >>> validate_safe_integer("increment", 50.0)
        >>> validate_safe_integer("increment", 0.5)
        Traceback (most recent call last):
        ...
        ValueError: increment must be a safe integer, got 0.5

        ```
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        is_safe = False
    elif isinstance(value, float):
        is_safe = value.is_integer() and abs(value) <= MAX_SAFE_INTEGER
    else:
        is_safe = abs(value) <= MAX_SAFE_INTEGER
    if not is_safe:
        msg = f"{name} must be a safe integer, got {value}"
        raise ValueError(msg)


def validate_cap(name: str, cap: float, floor_name: str, floor: float) -> None:
    """Validate that a cap is not NaN and not lower than the value it
    bounds.

    Args:
        name: The cap parameter name, used in the error message.
        cap: The cap value.
        floor_name: The name of the bounded parameter.
        floor: The value of the bounded parameter.

    Raises:
        ValueError: If the cap is NaN or lower than ``floor``.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_cap
        >>> validate_cap("max_delay", 500, "base_delay", 100)
        >>> validate_cap("max_delay", 50, "base_delay", 100)
        Traceback (most recent call last):
        ...
        ValueError: max_delay must be >= base_delay, got max_delay=50, base_delay=100

        ```
    """
    validate_not_nan(name, cap)
    if cap < floor:
        msg = f"{name} must be >= {floor_name}, got {name}={cap}, {floor_name}={floor}"
        raise ValueError(msg)
