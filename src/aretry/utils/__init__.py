r"""Utility functions shared by the backoff strategies and the retry
loops.

This package provides parameter validation, overflow-safe delay
arithmetic and the cancellable waits used between retry attempts.
"""

from __future__ import annotations

__all__ = [
    "draw_uniform",
    "exponential_delay",
    "floor_delay",
    "validate_cap",
    "validate_non_negative",
    "validate_not_nan",
    "validate_safe_integer",
    "wait_for",
    "wait_for_async",
]

from aretry.utils.numeric import draw_uniform, exponential_delay, floor_delay
from aretry.utils.validation import (
    validate_cap,
    validate_non_negative,
    validate_not_nan,
    validate_safe_integer,
)
from aretry.utils.wait import wait_for, wait_for_async
