r"""Core shared logic for the sync and async HTTP helpers."""

from __future__ import annotations

__all__ = [
    "check_response",
    "default_http_strategy",
    "is_retryable_error",
    "make_http_stop",
    "validate_timeout",
]

from aretry.core.http_logic import (
    check_response,
    default_http_strategy,
    is_retryable_error,
    make_http_stop,
    validate_timeout,
)
