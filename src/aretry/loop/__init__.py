r"""Retry loops driven by backoff strategies.

Public API:
    - retry: Synchronous retry loop
    - retry_async: Asynchronous retry loop
    - StopPredicate: Type of the early-termination predicate
"""

from __future__ import annotations

__all__ = ["StopPredicate", "retry", "retry_async"]

from aretry.loop.executor import retry
from aretry.loop.executor_async import retry_async
from aretry.loop.executor_core import StopPredicate
