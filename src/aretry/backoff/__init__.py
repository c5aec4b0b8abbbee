r"""Backoff strategies computing the delay between retry attempts.

This package provides the ``BaseBackoffStrategy`` contract, the ``STOP``
sentinel, deterministic strategies (constant, zero, stop, linear,
exponential, Fibonacci), jittered strategies (full, equal and
decorrelated jitter) and the ``upto`` retry-limit decorator.
"""

from __future__ import annotations

__all__ = [
    "STOP",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "DecorrelatedJitterBackoff",
    "EqualJitterBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "FullJitterBackoff",
    "LinearBackoff",
    "RetryLimitBackoff",
    "Stop",
    "StopBackoff",
    "ZeroBackoff",
    "constant",
    "decorrelated_jitter",
    "equal_jitter",
    "exponential",
    "fibonacci",
    "full_jitter",
    "is_stop",
    "linear",
    "stop",
    "upto",
    "zero",
]

from aretry.backoff.base import STOP, BaseBackoffStrategy, Stop, is_stop
from aretry.backoff.constant import ConstantBackoff, constant
from aretry.backoff.decorrelated_jitter import DecorrelatedJitterBackoff, decorrelated_jitter
from aretry.backoff.equal_jitter import EqualJitterBackoff, equal_jitter
from aretry.backoff.exponential import ExponentialBackoff, exponential
from aretry.backoff.fibonacci import FibonacciBackoff, fibonacci
from aretry.backoff.full_jitter import FullJitterBackoff, full_jitter
from aretry.backoff.limit import RetryLimitBackoff, upto
from aretry.backoff.linear import LinearBackoff, linear
from aretry.backoff.stop import StopBackoff, stop
from aretry.backoff.zero import ZeroBackoff, zero
