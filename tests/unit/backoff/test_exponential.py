r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import math

import pytest

from aretry.backoff import ExponentialBackoff, exponential


def test_exponential_backoff_with_max_delay() -> None:
    """Test exponential backoff with max_delay cap."""
    backoff = ExponentialBackoff(base_delay=100, max_delay=500)
    assert [backoff.next_backoff() for _ in range(6)] == [100, 200, 400, 500, 500, 500]


def test_exponential_backoff_uncapped() -> None:
    """Test exponential backoff without cap."""
    backoff = ExponentialBackoff(base_delay=1)
    assert [backoff.next_backoff() for _ in range(5)] == [1, 2, 4, 8, 16]


def test_exponential_backoff_default_values() -> None:
    backoff = ExponentialBackoff(base_delay=100)
    assert backoff.max_delay == math.inf


def test_exponential_backoff_zero_base_delay() -> None:
    """Test exponential backoff with zero base_delay."""
    backoff = ExponentialBackoff(base_delay=0)
    assert [backoff.next_backoff() for _ in range(3)] == [0, 0, 0]


def test_exponential_backoff_float_base_delay() -> None:
    backoff = ExponentialBackoff(base_delay=0.5)
    assert [backoff.next_backoff() for _ in range(3)] == [0.5, 1.0, 2.0]


def test_exponential_backoff_saturates_at_cap_for_long_sequences() -> None:
    """Test that very long sequences stay at the cap without
    overflowing."""
    backoff = ExponentialBackoff(base_delay=100, max_delay=60_000)
    delays = [backoff.next_backoff() for _ in range(2000)]
    assert delays[-1] == 60_000


def test_exponential_backoff_uncapped_long_sequence_reaches_inf() -> None:
    backoff = ExponentialBackoff(base_delay=100)
    delays = [backoff.next_backoff() for _ in range(2000)]
    assert delays[-1] == math.inf


def test_exponential_backoff_reset() -> None:
    backoff = ExponentialBackoff(base_delay=100, max_delay=500)
    backoff.next_backoff()
    backoff.next_backoff()
    backoff.reset_backoff()
    assert backoff.next_backoff() == 100


def test_exponential_backoff_invalid_base_delay() -> None:
    """Test that negative base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be >= 0, got -1"):
        ExponentialBackoff(base_delay=-1)


def test_exponential_backoff_nan_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must not be NaN"):
        ExponentialBackoff(base_delay=math.nan)


def test_exponential_backoff_nan_max_delay() -> None:
    with pytest.raises(ValueError, match=r"max_delay must not be NaN"):
        ExponentialBackoff(base_delay=100, max_delay=math.nan)


def test_exponential_backoff_max_delay_below_base_delay() -> None:
    with pytest.raises(
        ValueError, match=r"max_delay must be >= base_delay, got max_delay=50, base_delay=100"
    ):
        ExponentialBackoff(base_delay=100, max_delay=50)


def test_exponential_backoff_max_delay_equal_base_delay() -> None:
    backoff = ExponentialBackoff(base_delay=100, max_delay=100)
    assert [backoff.next_backoff() for _ in range(3)] == [100, 100, 100]


def test_exponential_factory() -> None:
    backoff = exponential(10, max_delay=30)
    assert isinstance(backoff, ExponentialBackoff)
    assert [backoff.next_backoff() for _ in range(3)] == [10, 20, 30]
