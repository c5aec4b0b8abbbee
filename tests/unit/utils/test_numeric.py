r"""Unit tests for delay arithmetic helpers."""

from __future__ import annotations

import math
import random
from unittest.mock import patch

import pytest

from aretry.utils import draw_uniform, exponential_delay, floor_delay


@pytest.mark.parametrize(
    ("base_delay", "attempt", "expected"),
    [(100, 0, 100), (100, 1, 200), (100, 3, 800), (0.5, 2, 2.0)],
)
def test_exponential_delay(base_delay: float, attempt: int, expected: float) -> None:
    assert exponential_delay(base_delay, attempt) == expected


def test_exponential_delay_overflow() -> None:
    assert exponential_delay(100, 5000) == math.inf


def test_exponential_delay_zero_base_delay_overflow() -> None:
    assert exponential_delay(0, 5000) == 0


def test_floor_delay() -> None:
    assert floor_delay(12.7) == 12
    assert floor_delay(5) == 5


def test_floor_delay_inf() -> None:
    assert floor_delay(math.inf) == math.inf


def test_draw_uniform_rng() -> None:
    rng = random.Random(5)
    expected = random.Random(5).random()
    assert draw_uniform(rng) == expected


def test_draw_uniform_module_random() -> None:
    with patch("random.random", return_value=0.75):
        assert draw_uniform() == 0.75
