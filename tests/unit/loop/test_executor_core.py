r"""Unit tests for the retry decision step."""

from __future__ import annotations

import logging
from unittest.mock import Mock

import pytest

from aretry.backoff import STOP
from aretry.loop.executor_core import next_delay


def test_next_delay_returns_strategy_delay(mock_strategy: Mock) -> None:
    mock_strategy.next_backoff.return_value = 250
    assert next_delay(mock_strategy, None, ValueError("fail"), 0) == 250


def test_next_delay_strategy_stop(mock_strategy: Mock) -> None:
    mock_strategy.next_backoff.return_value = STOP
    stop = Mock()
    assert next_delay(mock_strategy, stop, ValueError("fail"), 0) is None
    stop.assert_not_called()


def test_next_delay_stop_predicate(mock_strategy: Mock) -> None:
    error = ValueError("fail")
    stop = Mock(return_value=True)
    assert next_delay(mock_strategy, stop, error, 4) is None
    stop.assert_called_once_with(error, 4)


def test_next_delay_stop_predicate_false(mock_strategy: Mock) -> None:
    mock_strategy.next_backoff.return_value = 10
    assert next_delay(mock_strategy, lambda error, attempt: False, ValueError(), 1) == 10


def test_next_delay_logs(mock_strategy: Mock, caplog: pytest.LogCaptureFixture) -> None:
    mock_strategy.next_backoff.return_value = 125
    with caplog.at_level(logging.DEBUG, logger="aretry"):
        next_delay(mock_strategy, None, ValueError("fail"), 2)
    assert "retrying in 125 ms" in caplog.text


@pytest.mark.parametrize("result", ["no", 1, [0], False, None])
def test_next_delay_stop_predicate_not_true(mock_strategy: Mock, result: object) -> None:
    mock_strategy.next_backoff.return_value = 50
    assert next_delay(mock_strategy, Mock(return_value=result), ValueError(), 0) == 50
