"""Unit tests for risk.sizing."""

import pytest
from trade_journal.core.types import TradeRecord
from trade_journal.risk.sizing import is_chicken_out, missed_r, position_size


def test_position_size():
    # risk 500 / (20 ticks * 0.5) = 50 contracts
    assert position_size(50000.0, 1.0, 20.0, 0.5) == 50
    # 100 / 15 rounds down
    assert position_size(10000.0, 1.0, 3.0, 5.0) == 6


def test_position_size_missing_inputs():
    assert position_size(50000.0, 1.0, 0.0, 0.5) == 0
    assert position_size(None, 1.0, 20.0, 0.5) == 0
    assert position_size(50000.0, -1.0, 20.0, 0.5) == 0


def test_is_chicken_out():
    assert is_chicken_out(103.0, 106.0, False) is True
    assert is_chicken_out(103.0, 106.0, True) is False
    assert is_chicken_out(106.0, 106.0, False) is False
    assert is_chicken_out(None, 106.0, False) is False


def test_missed_r():
    trades = [
        TradeRecord(date="2024-01-15", entry=100.0, stop=98.0, target=106.0, exit=104.0),
        TradeRecord(date="2024-01-15", entry=100.0, stop=98.0, target=106.0, exit=98.0, stopped_out=True),
        TradeRecord(date="2024-01-15", entry=100.0, stop=100.0, target=106.0, exit=104.0),  # no risk
    ]
    assert missed_r(trades) == pytest.approx(1.0)
