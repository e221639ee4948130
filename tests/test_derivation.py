"""Unit tests for derivation.engine."""

import pytest
from trade_journal.core.types import TradeInput, TradeRecord
from trade_journal.derivation.engine import (
    apply_trade_update,
    average_score,
    day_of_week,
    derive_trade,
    derive_trade_metrics,
    potential_r,
    realized_r,
    stop_ticks,
)


def _record(**kw):
    base = dict(
        date="2024-01-15", instrument_name="MNQ", status="Winner",
        entry=100.0, stop=98.0, target=106.0, exit=104.0,
        preparation=8, entry_score=7, stop_loss=6, target_score=9, management=5, rules=7,
    )
    base.update(kw)
    return TradeRecord(**base)


def test_stop_ticks():
    assert stop_ticks(100.0, 98.0, 0.25) == pytest.approx(8.0)
    assert stop_ticks(98.0, 100.0, 0.25) == pytest.approx(8.0)


def test_stop_ticks_missing_or_bad_tick_value():
    assert stop_ticks(None, 98.0, 0.25) == 0.0
    assert stop_ticks(100.0, 98.0, None) == 0.0
    assert stop_ticks(100.0, 98.0, 0.0) == 0.0
    assert stop_ticks(100.0, 98.0, -0.25) == 0.0


def test_potential_r():
    assert potential_r(100.0, 98.0, 106.0) == pytest.approx(3.0)
    assert potential_r(100.0, 100.0, 106.0) == 0.0  # zero risk
    assert potential_r(100.0, 98.0, None) == 0.0


def test_realized_r():
    assert realized_r(100.0, 98.0, 104.0) == pytest.approx(2.0)
    assert realized_r(100.0, 98.0, 97.0) == pytest.approx(-1.5)
    assert realized_r(100.0, 98.0, None) is None
    assert realized_r(100.0, 100.0, 104.0) is None


def test_realized_r_is_direction_agnostic():
    # short with exit below entry comes out negative unless the caller orients it
    assert realized_r(100.0, 102.0, 96.0) == pytest.approx(-2.0)


def test_average_score():
    assert average_score(8, 7, 6, 9, 5, 7) == pytest.approx(7.0)
    assert average_score(8, 7, 6, 9, 5, None) is None
    assert average_score(8, 7, 6, 9, 5, 0) is None  # 0 is not a score
    assert average_score(10, 10, 10, 10, 10, 10) == 10.0


def test_derive_trade_metrics():
    d = derive_trade_metrics(TradeInput(
        entry=100.0, stop=98.0, target=106.0, exit=104.0, tick_value=0.25,
        preparation=8, entry_score=7, stop_loss=6, target_score=9, management=5, rules=7,
    ))
    assert d.stop_ticks == pytest.approx(8.0)
    assert d.pot_result == pytest.approx(3.0)
    assert d.result == pytest.approx(2.0)
    assert d.average == pytest.approx(7.0)


def test_derive_trade_metrics_empty_input_never_raises():
    d = derive_trade_metrics(TradeInput())
    assert d.stop_ticks == 0.0
    assert d.pot_result == 0.0
    assert d.result is None
    assert d.average is None


def test_day_of_week():
    assert day_of_week("2024-01-15") == "Mon"
    assert day_of_week("2024-01-19") == "Fri"
    assert day_of_week("2024-01-13") == "Sat"
    assert day_of_week("not-a-date") is None
    assert day_of_week(None) is None


def test_derive_trade_is_idempotent():
    once = derive_trade(_record(), 0.25)
    twice = derive_trade(once, 0.25)
    assert once == twice
    assert once.day == "Mon"
    assert once.result == pytest.approx(2.0)


def test_apply_trade_update_clears_exit():
    current = derive_trade(_record(), 0.25)
    updated = apply_trade_update(current, {"exit": None}, 0.25)
    assert updated.result is None
    assert updated.stop_ticks == pytest.approx(8.0)


def test_apply_trade_update_moves_date_and_ignores_derived():
    current = derive_trade(_record(), 0.25)
    updated = apply_trade_update(current, {"date": "2024-01-16", "result": 99.0, "stop": 99.0}, 0.25)
    assert updated.day == "Tue"
    assert updated.result == pytest.approx(4.0)
    assert updated.stop_ticks == pytest.approx(4.0)


def test_apply_trade_update_unknown_field():
    with pytest.raises(ValueError):
        apply_trade_update(_record(), {"colour": "red"}, 0.25)
