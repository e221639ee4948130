"""Unit tests for store.filters."""

import pytest
from trade_journal.core.types import TradeRecord
from trade_journal.store.filters import TradeFilter, query_trades


def _trades():
    return [
        TradeRecord(date="2024-01-15", day="Mon", session="ODR", direction="Long", status="Winner",
                    instrument_name="MNQ", stop_ticks=8.0, average=7.0, confluences=["FVG", "SMT"],
                    confirmation_time="04:10", id=1),
        TradeRecord(date="2024-01-16", day="Tue", session="RDR", direction="Short", status="Expense",
                    instrument_name="ES", stop_ticks=20.0, average=None, confluences=["FVG"],
                    confirmation_time="11:00", id=2),
        TradeRecord(date="2024-01-16", day="Tue", session="ODR", direction="Long", status="Winner",
                    instrument_name="MNQ", stop_ticks=12.0, average=9.0, confluences=[],
                    confirmation_time="05:00", id=3),
    ]


def _ids(trades):
    return [t.id for t in trades]


def test_no_filter_orders_newest_first():
    assert _ids(query_trades(_trades())) == [2, 3, 1]


def test_simple_criteria():
    assert _ids(query_trades(_trades(), TradeFilter(session="ODR"))) == [3, 1]
    assert _ids(query_trades(_trades(), TradeFilter(instrument="ES"))) == [2]
    assert _ids(query_trades(_trades(), TradeFilter(days=["Mon"]))) == [1]


def test_date_range_inclusive():
    f = TradeFilter(date_from="2024-01-16", date_to="2024-01-16")
    assert _ids(query_trades(_trades(), f)) == [2, 3]


def test_ranges():
    assert _ids(query_trades(_trades(), TradeFilter(stop_ticks_from=10, stop_ticks_to=20))) == [2, 3]
    # trades without a score card never match a score range
    assert _ids(query_trades(_trades(), TradeFilter(average_from=6.0))) == [3, 1]


def test_confluences_and_or():
    assert _ids(query_trades(_trades(), TradeFilter(confluences=["FVG", "SMT"], confluences_logic="AND"))) == [1]
    assert _ids(query_trades(_trades(), TradeFilter(confluences=["FVG", "SMT"], confluences_logic="or"))) == [2, 1]


def test_invalid_confluence_logic():
    with pytest.raises(ValueError):
        TradeFilter(confluences_logic="XOR")
