"""Unit tests for analytics.report."""

import pytest
from trade_journal.analytics.dimensions import DIMENSIONS
from trade_journal.analytics.report import build_performance_report, score_averages
from trade_journal.core.types import TradeRecord


def _scored(avg_scores, **kw):
    prep, entry, stop, target, mgmt, rules = avg_scores
    return TradeRecord(
        date="2024-01-15", day="Mon", session="ODR", direction="Long", status="Winner", result=1.0,
        preparation=prep, entry_score=entry, stop_loss=stop, target_score=target, management=mgmt, rules=rules,
        average=sum(avg_scores) / 6, **kw,
    )


def test_empty_report():
    assert build_performance_report([]) is None


def test_report_has_every_table():
    report = build_performance_report([_scored((5, 5, 5, 5, 5, 5))])
    assert set(report.tables) == set(DIMENSIONS)
    assert report.overview.total_trades == 1
    assert report.overview.max_win_streak == 1


def test_score_averages():
    trades = [
        _scored((8, 8, 8, 8, 8, 8)),
        _scored((6, 6, 6, 6, 6, 6)),
        TradeRecord(date="2024-01-16", preparation=1),  # incomplete card, ignored
    ]
    s = score_averages(trades)
    assert s.based_on == 2
    assert s.preparation == pytest.approx(7.0)
    assert s.rules == pytest.approx(7.0)
    assert s.overall == pytest.approx(7.0)


def test_score_averages_none_scored():
    s = score_averages([TradeRecord(date="2024-01-16")])
    assert s.based_on == 0
    assert s.overall == 0.0
