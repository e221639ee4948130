"""
Dashboard KPIs and the weekly average-score series.
"""

from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Optional

import numpy as np

from trade_journal.analytics.aggregation import (
    is_break_even,
    is_expense,
    is_winner,
    total_r,
    win_rate_percent,
)
from trade_journal.core.types import TradeRecord
from trade_journal.risk.sizing import is_chicken_out, missed_r


@dataclass
class DashboardKPIs:
    total_trades: int
    total_r: float
    winners: int
    recent_winners: int
    expenses: int
    recent_expenses: int
    break_evens: int
    recent_break_evens: int
    chicken_out_count: int
    missed_r: float
    win_rate: float
    average_win: float
    average_metrics_score: float
    metrics_based_on: int


@dataclass
class WeeklyScore:
    week: str  # ISO week, e.g. "2024-W03"
    average: float
    count: int


def _parse_date(value: Optional[str]) -> Optional[date]:
    try:
        return date.fromisoformat((value or "")[:10])
    except ValueError:
        return None


def compute_kpis(trades: List[TradeRecord], as_of: Optional[date] = None, recent_days: int = 7) -> DashboardKPIs:
    """Headline numbers; 'recent' counts trades dated on or after as_of - recent_days."""
    as_of = as_of or date.today()
    since = as_of - timedelta(days=recent_days)
    recent = [t for t in trades if (_parse_date(t.date) or date.min) >= since]

    winning = [t for t in trades if is_winner(t)]
    chicken_outs = [t for t in trades if is_chicken_out(t.exit, t.target, t.stopped_out)]
    scored = [t.average for t in trades if t.average is not None]

    return DashboardKPIs(
        total_trades=len(trades),
        total_r=total_r(trades),
        winners=len(winning),
        recent_winners=sum(1 for t in recent if is_winner(t)),
        expenses=sum(1 for t in trades if is_expense(t)),
        recent_expenses=sum(1 for t in recent if is_expense(t)),
        break_evens=sum(1 for t in trades if is_break_even(t)),
        recent_break_evens=sum(1 for t in recent if is_break_even(t)),
        chicken_out_count=len(chicken_outs),
        missed_r=missed_r(chicken_outs),
        win_rate=win_rate_percent(len(winning), len(trades)),
        average_win=float(np.mean([t.result or 0.0 for t in winning])) if winning else 0.0,
        average_metrics_score=float(np.mean(scored)) if scored else 0.0,
        metrics_based_on=len(scored),
    )


def weekly_average_scores(trades: List[TradeRecord]) -> List[WeeklyScore]:
    """Mean average-score per ISO week, oldest first. Trades without a score card are skipped."""
    by_week: Dict[str, List[float]] = defaultdict(list)
    for t in trades:
        d = _parse_date(t.date)
        if t.average is None or d is None:
            continue
        iso_year, iso_week, _ = d.isocalendar()
        by_week[f"{iso_year}-W{iso_week:02d}"].append(t.average)
    return [
        WeeklyScore(week=week, average=float(np.mean(values)), count=len(values))
        for week, values in sorted(by_week.items())
    ]
