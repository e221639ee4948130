"""Analytics: per-dimension aggregation, streaks, performance report, dashboard KPIs."""

from trade_journal.analytics.aggregation import (
    aggregate_by,
    compute_streaks,
    is_break_even,
    reduce_group,
    summarize,
)
from trade_journal.analytics.dimensions import DIMENSIONS, DimensionSpec, get_dimension
from trade_journal.analytics.kpis import compute_kpis, weekly_average_scores
from trade_journal.analytics.report import build_performance_report

__all__ = [
    "aggregate_by",
    "compute_streaks",
    "is_break_even",
    "reduce_group",
    "summarize",
    "DIMENSIONS",
    "DimensionSpec",
    "get_dimension",
    "compute_kpis",
    "weekly_average_scores",
    "build_performance_report",
]
