"""
Performance report: overview, score averages and one table per dimension.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from trade_journal.analytics.aggregation import OverviewStats, aggregate_by, summarize
from trade_journal.analytics.dimensions import DIMENSIONS
from trade_journal.core.types import AggregationBucket, SCORE_FIELDS, TradeRecord


@dataclass
class ScoreAverages:
    """Mean of each score over trades that have a full score card."""
    preparation: float = 0.0
    entry_score: float = 0.0
    stop_loss: float = 0.0
    target_score: float = 0.0
    management: float = 0.0
    rules: float = 0.0
    overall: float = 0.0
    based_on: int = 0


@dataclass
class PerformanceReport:
    overview: OverviewStats
    scores: ScoreAverages
    tables: Dict[str, List[AggregationBucket]] = field(default_factory=dict)


def score_averages(trades: List[TradeRecord]) -> ScoreAverages:
    scored = [t for t in trades if t.average is not None]
    if not scored:
        return ScoreAverages()
    means = {
        name: float(np.mean([getattr(t, name) or 0 for t in scored]))
        for name in SCORE_FIELDS
    }
    return ScoreAverages(
        overall=float(np.mean([t.average for t in scored])),
        based_on=len(scored),
        **means,
    )


def build_performance_report(trades: List[TradeRecord]) -> Optional[PerformanceReport]:
    """Full report for an already-filtered trade list. None when there are no trades."""
    if not trades:
        return None
    return PerformanceReport(
        overview=summarize(trades),
        scores=score_averages(trades),
        tables={name: aggregate_by(trades, dim) for name, dim in DIMENSIONS.items()},
    )
