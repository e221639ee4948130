"""Derivation: stop ticks, potential R, realized R, average score."""

from trade_journal.derivation.engine import (
    stop_ticks,
    potential_r,
    realized_r,
    average_score,
    derive_trade_metrics,
    day_of_week,
    derive_trade,
    apply_trade_update,
)

__all__ = [
    "stop_ticks",
    "potential_r",
    "realized_r",
    "average_score",
    "derive_trade_metrics",
    "day_of_week",
    "derive_trade",
    "apply_trade_update",
]
