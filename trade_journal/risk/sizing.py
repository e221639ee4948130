"""
Position sizing and exit-quality helpers.
Contracts = floor(risk_amount / (stop_ticks * tick_value)), so a full stop loses at most risk_amount.
"""

from __future__ import annotations
import logging
import math
from typing import Iterable, Optional

from trade_journal.core.types import TradeRecord

logger = logging.getLogger("trade_journal.risk")


def position_size(
    account_size: Optional[float],
    risk_percent: Optional[float],
    stop_ticks: Optional[float],
    tick_value: Optional[float],
) -> int:
    """Whole contracts to trade. 0 when any input is missing or non-positive."""
    if not account_size or not risk_percent or not stop_ticks or not tick_value:
        return 0
    if min(account_size, risk_percent, stop_ticks, tick_value) <= 0:
        return 0
    risk_amount = account_size * (risk_percent / 100.0)
    contract_risk = stop_ticks * tick_value
    return int(math.floor(risk_amount / contract_risk))


def is_chicken_out(exit_price: Optional[float], target: Optional[float], stopped_out: bool) -> bool:
    """Exited before the target without being stopped out."""
    if exit_price is None or target is None:
        return False
    return exit_price < target and not stopped_out


def missed_r(trades: Iterable[TradeRecord]) -> float:
    """R left on the table by chicken-out exits: (target - exit) / |entry - stop|."""
    total = 0.0
    for t in trades:
        if not is_chicken_out(t.exit, t.target, t.stopped_out):
            continue
        if t.entry is None or t.stop is None or t.entry == t.stop:
            logger.debug("Skipping missed R for trade %s: no risk", t.id)
            continue
        total += (t.target - t.exit) / abs(t.entry - t.stop)
    return total
