"""
Saved-filter predicate over trade records. Unset criteria do not filter.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional

from trade_journal.core.types import TradeRecord


def _v(x: Any) -> Any:
    return x.value if isinstance(x, Enum) else x


@dataclass
class TradeFilter:
    """Criteria combined with AND; confluences use AND/OR among themselves."""
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    session: Optional[str] = None
    instrument: Optional[str] = None
    entry_method: Optional[str] = None
    account: Optional[str] = None
    confirmation_type: Optional[str] = None
    direction: Optional[str] = None
    status: Optional[str] = None
    execution_status: Optional[str] = None  # "Planned" | "Executed"
    days: List[str] = field(default_factory=list)
    stop_ticks_from: Optional[float] = None
    stop_ticks_to: Optional[float] = None
    average_from: Optional[float] = None
    average_to: Optional[float] = None
    confluences: List[str] = field(default_factory=list)
    confluences_logic: str = "OR"

    def __post_init__(self) -> None:
        self.confluences_logic = self.confluences_logic.upper()
        if self.confluences_logic not in ("AND", "OR"):
            raise ValueError(f"Unsupported confluence logic: {self.confluences_logic}")

    def matches(self, t: TradeRecord) -> bool:
        if self.date_from and (t.date or "") < self.date_from:
            return False
        if self.date_to and (t.date or "") > self.date_to:
            return False
        for wanted, actual in (
            (self.session, t.session),
            (self.instrument, t.instrument_name),
            (self.entry_method, t.entry_method_name),
            (self.account, t.account_name),
            (self.confirmation_type, t.confirmation_type),
            (self.direction, t.direction),
            (self.status, t.status),
            (self.execution_status, t.planned_executed),
        ):
            if wanted and _v(actual) != _v(wanted):
                return False
        if self.days and _v(t.day) not in {_v(d) for d in self.days}:
            return False
        if not _in_range(t.stop_ticks, self.stop_ticks_from, self.stop_ticks_to):
            return False
        if not _in_range(t.average, self.average_from, self.average_to):
            return False
        if self.confluences:
            tags = set(t.confluences)
            if self.confluences_logic == "AND":
                return all(c in tags for c in self.confluences)
            return any(c in tags for c in self.confluences)
        return True


def _in_range(value: Optional[float], low: Optional[float], high: Optional[float]) -> bool:
    if low is None and high is None:
        return True
    if value is None:
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def query_trades(trades: Iterable[TradeRecord], trade_filter: Optional[TradeFilter] = None) -> List[TradeRecord]:
    """Matching trades, newest first (date, then confirmation time)."""
    matched = [t for t in trades if trade_filter is None or trade_filter.matches(t)]
    matched.sort(key=lambda t: (t.date or "", t.confirmation_time or ""), reverse=True)
    return matched
