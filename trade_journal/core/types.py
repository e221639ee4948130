"""
Core data types for trade records, derivation inputs and aggregation buckets.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class TradeStatus(str, Enum):
    WINNER = "Winner"
    EXPENSE = "Expense"
    BREAK_EVEN = "Break Even"
    UNSET = ""


class Direction(str, Enum):
    LONG = "Long"
    SHORT = "Short"


class Session(str, Enum):
    ODR = "ODR"
    RDR = "RDR"


class Weekday(str, Enum):
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"


class ConfirmationType(str, Enum):
    WICK = "Wick Confirmation"
    FULL = "Full Confirmation"
    EARLY = "Early Indication"
    NONE = "No Confirmation"


TRADING_DAYS = (Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI)

SCORE_FIELDS = ("preparation", "entry_score", "stop_loss", "target_score", "management", "rules")

# |result| below this is break-even
BREAK_EVEN_THRESHOLD = 0.1


@dataclass
class TradeRecord:
    """A logged trade as supplied by the store, raw inputs plus derived fields."""
    date: str
    status: str = TradeStatus.UNSET.value
    direction: Optional[str] = None
    session: Optional[str] = None
    day: Optional[str] = None
    confirmation_time: Optional[str] = None
    entry_time: Optional[str] = None
    instrument_name: Optional[str] = None
    entry_method_name: Optional[str] = None
    confirmation_type: Optional[str] = None
    account_name: Optional[str] = None
    entry: Optional[float] = None
    stop: Optional[float] = None
    target: Optional[float] = None
    exit: Optional[float] = None
    stopped_out: bool = False
    planned_executed: str = "Planned"
    # Scores 1-10
    preparation: Optional[int] = None
    entry_score: Optional[int] = None
    stop_loss: Optional[int] = None
    target_score: Optional[int] = None
    management: Optional[int] = None
    rules: Optional[int] = None
    confluences: List[str] = field(default_factory=list)
    id: Optional[int] = None
    # Derived
    stop_ticks: float = 0.0
    pot_result: float = 0.0
    result: Optional[float] = None
    average: Optional[float] = None

    def scores(self) -> List[Optional[int]]:
        return [getattr(self, name) for name in SCORE_FIELDS]


@dataclass
class TradeInput:
    """Raw operands of the derivation engine."""
    entry: Optional[float] = None
    stop: Optional[float] = None
    target: Optional[float] = None
    exit: Optional[float] = None
    tick_value: Optional[float] = None
    preparation: Optional[int] = None
    entry_score: Optional[int] = None
    stop_loss: Optional[int] = None
    target_score: Optional[int] = None
    management: Optional[int] = None
    rules: Optional[int] = None

    @classmethod
    def from_record(cls, record: TradeRecord, tick_value: Optional[float]) -> "TradeInput":
        return cls(
            entry=record.entry,
            stop=record.stop,
            target=record.target,
            exit=record.exit,
            tick_value=tick_value,
            preparation=record.preparation,
            entry_score=record.entry_score,
            stop_loss=record.stop_loss,
            target_score=record.target_score,
            management=record.management,
            rules=record.rules,
        )


@dataclass(frozen=True)
class DerivedFields:
    """Fields computed on every create/update of a trade."""
    stop_ticks: float
    pot_result: float
    result: Optional[float]
    average: Optional[float]


@dataclass
class AggregationBucket:
    """Per-group statistics for one key of a grouping dimension."""
    key: str
    trade_count: int
    winners: int
    losers: int
    break_even: int
    win_rate_percent: float
    total_r: float
    details: Optional[List["AggregationBucket"]] = None
