"""
Grouping dimensions for the performance tables.

Each DimensionSpec says how to pull a group key out of a trade, whether the key
domain is fixed or discovered from the data, how keys are ordered and labelled,
and whether zero-count groups are dropped.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from trade_journal.core.types import (
    ConfirmationType,
    Direction,
    Session,
    TRADING_DAYS,
    TradeRecord,
)
from trade_journal.utils.timeofday import format_hhmm, parse_hhmm, try_parse_hhmm

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})")


@dataclass(frozen=True)
class DimensionSpec:
    """How one performance table groups trades."""
    name: str
    key: Callable[[TradeRecord], Optional[str]]
    domain: Optional[Tuple[str, ...]] = None  # fixed keys in display order; None = discovered
    drop_empty: bool = True
    sort_key: Optional[Callable[[str], Any]] = None  # discovered keys only; None keeps first-seen order
    label: Callable[[str], str] = str
    child: Optional["DimensionSpec"] = None


@dataclass(frozen=True)
class SessionWindow:
    """Trading window of a session, cut into fixed-width slots from the open."""
    session: str
    open: str
    close: str
    step_minutes: int = 30

    def slot_starts(self) -> List[int]:
        start, end = parse_hhmm(self.open), parse_hhmm(self.close)
        return list(range(start, end + 1, self.step_minutes))

    def slot_for(self, minutes: int) -> Optional[int]:
        """Start of the last slot at or before minutes; None before the open.
        The last slot has no upper end."""
        starts = self.slot_starts()
        if not starts or minutes < starts[0]:
            return None
        idx = (minutes - starts[0]) // self.step_minutes
        return starts[min(idx, len(starts) - 1)]


SESSION_WINDOWS: Dict[str, SessionWindow] = {
    Session.ODR.value: SessionWindow(Session.ODR.value, "04:00", "08:25"),
    Session.RDR.value: SessionWindow(Session.RDR.value, "10:30", "15:55"),
}


@dataclass(frozen=True)
class StopRange:
    label: str
    upper: float  # inclusive


STOP_TICK_RANGES = (
    StopRange("0-5", 5),
    StopRange("6-10", 10),
    StopRange("11-15", 15),
    StopRange("16-20", 20),
    StopRange("21-25", 25),
    StopRange("26-30", 30),
    StopRange("31+", float("inf")),
)


def _value(v: Any) -> Optional[str]:
    if v is None or v == "":
        return None
    return v.value if isinstance(v, Enum) else str(v)


def _field(name: str) -> Callable[[TradeRecord], Optional[str]]:
    def extract(trade: TradeRecord) -> Optional[str]:
        return _value(getattr(trade, name))
    return extract


def month_key(trade: TradeRecord) -> Optional[str]:
    m = _MONTH_RE.match(trade.date or "")
    if not m or not 1 <= int(m.group(2)) <= 12:
        return None
    return f"{m.group(1)}-{m.group(2)}"


def month_label(key: str) -> str:
    """'2024-01' -> 'Jan 2024'."""
    year, month = key.split("-")
    return f"{MONTH_NAMES[int(month) - 1]} {year}"


def stop_range_key(trade: TradeRecord) -> Optional[str]:
    ticks = trade.stop_ticks or 0.0
    for r in STOP_TICK_RANGES:
        if ticks <= r.upper:
            return r.label
    return None  # NaN


def time_slot_key(field_name: str) -> Callable[[TradeRecord], Optional[str]]:
    """Snap a time-of-day field to the 30-minute slot of the trade's session window."""
    def extract(trade: TradeRecord) -> Optional[str]:
        window = SESSION_WINDOWS.get(_value(trade.session))
        minutes = try_parse_hhmm(getattr(trade, field_name))
        if window is None or minutes is None:
            return None
        slot = window.slot_for(minutes)
        return format_hhmm(slot) if slot is not None else None
    return extract


SESSIONS = tuple(s.value for s in Session)
DAYS = tuple(d.value for d in TRADING_DAYS)

SESSION = DimensionSpec("session", _field("session"), domain=SESSIONS, drop_empty=False)
DAY = DimensionSpec("day", _field("day"), domain=DAYS, drop_empty=False)
INSTRUMENT = DimensionSpec("instrument", _field("instrument_name"))
ENTRY_METHOD = DimensionSpec("entry_method", _field("entry_method_name"))
CONFIRMATION_TYPE = DimensionSpec(
    "confirmation_type",
    _field("confirmation_type"),
    domain=tuple(c.value for c in ConfirmationType),
)
MONTH = DimensionSpec("month", month_key, sort_key=lambda k: k, label=month_label)
STOP_LOSS_RANGE = DimensionSpec(
    "stop_loss_range",
    stop_range_key,
    domain=tuple(r.label for r in STOP_TICK_RANGES),
)
CONFIRMATION_TIME = DimensionSpec("confirmation_time", time_slot_key("confirmation_time"), sort_key=parse_hhmm)
ENTRY_TIME = DimensionSpec("entry_time", time_slot_key("entry_time"), sort_key=parse_hhmm)

# Direction -> Day -> Session drill-down; every level hides empty rows
_DIRECTION_SESSION = DimensionSpec("session", _field("session"), domain=SESSIONS)
_DIRECTION_DAY = DimensionSpec("day", _field("day"), domain=DAYS, child=_DIRECTION_SESSION)
DIRECTION = DimensionSpec(
    "direction",
    _field("direction"),
    domain=tuple(d.value for d in Direction),
    child=_DIRECTION_DAY,
)

DIMENSIONS: Dict[str, DimensionSpec] = {
    d.name: d
    for d in (
        SESSION, INSTRUMENT, CONFIRMATION_TYPE, ENTRY_METHOD, DAY, CONFIRMATION_TIME,
        STOP_LOSS_RANGE, MONTH, ENTRY_TIME, DIRECTION,
    )
}


def get_dimension(name: str) -> DimensionSpec:
    """Look up a dimension by name (e.g. 'session', 'stop_loss_range')."""
    try:
        return DIMENSIONS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unsupported dimension: {name}") from None
