"""
Derived trade fields: stop distance in ticks, potential R, realized R and the
six-factor average score. Applied on every create/update of a trade.

All functions are total: a missing operand or a zero risk yields the safe
default (0 or None), never an exception.
"""

from __future__ import annotations
import dataclasses
import logging
import math
from datetime import date as date_cls
from typing import Any, Mapping, Optional

from trade_journal.core.types import (
    DerivedFields,
    TradeInput,
    TradeRecord,
    Weekday,
)

logger = logging.getLogger("trade_journal.derivation")

_WEEKDAYS = list(Weekday)  # date.weekday(): 0=Mon
_DERIVED_FIELDS = ("stop_ticks", "pot_result", "result", "average")
_RECORD_FIELDS = {f.name for f in dataclasses.fields(TradeRecord)}


def _present(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def _is_score(value: Any) -> bool:
    """Scores are 1-10. 0 and anything else out of range count as missing."""
    if value is None or isinstance(value, bool):
        return False
    try:
        return 1 <= float(value) <= 10
    except (TypeError, ValueError):
        return False


def stop_ticks(entry: Optional[float], stop: Optional[float], tick_value: Optional[float]) -> float:
    """|entry - stop| / tick_value, or 0 when an operand is missing or tick_value <= 0."""
    if not (_present(entry) and _present(stop) and _present(tick_value)) or tick_value <= 0:
        return 0.0
    return abs(entry - stop) / tick_value


def potential_r(entry: Optional[float], stop: Optional[float], target: Optional[float]) -> float:
    """Reward-to-risk of the planned target. 0 when entry == stop."""
    if not (_present(entry) and _present(stop) and _present(target)):
        return 0.0
    risk = abs(entry - stop)
    if risk == 0:
        return 0.0
    return abs(target - entry) / risk


def realized_r(entry: Optional[float], stop: Optional[float], exit_price: Optional[float]) -> Optional[float]:
    """(exit - entry) / |entry - stop|. None until the trade has an exit."""
    if not (_present(entry) and _present(stop) and _present(exit_price)):
        return None
    risk = abs(entry - stop)
    if risk == 0:
        return None
    return (exit_price - entry) / risk


def average_score(
    preparation: Optional[int],
    entry_score: Optional[int],
    stop_loss: Optional[int],
    target_score: Optional[int],
    management: Optional[int],
    rules: Optional[int],
) -> Optional[float]:
    """Mean of the six scores, only when all six are set."""
    scores = [preparation, entry_score, stop_loss, target_score, management, rules]
    if not all(_is_score(s) for s in scores):
        return None
    return sum(scores) / len(scores)


def derive_trade_metrics(inp: TradeInput) -> DerivedFields:
    """Compute every derived field from raw inputs."""
    return DerivedFields(
        stop_ticks=stop_ticks(inp.entry, inp.stop, inp.tick_value),
        pot_result=potential_r(inp.entry, inp.stop, inp.target),
        result=realized_r(inp.entry, inp.stop, inp.exit),
        average=average_score(
            inp.preparation, inp.entry_score, inp.stop_loss,
            inp.target_score, inp.management, inp.rules,
        ),
    )


def day_of_week(iso_date: Optional[str]) -> Optional[str]:
    """'2024-01-15' -> 'Mon'. None when the date cannot be parsed."""
    if not iso_date:
        return None
    try:
        d = date_cls.fromisoformat(iso_date[:10])
    except ValueError:
        return None
    return _WEEKDAYS[d.weekday()].value


def derive_trade(record: TradeRecord, tick_value: Optional[float]) -> TradeRecord:
    """Copy of record with day and all derived fields recomputed."""
    derived = derive_trade_metrics(TradeInput.from_record(record, tick_value))
    return dataclasses.replace(
        record,
        day=day_of_week(record.date) or record.day,
        stop_ticks=derived.stop_ticks,
        pot_result=derived.pot_result,
        result=derived.result,
        average=derived.average,
    )


def apply_trade_update(
    current: TradeRecord,
    changes: Mapping[str, Any],
    tick_value: Optional[float],
) -> TradeRecord:
    """
    Merge a partial update onto a stored trade and re-derive.
    Keys present in changes override (None clears, e.g. removing an exit);
    derived fields in changes are ignored. Unknown keys raise ValueError.
    """
    unknown = set(changes) - _RECORD_FIELDS
    if unknown:
        raise ValueError(f"Unknown trade fields: {', '.join(sorted(unknown))}")
    updates = {k: v for k, v in changes.items() if k not in _DERIVED_FIELDS}
    if updates.get("date", current.date) != current.date:
        logger.debug("Trade %s moved to %s", current.id, updates["date"])
    return derive_trade(dataclasses.replace(current, **updates), tick_value)

