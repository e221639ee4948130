"""
CSV persistence for trade records (pandas), plus DataFrame views of bucket tables.
Column names follow the TradeRecord fields; confluences are ';'-separated.
"""

from __future__ import annotations
import dataclasses
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from trade_journal.core.types import AggregationBucket, SCORE_FIELDS, TradeRecord
from trade_journal.derivation.engine import derive_trade
from trade_journal.store.instruments import InstrumentBook

logger = logging.getLogger("trade_journal.store")

FLOAT_COLUMNS = ("entry", "stop", "target", "exit", "stop_ticks", "pot_result", "result", "average")
INT_COLUMNS = SCORE_FIELDS + ("id",)
BOOL_TRUE = ("1", "true", "yes", "y")
CONFLUENCE_SEP = ";"

_FIELDS = [f.name for f in dataclasses.fields(TradeRecord)]


def _clean(value: Any) -> Any:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _row_to_record(row: Dict[str, Any]) -> TradeRecord:
    kwargs: Dict[str, Any] = {}
    for name, raw in row.items():
        value = _clean(raw)
        if name in FLOAT_COLUMNS:
            kwargs[name] = None if value is None else float(value)
        elif name in INT_COLUMNS:
            if value is not None and not float(value).is_integer():
                raise ValueError(f"{name} must be a whole number, got {value}")
            kwargs[name] = None if value is None else int(value)
        elif name == "stopped_out":
            kwargs[name] = str(value).strip().lower() in BOOL_TRUE if value is not None else False
        elif name == "confluences":
            kwargs[name] = [c.strip() for c in str(value).split(CONFLUENCE_SEP) if c.strip()] if value else []
        elif value is not None:
            kwargs[name] = str(value).strip()
    for name in ("stop_ticks", "pot_result"):
        if kwargs.get(name) is None:
            kwargs.pop(name, None)
    return TradeRecord(**kwargs)


def load_trades_csv(path: Path, instruments: Optional[InstrumentBook] = None) -> List[TradeRecord]:
    """
    Read a trades CSV. With an InstrumentBook every record is re-derived;
    trades on unknown instruments keep the stop ticks stored in the file.
    A fractional score or id raises ValueError naming the row.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Trades file not found: {path}")
    df = pd.read_csv(path, dtype=str, skipinitialspace=True)
    if "date" not in df.columns:
        raise ValueError(f"{path} has no 'date' column")
    unknown = [c for c in df.columns if c not in _FIELDS]
    if unknown:
        logger.debug("Ignoring columns: %s", ", ".join(unknown))
    df = df[[c for c in df.columns if c in _FIELDS]].copy()
    for col in FLOAT_COLUMNS + INT_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    trades: List[TradeRecord] = []
    for idx, row in enumerate(df.to_dict(orient="records")):
        if _clean(row.get("date")) is None:
            logger.warning("Skipping row %d: no date", idx + 1)
            continue
        try:
            record = _row_to_record(row)
        except ValueError as e:
            raise ValueError(f"{path} row {idx + 1}: {e}") from e
        if instruments is not None:
            if record.instrument_name in instruments:
                record = derive_trade(record, instruments.tick_value(record.instrument_name))
            else:
                logger.warning("Row %d: unknown instrument %r, keeping stored stop ticks", idx + 1, record.instrument_name)
                record = dataclasses.replace(derive_trade(record, None), stop_ticks=record.stop_ticks)
        trades.append(record)
    logger.info("Loaded %d trades from %s", len(trades), path)
    return trades


def trades_to_frame(trades: List[TradeRecord]) -> pd.DataFrame:
    rows = []
    for t in trades:
        row = dataclasses.asdict(t)
        row["confluences"] = CONFLUENCE_SEP.join(t.confluences)
        rows.append(row)
    return pd.DataFrame(rows, columns=_FIELDS)


def save_trades_csv(trades: List[TradeRecord], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    trades_to_frame(trades).to_csv(path, index=False)
    return path


def buckets_to_frame(buckets: List[AggregationBucket]) -> pd.DataFrame:
    """Flatten a bucket table (details depth-first) for display."""
    rows: List[Dict[str, Any]] = []

    def walk(items: List[AggregationBucket], level: int, parent: str) -> None:
        for b in items:
            rows.append({
                "level": level,
                "parent": parent,
                "key": b.key,
                "trades": b.trade_count,
                "winners": b.winners,
                "losers": b.losers,
                "break_even": b.break_even,
                "win_rate": b.win_rate_percent,
                "total_r": b.total_r,
            })
            if b.details:
                walk(b.details, level + 1, f"{parent}/{b.key}" if parent else b.key)

    walk(buckets, 0, "")
    return pd.DataFrame(
        rows,
        columns=["level", "parent", "key", "trades", "winners", "losers", "break_even", "win_rate", "total_r"],
    )
