"""Core: config, types, logging."""

from trade_journal.core.config import load_config, Config
from trade_journal.core.types import (
    TradeStatus,
    Direction,
    Session,
    Weekday,
    ConfirmationType,
    TradeRecord,
    TradeInput,
    DerivedFields,
    AggregationBucket,
)
from trade_journal.core.logger import setup_logging

__all__ = [
    "load_config",
    "Config",
    "TradeStatus",
    "Direction",
    "Session",
    "Weekday",
    "ConfirmationType",
    "TradeRecord",
    "TradeInput",
    "DerivedFields",
    "AggregationBucket",
    "setup_logging",
]
