"""Store collaborators: instrument tick values, trade filters, CSV load/save."""

from trade_journal.store.instruments import InstrumentBook, UnknownInstrumentError
from trade_journal.store.filters import TradeFilter, query_trades
from trade_journal.store.csv_store import (
    load_trades_csv,
    save_trades_csv,
    trades_to_frame,
    buckets_to_frame,
)

__all__ = [
    "InstrumentBook",
    "UnknownInstrumentError",
    "TradeFilter",
    "query_trades",
    "load_trades_csv",
    "save_trades_csv",
    "trades_to_frame",
    "buckets_to_frame",
]
