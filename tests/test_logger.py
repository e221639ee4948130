"""Unit tests for core.logger."""

import logging

from trade_journal.analytics.aggregation import aggregate_by
from trade_journal.analytics.dimensions import DIMENSIONS
from trade_journal.core.logger import setup_logging
from trade_journal.core.types import TradeRecord
from trade_journal.derivation.engine import apply_trade_update


def test_setup_logging_console_and_file(tmp_path):
    log = setup_logging("debug", tmp_path / "logs", "journal.log")
    try:
        assert log.name == "trade_journal"
        assert log.level == logging.DEBUG
        assert len(log.handlers) == 2
        logging.getLogger("trade_journal.store").info("hello")
        for h in log.handlers:
            h.flush()
        assert "hello" in (tmp_path / "logs" / "journal.log").read_text(encoding="utf-8")
    finally:
        for h in list(log.handlers):
            h.close()
            log.removeHandler(h)


def test_setup_logging_unknown_level_falls_back_to_info():
    log = setup_logging("loud")
    try:
        assert log.level == logging.INFO
        assert len(log.handlers) == 1
    finally:
        log.handlers.clear()


def test_engines_log_at_debug_only(caplog):
    caplog.set_level(logging.DEBUG, logger="trade_journal")
    trade = TradeRecord(id=1, date="2024-01-15", session=None, entry=100.0, stop=98.0)
    apply_trade_update(trade, {"date": "2024-01-16"}, 0.25)
    aggregate_by([trade], DIMENSIONS["confirmation_time"])
    engine_records = [
        r for r in caplog.records
        if r.name in ("trade_journal.derivation", "trade_journal.analytics")
    ]
    assert engine_records
    assert all(r.levelno == logging.DEBUG for r in engine_records)
