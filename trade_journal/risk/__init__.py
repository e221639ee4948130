"""Risk: position sizing, chicken-out exits."""

from trade_journal.risk.sizing import position_size, is_chicken_out, missed_r

__all__ = ["position_size", "is_chicken_out", "missed_r"]
