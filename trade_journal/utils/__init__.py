"""Utils: time-of-day parsing."""

from trade_journal.utils.timeofday import parse_hhmm, try_parse_hhmm, format_hhmm

__all__ = ["parse_hhmm", "try_parse_hhmm", "format_hhmm"]
