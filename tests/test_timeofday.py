"""Unit tests for utils.timeofday."""

import pytest
from trade_journal.utils.timeofday import format_hhmm, parse_hhmm, try_parse_hhmm


def test_parse_hhmm():
    assert parse_hhmm("04:30") == 270
    assert parse_hhmm("10:05:00") == 605
    assert parse_hhmm("00:00") == 0


def test_parse_hhmm_invalid():
    with pytest.raises(ValueError):
        parse_hhmm("4pm")
    with pytest.raises(ValueError):
        parse_hhmm("25:00")


def test_try_parse_hhmm():
    assert try_parse_hhmm(None) is None
    assert try_parse_hhmm("") is None
    assert try_parse_hhmm("bad") is None
    assert try_parse_hhmm("15:55") == 955


def test_format_hhmm():
    assert format_hhmm(270) == "04:30"
    assert format_hhmm(930) == "15:30"
