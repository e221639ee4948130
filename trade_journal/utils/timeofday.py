"""Time-of-day string helpers (HH:MM <-> minutes since midnight)."""

from __future__ import annotations
from typing import Optional


def parse_hhmm(value: str) -> int:
    """Convert 'HH:MM' (or 'HH:MM:SS') to minutes since midnight."""
    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Unsupported time of day: {value}")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Unsupported time of day: {value}") from None
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Unsupported time of day: {value}")
    return hours * 60 + minutes


def try_parse_hhmm(value: Optional[str]) -> Optional[int]:
    """Like parse_hhmm but returns None for missing or malformed values."""
    if not value:
        return None
    try:
        return parse_hhmm(value)
    except ValueError:
        return None


def format_hhmm(minutes: int) -> str:
    """Minutes since midnight to zero-padded 'HH:MM'."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
