"""Instrument tick values, keyed by instrument name."""

from __future__ import annotations
from typing import Dict, Iterator, Mapping, Optional


class UnknownInstrumentError(KeyError):
    """Raised when a tick value is requested for an instrument that is not configured."""


class InstrumentBook:
    """Name -> tick value lookup fed from config.yaml's instruments section."""

    def __init__(self, tick_values: Optional[Mapping[str, float]] = None):
        self._tick_values: Dict[str, float] = {}
        for name, tick in (tick_values or {}).items():
            self.add(name, tick)

    def add(self, name: str, tick_value: float) -> None:
        tick_value = float(tick_value)
        if tick_value <= 0:
            raise ValueError(f"Tick value for {name} must be positive, got {tick_value}")
        self._tick_values[name] = tick_value

    def tick_value(self, name: Optional[str]) -> float:
        try:
            return self._tick_values[name]
        except KeyError:
            raise UnknownInstrumentError(f"Instrument {name!r} not found") from None

    def __contains__(self, name: object) -> bool:
        return name in self._tick_values

    def __iter__(self) -> Iterator[str]:
        return iter(self._tick_values)

    def __len__(self) -> int:
        return len(self._tick_values)
