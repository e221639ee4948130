"""
Load configuration from config.yaml and .env. Env vars override YAML.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv


def _env_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path(__file__).resolve().parents[2]
    return root / ".env"


def load_dotenv_if_exists(project_root: Optional[Path] = None) -> None:
    """Load .env from project root if present."""
    path = _env_path(project_root)
    if path.exists():
        load_dotenv(path)


def load_config(config_path: Optional[Path] = None, project_root: Optional[Path] = None) -> "Config":
    """Load config.yaml and overlay with env. Returns Config."""
    load_dotenv_if_exists(project_root)
    root = project_root or Path(__file__).resolve().parents[2]
    path = config_path or root / "config.yaml"
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    def env(key: str, default: str = "") -> str:
        return os.getenv(key, default).strip()

    def env_int(key: str, default: int = 0) -> int:
        try:
            return int(os.getenv(key, str(default)))
        except ValueError:
            return default

    def env_float(key: str, default: float = 0.0) -> float:
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    logging_cfg = data.get("logging", {})
    journal = data.get("journal", {})
    risk = data.get("risk", {})
    instruments = data.get("instruments", {}) or {}

    trades_csv = env("TRADES_CSV", str(journal.get("trades_csv", "trades.csv")))

    return Config(
        # Journal
        trades_csv=Path(trades_csv),
        recent_days=env_int("RECENT_DAYS", journal.get("recent_days", 7)),
        instruments={str(name): float(tick) for name, tick in instruments.items()},
        # Risk
        account_size=env_float("ACCOUNT_SIZE", risk.get("account_size", 0.0)),
        risk_percent=env_float("RISK_PERCENT", risk.get("risk_percent", 1.0)),
        # Logging
        log_level=env("LOG_LEVEL", logging_cfg.get("level", "INFO")),
        log_dir=Path(logging_cfg.get("log_dir", "logs")),
        log_file=logging_cfg.get("log_file", "trade_journal.log"),
    )


class Config:
    """Unified configuration. Immutable after load."""

    __slots__ = (
        "trades_csv", "recent_days", "instruments",
        "account_size", "risk_percent",
        "log_level", "log_dir", "log_file",
    )

    def __init__(
        self,
        trades_csv: Path = None,
        recent_days: int = 7,
        instruments: Optional[Dict[str, float]] = None,
        account_size: float = 0.0,
        risk_percent: float = 1.0,
        log_level: str = "INFO",
        log_dir: Path = None,
        log_file: str = "trade_journal.log",
    ):
        self.trades_csv = Path(trades_csv) if trades_csv else Path("trades.csv")
        self.recent_days = recent_days
        self.instruments = dict(instruments or {})
        self.account_size = account_size
        self.risk_percent = risk_percent
        self.log_level = log_level
        self.log_dir = Path(log_dir) if log_dir else Path("logs")
        self.log_file = log_file
