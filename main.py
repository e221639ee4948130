#!/usr/bin/env python3
"""
Trade Journal CLI: report | kpis | derive | size
Usage:
  python main.py report [--dimension session] [--trades trades.csv] [--config config.yaml]
  python main.py kpis [--trades trades.csv]
  python main.py derive [--trades trades.csv] [--out derived.csv]
  python main.py size --instrument MNQ --stop-ticks 12
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

# Project root
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from trade_journal.analytics.dimensions import DIMENSIONS, get_dimension
from trade_journal.analytics.aggregation import aggregate_by
from trade_journal.analytics.kpis import compute_kpis, weekly_average_scores
from trade_journal.analytics.report import build_performance_report
from trade_journal.core.config import Config, load_config
from trade_journal.core.logger import setup_logging
from trade_journal.risk.sizing import position_size
from trade_journal.store import InstrumentBook, buckets_to_frame, load_trades_csv, save_trades_csv

logger = logging.getLogger("trade_journal")


def _setup(config_path: Path | None) -> Config:
    config = load_config(config_path, ROOT)
    setup_logging(config.log_level, config.log_dir, config.log_file)
    return config


def _load(config: Config, trades_path: Path | None):
    path = trades_path or config.trades_csv
    if not path.exists():
        logger.error("Trades file not found: %s (set TRADES_CSV or journal.trades_csv)", path)
        return None
    return load_trades_csv(path, InstrumentBook(config.instruments))


def run_report(config_path: Path | None, trades_path: Path | None, dimension: str | None) -> int:
    """Print the overview and one or all dimension tables."""
    config = _setup(config_path)
    trades = _load(config, trades_path)
    if trades is None:
        return 1
    if dimension:
        print(buckets_to_frame(aggregate_by(trades, get_dimension(dimension))).to_string(index=False))
        return 0
    report = build_performance_report(trades)
    if report is None:
        print("No trades to report on.")
        return 0
    o = report.overview
    print("\n--- Performance Report ---")
    print(f"Total trades: {o.total_trades} (winners: {o.winners}, expenses: {o.expenses}, break even: {o.break_even})")
    print(f"Win rate: {o.win_rate:.1f}%")
    print(f"Total R: {o.total_r:.2f}")
    print(f"Max streaks: win {o.max_win_streak}, expense {o.max_loss_streak}, break even {o.max_break_even_streak}")
    s = report.scores
    print(f"Average score: {s.overall:.2f} (based on {s.based_on} trades)")
    for name, buckets in report.tables.items():
        print(f"\n[{name}]")
        print(buckets_to_frame(buckets).to_string(index=False))
    return 0


def run_kpis(config_path: Path | None, trades_path: Path | None) -> int:
    """Print dashboard KPIs and the weekly score series."""
    config = _setup(config_path)
    trades = _load(config, trades_path)
    if trades is None:
        return 1
    k = compute_kpis(trades, recent_days=config.recent_days)
    print("\n--- Dashboard ---")
    print(f"Total trades: {k.total_trades} | Total R: {k.total_r:.2f}")
    print(f"Winners: {k.winners} (last {config.recent_days} days: {k.recent_winners})")
    print(f"Expenses: {k.expenses} (last {config.recent_days} days: {k.recent_expenses})")
    print(f"Break evens: {k.break_evens} (last {config.recent_days} days: {k.recent_break_evens})")
    print(f"Chicken outs: {k.chicken_out_count} | Missed R: {k.missed_r:.2f}")
    print(f"Win rate: {k.win_rate:.1f}% | Average win: {k.average_win:.2f}R")
    print(f"Average metrics score: {k.average_metrics_score:.2f} (based on {k.metrics_based_on} trades)")
    for w in weekly_average_scores(trades):
        print(f"  {w.week}: {w.average:.2f} ({w.count})")
    return 0


def run_derive(config_path: Path | None, trades_path: Path | None, out_path: Path | None) -> int:
    """Recompute derived fields for every trade and write them out."""
    config = _setup(config_path)
    trades = _load(config, trades_path)
    if trades is None:
        return 1
    target = out_path or trades_path or config.trades_csv
    save_trades_csv(trades, target)
    logger.info("Wrote %d trades to %s", len(trades), target)
    return 0


def run_size(config_path: Path | None, instrument: str, stop_ticks: float) -> int:
    """Contracts for a stop distance at the configured account size and risk."""
    config = _setup(config_path)
    book = InstrumentBook(config.instruments)
    contracts = position_size(config.account_size, config.risk_percent, stop_ticks, book.tick_value(instrument))
    print(f"{instrument}: {contracts} contracts (risk {config.risk_percent}% of {config.account_size:.2f}, stop {stop_ticks} ticks)")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Trade Journal CLI")
    parser.add_argument("mode", choices=["report", "kpis", "derive", "size"], help="What to run")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    parser.add_argument("--trades", type=Path, default=None, help="Trades CSV (overrides config)")
    parser.add_argument("--dimension", choices=sorted(DIMENSIONS), default=None, help="Single report table")
    parser.add_argument("--out", type=Path, default=None, help="Output CSV for derive")
    parser.add_argument("--instrument", default=None, help="Instrument name for size")
    parser.add_argument("--stop-ticks", type=float, default=None, help="Stop distance in ticks for size")
    args = parser.parse_args()
    if args.mode == "report":
        return run_report(args.config, args.trades, args.dimension)
    if args.mode == "kpis":
        return run_kpis(args.config, args.trades)
    if args.mode == "derive":
        return run_derive(args.config, args.trades, args.out)
    if args.instrument is None or args.stop_ticks is None:
        parser.error("size needs --instrument and --stop-ticks")
    return run_size(args.config, args.instrument, args.stop_ticks)


if __name__ == "__main__":
    exit(main())
