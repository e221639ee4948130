"""
Performance aggregation: group trades by a dimension and reduce every group to
counts, win rate and summed R. Also streaks over the chronological trade list.

Pure group-then-reduce over the input list; nothing is cached or mutated.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from trade_journal.analytics.dimensions import DimensionSpec
from trade_journal.core.types import (
    AggregationBucket,
    BREAK_EVEN_THRESHOLD,
    TradeRecord,
    TradeStatus,
)
from trade_journal.utils.timeofday import try_parse_hhmm

logger = logging.getLogger("trade_journal.analytics")


@dataclass
class StreakStats:
    """Longest runs of consecutive winners, expenses and break-evens."""
    max_win_streak: int = 0
    max_loss_streak: int = 0
    max_break_even_streak: int = 0


@dataclass
class OverviewStats:
    """Whole-dataset bucket plus streaks."""
    total_trades: int
    winners: int
    expenses: int
    break_even: int
    win_rate: float
    total_r: float
    max_win_streak: int
    max_loss_streak: int
    max_break_even_streak: int


def _status(trade: TradeRecord) -> str:
    s = trade.status
    return s.value if isinstance(s, TradeStatus) else (s or "")


def is_winner(trade: TradeRecord) -> bool:
    return _status(trade) == TradeStatus.WINNER.value


def is_expense(trade: TradeRecord) -> bool:
    return _status(trade) == TradeStatus.EXPENSE.value


def is_break_even(trade: TradeRecord) -> bool:
    """Closed with |R| under the fixed 0.1 threshold."""
    return trade.result is not None and abs(trade.result) < BREAK_EVEN_THRESHOLD


def win_rate_percent(winners: int, total: int) -> float:
    if total == 0:
        return 0.0
    return 100.0 * winners / total


def total_r(trades: Iterable[TradeRecord]) -> float:
    return sum(t.result or 0.0 for t in trades)


def reduce_group(key: str, trades: List[TradeRecord]) -> AggregationBucket:
    """Counts, win rate and R for one group of trades."""
    winners = sum(1 for t in trades if is_winner(t))
    return AggregationBucket(
        key=key,
        trade_count=len(trades),
        winners=winners,
        losers=sum(1 for t in trades if is_expense(t)),
        break_even=sum(1 for t in trades if is_break_even(t)),
        win_rate_percent=win_rate_percent(winners, len(trades)),
        total_r=total_r(trades),
    )


def group_trades(
    trades: Iterable[TradeRecord],
    key: Callable[[TradeRecord], Optional[str]],
) -> Dict[str, List[TradeRecord]]:
    """Partition trades by key in first-seen order. Trades keyed None are dropped."""
    groups: Dict[str, List[TradeRecord]] = {}
    dropped = 0
    for t in trades:
        k = key(t)
        if k is None:
            dropped += 1
            continue
        groups.setdefault(k, []).append(t)
    if dropped:
        logger.debug("%d trades without a group key", dropped)
    return groups


def aggregate_by(trades: List[TradeRecord], dimension: DimensionSpec) -> List[AggregationBucket]:
    """
    One bucket per key of the dimension.
    Fixed domains keep their declared order and ignore keys outside it;
    discovered keys are sorted by dimension.sort_key when given.
    Nested dimensions fill bucket.details from the group's own trades.
    """
    groups = group_trades(trades, dimension.key)
    if dimension.domain is not None:
        keys = list(dimension.domain)
    elif dimension.sort_key is not None:
        keys = sorted(groups, key=dimension.sort_key)
    else:
        keys = list(groups)

    buckets: List[AggregationBucket] = []
    for k in keys:
        members = groups.get(k, [])
        if not members and dimension.drop_empty:
            continue
        bucket = reduce_group(dimension.label(k), members)
        if dimension.child is not None:
            bucket.details = aggregate_by(members, dimension.child)
        buckets.append(bucket)
    return buckets


def chronological(trades: Iterable[TradeRecord]) -> List[TradeRecord]:
    """Stable sort by (date, confirmation time in minutes); same-timestamp trades keep input order."""
    indexed = list(enumerate(trades))
    indexed.sort(key=lambda it: (it[1].date or "", try_parse_hhmm(it[1].confirmation_time) or 0, it[0]))
    return [t for _, t in indexed]


def compute_streaks(trades: Iterable[TradeRecord]) -> StreakStats:
    """
    Single scan in chronological order. Winner, then Expense, then break-even by
    result; advancing one run resets the other two. Trades that are none of the
    three leave every run untouched.
    """
    stats = StreakStats()
    win = loss = flat = 0
    for t in chronological(trades):
        if is_winner(t):
            win, loss, flat = win + 1, 0, 0
            stats.max_win_streak = max(stats.max_win_streak, win)
        elif is_expense(t):
            win, loss, flat = 0, loss + 1, 0
            stats.max_loss_streak = max(stats.max_loss_streak, loss)
        elif is_break_even(t):
            win, loss, flat = 0, 0, flat + 1
            stats.max_break_even_streak = max(stats.max_break_even_streak, flat)
    return stats


def summarize(trades: List[TradeRecord]) -> OverviewStats:
    """Overall counts and streaks for the dashboard/report header."""
    overall = reduce_group("all", trades)
    streaks = compute_streaks(trades)
    return OverviewStats(
        total_trades=overall.trade_count,
        winners=overall.winners,
        expenses=overall.losers,
        break_even=overall.break_even,
        win_rate=overall.win_rate_percent,
        total_r=overall.total_r,
        max_win_streak=streaks.max_win_streak,
        max_loss_streak=streaks.max_loss_streak,
        max_break_even_streak=streaks.max_break_even_streak,
    )
