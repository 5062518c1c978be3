"""Metrics Aggregator: The 13 dashboard metrics.

Combines positions, trades and daily results into one Metrics record:

    M1  total cost          Σ avg_price × |qty|
    M2  market value        Σ last × qty
    M3  floating PNL        M2 - M1
    M4  today realized      Σ realized_pnl (today)
    M5  intraday PNL        FIFO, same-day round trips
    M6  today floating      M3 + M4
    M7  today trade count
    M8  total trade count   (buy + cover) + (sell + short)
    M9  historical realized Σ realized_pnl (not today)
    M10 win rate            wins / (wins + losses) × 100
    M11-M13                 WTD / MTD / YTD

"Today" is an explicit input. When omitted it is derived once per call
from the current UTC date. Every call is independent and pure.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Sequence

from portfolio_metrics.domain.fifo import (
    calculate_intraday_trade_pnl,
    calculate_today_fifo_pnl,
    split_by_day,
)
from portfolio_metrics.domain.models import (
    DailyResult,
    Metrics,
    Position,
    Trade,
    to_day,
)
from portfolio_metrics.domain.periods import PeriodMetrics, calculate_period_metrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MetricsBreakdown:
    """Metrics plus the intermediate figures behind them.

    Attributes:
        metrics: The published 13-field record
        today: Calendar day the metrics were computed for
        today_fifo_pnl: Today's closing PNL against pre-today lots
            (computed, not published in any metric)
        period: WTD/MTD/YTD totals
        win_count: Trades with realized_pnl > 0
        loss_count: Trades with realized_pnl < 0
    """
    metrics: Metrics
    today: str
    today_fifo_pnl: float
    period: PeriodMetrics
    win_count: int
    loss_count: int


def resolve_today(as_of: str | date | datetime | None = None) -> str:
    """Calendar day for "today": `as_of` if given, else the current UTC day."""
    if as_of is None:
        return datetime.now(timezone.utc).date().isoformat()
    return to_day(as_of)


def count_wins_losses(trades: Sequence[Trade]) -> tuple[int, int]:
    """Count trades with positive and negative realized PNL.

    Trades with zero or missing realized PNL count as neither.
    """
    wins = sum(1 for t in trades if t.pnl > 0)
    losses = sum(1 for t in trades if t.pnl < 0)
    return wins, losses


def _rate(wins: int, losses: int) -> float:
    decided = wins + losses
    if decided == 0:
        return 0.0
    return wins / decided * 100


def win_rate(trades: Sequence[Trade]) -> float:
    """Winning trade percentage (0-100), 0.0 when nothing was decided."""
    return _rate(*count_wins_losses(trades))


def calculate_metrics_detailed(
    trades: Sequence[Trade],
    positions: Sequence[Position],
    daily_results: Sequence[DailyResult] = (),
    as_of: str | date | datetime | None = None,
) -> MetricsBreakdown:
    """Calculate the dashboard metrics with intermediate figures.

    Args:
        trades: Enriched trade ledger
        positions: Current position snapshot (one per symbol)
        daily_results: Daily PNL history in recorded order
        as_of: The day to compute for; defaults to the current UTC day

    Returns:
        MetricsBreakdown
    """
    today = resolve_today(as_of)
    todays, others = split_by_day(trades, today)

    # Positions
    total_cost = sum((p.cost_basis for p in positions), 0.0)
    market_value = sum((p.market_value for p in positions), 0.0)
    float_pnl = market_value - total_cost

    # Realized (upstream enrichment figures)
    today_realized = sum((t.pnl for t in todays), 0.0)
    historical_realized = sum((t.pnl for t in others), 0.0)

    # FIFO
    intraday_pnl = calculate_intraday_trade_pnl(trades, today)
    today_fifo_pnl = calculate_today_fifo_pnl(trades, today)

    # Counts
    opening = sum(1 for t in trades if t.is_opening)
    closing = sum(1 for t in trades if t.is_closing)
    wins, losses = count_wins_losses(trades)

    period = calculate_period_metrics(daily_results, today)

    metrics = Metrics(
        total_cost=total_cost,
        market_value=market_value,
        float_pnl=float_pnl,
        today_realized_pnl=today_realized,
        intraday_pnl=intraday_pnl,
        today_float_pnl=float_pnl + today_realized,
        today_trade_count=len(todays),
        total_trade_count=opening + closing,
        historical_realized_pnl=historical_realized,
        win_rate=_rate(wins, losses),
        wtd_pnl=period.wtd,
        mtd_pnl=period.mtd,
        ytd_pnl=period.ytd,
    )

    # M5 is sourced from the intraday replay only; today_fifo_pnl is unpublished
    logger.debug(
        "metrics for %s: %d trades (%d today), %d positions, %d daily results, "
        "intraday=%.2f today_fifo=%.2f",
        today, len(trades), len(todays), len(positions), len(daily_results),
        intraday_pnl, today_fifo_pnl,
    )

    return MetricsBreakdown(
        metrics=metrics,
        today=today,
        today_fifo_pnl=today_fifo_pnl,
        period=period,
        win_count=wins,
        loss_count=losses,
    )


def calculate_metrics(
    trades: Sequence[Trade],
    positions: Sequence[Position],
    daily_results: Sequence[DailyResult] = (),
    as_of: str | date | datetime | None = None,
) -> Metrics:
    """Calculate the 13 dashboard metrics.

    Example:
        >>> positions = [Position("AAPL", qty=10, avg_price=100.0, last=110.0)]
        >>> m = calculate_metrics([], positions, as_of="2024-01-17")
        >>> m.total_cost, m.market_value, m.float_pnl
        (1000.0, 1100.0, 100.0)
    """
    return calculate_metrics_detailed(trades, positions, daily_results, as_of).metrics
