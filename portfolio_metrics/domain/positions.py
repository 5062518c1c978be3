"""Per-position breakdown for the positions table.

Each open position is joined with the realized PNL and trade count of
its symbol's ledger entries. The totals row is taken from the dashboard
metrics so that it matches M2, M3 and M9 exactly:

    market value = M2
    unrealized   = M3
    total PNL    = M3 + M9
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Sequence

from portfolio_metrics.domain.models import Metrics, Position, Trade


@dataclass(frozen=True, slots=True)
class PositionSummary:
    """One row of the positions table.

    Attributes:
        symbol: Instrument identifier
        qty: Signed quantity (negative = short)
        avg_price: Average cost per share
        last: Latest traded price
        market_value: last × qty
        unrealized_pnl: (last − avg_price) × qty
        unrealized_pct: (last − avg_price) / avg_price, as a fraction
        realized_pnl: Σ realized PNL of the symbol's trades
        trade_count: Number of the symbol's trades
        total_pnl: unrealized_pnl + realized_pnl
    """

    symbol: str
    qty: float
    avg_price: float
    last: float
    market_value: float
    unrealized_pnl: float
    unrealized_pct: float
    realized_pnl: float
    trade_count: int
    total_pnl: float


@dataclass(frozen=True, slots=True)
class PositionTotals:
    """Totals row of the positions table."""

    market_value: float
    unrealized_pnl: float
    realized_pnl: float
    total_pnl: float


def summarize_position(position: Position, trades: Iterable[Trade] = ()) -> PositionSummary:
    """Build the summary row of one position.

    Args:
        position: The open position
        trades: Trades of the position's symbol (others are ignored)

    Example:
        >>> p = Position("AAPL", qty=10, avg_price=100.0, last=110.0)
        >>> summarize_position(p).unrealized_pnl
        100.0
    """
    realized = 0.0
    count = 0
    for trade in trades:
        if trade.symbol != position.symbol:
            continue
        realized += trade.pnl
        count += 1

    unrealized = (position.last - position.avg_price) * position.qty
    return PositionSummary(
        symbol=position.symbol,
        qty=position.qty,
        avg_price=position.avg_price,
        last=position.last,
        market_value=position.market_value,
        unrealized_pnl=unrealized,
        unrealized_pct=(position.last - position.avg_price) / position.avg_price,
        realized_pnl=realized,
        trade_count=count,
        total_pnl=unrealized + realized,
    )


def calculate_position_summaries(
    positions: Sequence[Position],
    trades: Sequence[Trade] = (),
) -> list[PositionSummary]:
    """Summary rows for every position, in input order.

    Symbols without trades get zero realized PNL and a zero count.
    """
    by_symbol: defaultdict[str, list[Trade]] = defaultdict(list)
    for trade in trades:
        by_symbol[trade.symbol].append(trade)

    return [summarize_position(p, by_symbol.get(p.symbol, ())) for p in positions]


def calculate_position_totals(metrics: Metrics) -> PositionTotals:
    """Totals row derived from the dashboard metrics."""
    return PositionTotals(
        market_value=metrics.market_value,
        unrealized_pnl=metrics.float_pnl,
        realized_pnl=metrics.historical_realized_pnl,
        total_pnl=metrics.float_pnl + metrics.historical_realized_pnl,
    )
