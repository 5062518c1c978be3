"""Domain Layer: Core business logic and entities.

This layer contains:
- models.py: Data structures (Trade, Position, DailyResult, Metrics)
- fifo.py: FIFO lot matching (intraday and full-history variants)
- periods.py: WTD/MTD/YTD aggregation
- metrics.py: The 13-metric aggregator
- positions.py: Per-position breakdown and totals
"""

from portfolio_metrics.domain.models import (
    TradeAction,
    Trade,
    Position,
    DailyResult,
    Metrics,
    METRIC_KEYS,
    normalize_date,
    to_day,
)
from portfolio_metrics.domain.fifo import (
    OpenLot,
    LotBook,
    build_lot_book,
    calculate_intraday_trade_pnl,
    calculate_today_fifo_pnl,
)
from portfolio_metrics.domain.periods import (
    PeriodMetrics,
    calculate_period_metrics,
    calculate_wtd,
    sum_since,
    week_start,
)
from portfolio_metrics.domain.metrics import (
    MetricsBreakdown,
    calculate_metrics,
    calculate_metrics_detailed,
    resolve_today,
    win_rate,
)
from portfolio_metrics.domain.positions import (
    PositionSummary,
    PositionTotals,
    calculate_position_summaries,
    calculate_position_totals,
    summarize_position,
)

__all__ = [
    # Models
    "TradeAction",
    "Trade",
    "Position",
    "DailyResult",
    "Metrics",
    "METRIC_KEYS",
    "normalize_date",
    "to_day",
    # FIFO
    "OpenLot",
    "LotBook",
    "build_lot_book",
    "calculate_intraday_trade_pnl",
    "calculate_today_fifo_pnl",
    # Periods
    "PeriodMetrics",
    "calculate_period_metrics",
    "calculate_wtd",
    "sum_since",
    "week_start",
    # Metrics
    "MetricsBreakdown",
    "calculate_metrics",
    "calculate_metrics_detailed",
    "resolve_today",
    "win_rate",
    # Positions
    "PositionSummary",
    "PositionTotals",
    "calculate_position_summaries",
    "calculate_position_totals",
    "summarize_position",
]
