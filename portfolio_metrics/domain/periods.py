"""Period Metrics: Week/month/year-to-date PNL.

Sums the `pnl` of daily results whose date is on or after a lower bound:
- WTD: Monday of the week containing the last recorded day
- MTD: first day of today's month
- YTD: January 1st of today's year

All comparisons are plain string comparisons of YYYY-MM-DD dates.
There is no upper bound: every record from the lower bound onward counts.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Sequence

from portfolio_metrics.domain.models import DailyResult


@dataclass(frozen=True, slots=True)
class PeriodMetrics:
    """Calendar-period PNL totals.

    Attributes:
        wtd: Week-to-date PNL (M11)
        mtd: Month-to-date PNL (M12)
        ytd: Year-to-date PNL (M13)
    """
    wtd: float
    mtd: float
    ytd: float


def sum_since(results: Sequence[DailyResult], since: str) -> float:
    """Sum PNL of records dated on or after `since`."""
    return sum((r.pnl for r in results if r.date >= since), 0.0)


def week_start(day: str) -> str:
    """Monday of the week containing `day`.

    Example:
        >>> week_start("2024-01-17")  # Wednesday
        '2024-01-15'
    """
    d = date.fromisoformat(day[:10])
    return (d - timedelta(days=d.weekday())).isoformat()


def calculate_wtd(results: Sequence[DailyResult]) -> float:
    """Week-to-date PNL anchored on the last record in the list.

    The anchor is the last record, not today: if the history does not
    yet include today, the week of the most recent recorded day is used.
    """
    if not results:
        return 0.0
    return sum_since(results, week_start(results[-1].date))


def calculate_period_metrics(results: Sequence[DailyResult], today: str) -> PeriodMetrics:
    """Calculate WTD, MTD and YTD totals.

    Args:
        results: Daily results in recorded order
        today: Calendar day (YYYY-MM-DD)

    Returns:
        PeriodMetrics
    """
    month_start = today[:8] + "01"
    year_start = today[:5] + "01-01"

    return PeriodMetrics(
        wtd=calculate_wtd(results),
        mtd=sum_since(results, month_start),
        ytd=sum_since(results, year_start),
    )
