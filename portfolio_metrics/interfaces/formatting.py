"""Presentation helpers for dashboard metrics.

Display labels, number formatting and sign-based tone for M1..M13,
plus the percentage format of the positions table.
M10 is the only percentage; sign coloring applies to the PNL metrics.
"""

import math

import polars as pl

from portfolio_metrics.domain.models import METRIC_KEYS, Metrics

NOT_AVAILABLE = "N/A"

METRIC_NAMES: dict[str, str] = {
    "M1": "Total Cost",
    "M2": "Market Value",
    "M3": "Floating PNL",
    "M4": "Today Realized PNL",
    "M5": "Intraday PNL",
    "M6": "Today Floating PNL",
    "M7": "Today Trades",
    "M8": "Total Trades",
    "M9": "Historical Realized PNL",
    "M10": "Win Rate",
    "M11": "WTD",
    "M12": "MTD",
    "M13": "YTD",
}

PERCENT_METRICS = frozenset({"M10"})
SIGNED_METRICS = frozenset({"M3", "M4", "M6", "M9", "M11", "M12", "M13"})


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def format_currency(value, decimals: int = 2) -> str:
    """Format as currency without symbol.

    Example:
        >>> format_currency(-1234.5)
        '-1,234.50'
    """
    if not _is_number(value):
        return NOT_AVAILABLE
    return f"{value:,.{decimals}f}"


def format_number(value, decimals: int = 2) -> str:
    """Format with fixed decimals, N/A for non-numeric values."""
    if not _is_number(value):
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}"


def format_percent(fraction, decimals: int = 2) -> str:
    """Format a fraction as a percentage.

    Example:
        >>> format_percent(0.075)
        '7.50%'
    """
    if not _is_number(fraction):
        return NOT_AVAILABLE
    return f"{fraction * 100:.{decimals}f}%"


def format_metric(
    key: str,
    value,
    currency_decimals: int = 2,
    percent_decimals: int = 1,
) -> str:
    """Format a metric for display (percent for M10, currency otherwise)."""
    if key in PERCENT_METRICS:
        text = format_number(value, percent_decimals)
        return text if text == NOT_AVAILABLE else f"{text}%"
    return format_currency(value, currency_decimals)


def metric_tone(key: str, value) -> str | None:
    """Sign-based tone for coloring.

    Returns:
        "positive", "negative" or "neutral" for signed metrics,
        None for metrics that are not colored
    """
    if key not in SIGNED_METRICS:
        return None
    if not _is_number(value) or value == 0:
        return "neutral"
    return "positive" if value > 0 else "negative"


def build_report_frame(
    metrics: Metrics,
    currency_decimals: int = 2,
    percent_decimals: int = 1,
) -> pl.DataFrame:
    """One row per metric in display order.

    Returns:
        DataFrame with columns: key, name, value, display, tone
    """
    values = metrics.to_dict()
    rows = [
        {
            "key": key,
            "name": METRIC_NAMES[key],
            "value": float(values[key]),
            "display": format_metric(key, values[key], currency_decimals, percent_decimals),
            "tone": metric_tone(key, values[key]),
        }
        for key in METRIC_KEYS
    ]
    return pl.DataFrame(
        rows,
        schema={
            "key": pl.String,
            "name": pl.String,
            "value": pl.Float64,
            "display": pl.String,
            "tone": pl.String,
        },
    )
