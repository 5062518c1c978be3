"""Domain Models: Core data structures for portfolio metrics.

These models represent the inputs and output of the metrics engine:
- Trade: An executed trade, already enriched with its realized PNL
- Position: Current holding with average cost and latest price
- DailyResult: One day's PNL record from the history store
- Metrics: The 13-field dashboard result (M1..M13)

Design Principles:
- Immutable (frozen dataclass)
- Validation in __post_init__
- Dates normalized to ISO-8601 strings so that string comparison
  equals chronological comparison
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

# Type alias for trade action
TradeAction = Literal["buy", "sell", "short", "cover"]

OPENING_ACTIONS: tuple[str, ...] = ("buy", "cover")
CLOSING_ACTIONS: tuple[str, ...] = ("sell", "short")

# YYYY-MM-DD, optionally followed by a time-of-day suffix
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ].*)?$")


def normalize_date(value: str | date | datetime) -> str:
    """Normalize a date value to a lexicographically sortable ISO string.

    Args:
        value: ISO string, date or datetime

    Returns:
        ISO-8601 string starting with YYYY-MM-DD

    Raises:
        ValueError: If the value is empty or not ISO formatted

    Example:
        >>> normalize_date("2024-01-15 09:30:00")
        '2024-01-15T09:30:00'
    """
    if isinstance(value, (date, datetime)):
        # datetime is a date subclass; isoformat() covers both
        return value.isoformat()
    if not value:
        raise ValueError("date cannot be empty")
    text = str(value).strip()
    if not DATE_PATTERN.match(text):
        raise ValueError(f"date must be YYYY-MM-DD format, got: {value}")
    if len(text) > 10 and text[10] == " ":
        text = f"{text[:10]}T{text[11:]}"
    return text


def to_day(value: str | date | datetime) -> str:
    """Calendar day (YYYY-MM-DD) of a date value."""
    return normalize_date(value)[:10]


def _validate_positive(value: int | float, field_name: str) -> None:
    """Validate that value is positive."""
    if value <= 0:
        raise ValueError(f"{field_name} must be positive, got: {value}")


def _is_missing(value: float | None) -> bool:
    """None and NaN both mean "no value" in the input tables."""
    return value is None or (isinstance(value, float) and math.isnan(value))


@dataclass(frozen=True, slots=True)
class Trade:
    """An executed trade.

    `realized_pnl` is computed upstream by the enrichment step and is
    authoritative for M4/M9/M10. It may be None when the enrichment
    step produced nothing for the trade.

    Attributes:
        date: Execution timestamp, ISO-8601 (e.g., "2024-01-15T09:30:00")
        symbol: Instrument identifier (e.g., "AAPL")
        action: One of buy, sell, short, cover
        quantity: Number of shares (must be positive)
        price: Execution price (must be positive)
        realized_pnl: Realized PNL booked by this trade, if any

    Example:
        >>> t = Trade("2024-01-15T09:30:00", "AAPL", "buy", 100, 185.2)
        >>> t.day
        '2024-01-15'
    """

    date: str
    symbol: str
    action: TradeAction
    quantity: float
    price: float
    realized_pnl: float | None = None

    def __post_init__(self) -> None:
        """Validate and normalize fields after initialization."""
        # frozen: normalized date must be set through object.__setattr__
        object.__setattr__(self, "date", normalize_date(self.date))
        if not self.symbol:
            raise ValueError("symbol cannot be empty")
        if self.action not in OPENING_ACTIONS + CLOSING_ACTIONS:
            raise ValueError(
                f"action must be one of buy/sell/short/cover, got: {self.action}"
            )
        _validate_positive(self.quantity, "quantity")
        _validate_positive(self.price, "price")
        if _is_missing(self.realized_pnl):
            object.__setattr__(self, "realized_pnl", None)

    @property
    def day(self) -> str:
        """Calendar day of the trade (YYYY-MM-DD)."""
        return self.date[:10]

    @property
    def is_opening(self) -> bool:
        """Buy or cover: pushes a new lot."""
        return self.action in OPENING_ACTIONS

    @property
    def is_closing(self) -> bool:
        """Sell or short: consumes open lots."""
        return self.action in CLOSING_ACTIONS

    @property
    def pnl(self) -> float:
        """Realized PNL with missing values treated as zero."""
        return self.realized_pnl or 0.0

    def on_day(self, day: str) -> bool:
        """Check if the trade was executed on the given calendar day."""
        return self.date.startswith(day)


@dataclass(frozen=True, slots=True)
class Position:
    """A current holding.

    Attributes:
        symbol: Instrument identifier
        qty: Signed quantity (negative = short)
        avg_price: Average cost per share
        last: Latest traded price
    """

    symbol: str
    qty: float
    avg_price: float
    last: float

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("symbol cannot be empty")
        _validate_positive(self.avg_price, "avg_price")
        _validate_positive(self.last, "last")

    @property
    def cost_basis(self) -> float:
        """Cost of the position regardless of direction."""
        return self.avg_price * abs(self.qty)

    @property
    def market_value(self) -> float:
        """Signed market value (short positions are negative)."""
        return self.last * self.qty

    @property
    def is_short(self) -> bool:
        return self.qty < 0


@dataclass(frozen=True, slots=True)
class DailyResult:
    """One trading day's PNL record.

    Attributes:
        date: Calendar day (YYYY-MM-DD)
        realized: Realized PNL for the day
        floating: Floating (unrealized) PNL at day end
        pnl: Total PNL for the day
    """

    date: str
    realized: float = 0.0
    floating: float = 0.0
    pnl: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", to_day(self.date))
        for name in ("realized", "floating", "pnl"):
            if _is_missing(getattr(self, name)):
                object.__setattr__(self, name, 0.0)


# Display order of the dashboard metrics
METRIC_KEYS: tuple[str, ...] = tuple(f"M{i}" for i in range(1, 14))


@dataclass(frozen=True, slots=True)
class Metrics:
    """The 13 dashboard metrics.

    Attributes:
        total_cost: M1, account cost basis
        market_value: M2, current market value
        float_pnl: M3, floating PNL (M2 - M1)
        today_realized_pnl: M4, realized PNL of today's trades
        intraday_pnl: M5, same-day round-trip PNL (FIFO)
        today_float_pnl: M6, M3 + M4
        today_trade_count: M7, number of trades dated today
        total_trade_count: M8, number of trades in the whole ledger
        historical_realized_pnl: M9, realized PNL before today
        win_rate: M10, winning trade percentage (0-100)
        wtd_pnl: M11, week-to-date PNL
        mtd_pnl: M12, month-to-date PNL
        ytd_pnl: M13, year-to-date PNL
    """

    total_cost: float
    market_value: float
    float_pnl: float
    today_realized_pnl: float
    intraday_pnl: float
    today_float_pnl: float
    today_trade_count: int
    total_trade_count: int
    historical_realized_pnl: float
    win_rate: float
    wtd_pnl: float
    mtd_pnl: float
    ytd_pnl: float

    def to_dict(self) -> dict[str, float]:
        """Metrics keyed M1..M13."""
        values = (
            self.total_cost,
            self.market_value,
            self.float_pnl,
            self.today_realized_pnl,
            self.intraday_pnl,
            self.today_float_pnl,
            self.today_trade_count,
            self.total_trade_count,
            self.historical_realized_pnl,
            self.win_rate,
            self.wtd_pnl,
            self.mtd_pnl,
            self.ytd_pnl,
        )
        return dict(zip(METRIC_KEYS, values))

    def __getitem__(self, key: str) -> float:
        return self.to_dict()[key]
