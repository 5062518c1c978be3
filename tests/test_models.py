"""Unit tests for domain models."""

import math
from datetime import date, datetime

import pytest
from portfolio_metrics.domain.models import (
    METRIC_KEYS,
    DailyResult,
    Metrics,
    Position,
    Trade,
    normalize_date,
    to_day,
)


class TestNormalizeDate:
    """Tests for date normalization."""

    def test_iso_string_unchanged(self):
        """ISO strings pass through."""
        assert normalize_date("2024-01-15T09:30:00") == "2024-01-15T09:30:00"
        assert normalize_date("2024-01-15") == "2024-01-15"

    def test_space_separator(self):
        """A space separator is rewritten to T."""
        assert normalize_date("2024-01-15 09:30:00") == "2024-01-15T09:30:00"

    def test_date_and_datetime(self):
        """date and datetime objects become ISO strings."""
        assert normalize_date(date(2024, 1, 15)) == "2024-01-15"
        assert normalize_date(datetime(2024, 1, 15, 9, 30)) == "2024-01-15T09:30:00"

    def test_invalid_format(self):
        """Non-ISO strings raise ValueError."""
        with pytest.raises(ValueError, match="must be YYYY-MM-DD"):
            normalize_date("2024/01/15")

    def test_empty(self):
        """Empty string raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            normalize_date("")

    def test_to_day(self):
        """to_day truncates to the calendar day."""
        assert to_day("2024-01-15T23:59:59") == "2024-01-15"
        assert to_day(datetime(2024, 1, 15, 12)) == "2024-01-15"


class TestTrade:
    """Tests for Trade dataclass."""

    def test_valid_trade(self):
        """Test creating a valid trade."""
        trade = Trade("2024-01-15 09:30:00", "AAPL", "buy", 100, 185.5)
        assert trade.date == "2024-01-15T09:30:00"
        assert trade.day == "2024-01-15"
        assert trade.is_opening is True
        assert trade.is_closing is False
        assert trade.realized_pnl is None
        assert trade.pnl == 0.0

    def test_closing_actions(self):
        """sell and short are closing, buy and cover are opening."""
        assert Trade("2024-01-15", "AAPL", "sell", 1, 1.0).is_closing
        assert Trade("2024-01-15", "AAPL", "short", 1, 1.0).is_closing
        assert Trade("2024-01-15", "AAPL", "cover", 1, 1.0).is_opening

    def test_on_day(self):
        """on_day matches any time of day."""
        trade = Trade("2024-01-15T15:59:00", "AAPL", "sell", 1, 1.0, 12.5)
        assert trade.on_day("2024-01-15")
        assert not trade.on_day("2024-01-16")
        assert trade.pnl == 12.5

    def test_nan_realized_pnl_is_missing(self):
        """A NaN realized PNL is stored as None and counts as zero."""
        trade = Trade("2024-01-15", "AAPL", "sell", 1, 1.0, float("nan"))
        assert trade.realized_pnl is None
        assert trade.pnl == 0.0
        assert not math.isnan(trade.pnl)

    def test_invalid_action(self):
        """Unknown action raises ValueError."""
        with pytest.raises(ValueError, match="action must be"):
            Trade("2024-01-15", "AAPL", "hold", 1, 1.0)

    def test_invalid_quantity(self):
        """Zero quantity raises ValueError."""
        with pytest.raises(ValueError, match="quantity must be positive"):
            Trade("2024-01-15", "AAPL", "buy", 0, 1.0)

    def test_invalid_price(self):
        """Negative price raises ValueError."""
        with pytest.raises(ValueError, match="price must be positive"):
            Trade("2024-01-15", "AAPL", "buy", 1, -1.0)

    def test_invalid_empty_symbol(self):
        """Empty symbol raises ValueError."""
        with pytest.raises(ValueError, match="symbol cannot be empty"):
            Trade("2024-01-15", "", "buy", 1, 1.0)

    def test_immutable(self):
        """Trade is immutable."""
        trade = Trade("2024-01-15", "AAPL", "buy", 1, 1.0)
        with pytest.raises(AttributeError):
            trade.quantity = 2


class TestPosition:
    """Tests for Position dataclass."""

    def test_long_position(self):
        """Cost basis and market value of a long position."""
        position = Position("AAPL", qty=10, avg_price=100.0, last=110.0)
        assert position.cost_basis == 1000.0
        assert position.market_value == 1100.0
        assert position.is_short is False

    def test_short_position(self):
        """Short positions have positive cost and negative value."""
        position = Position("NVDA", qty=-10, avg_price=50.0, last=45.0)
        assert position.cost_basis == 500.0
        assert position.market_value == -450.0
        assert position.is_short is True

    def test_invalid_avg_price(self):
        """Negative average price raises ValueError."""
        with pytest.raises(ValueError, match="avg_price must be positive"):
            Position("AAPL", qty=1, avg_price=-1.0, last=1.0)

    def test_zero_prices_rejected(self):
        """Zero average or last price raises ValueError."""
        with pytest.raises(ValueError, match="avg_price must be positive"):
            Position("AAPL", qty=1, avg_price=0.0, last=1.0)
        with pytest.raises(ValueError, match="last must be positive"):
            Position("AAPL", qty=1, avg_price=1.0, last=0.0)


class TestDailyResult:
    """Tests for DailyResult dataclass."""

    def test_date_truncated_to_day(self):
        """Timestamps are truncated to the calendar day."""
        result = DailyResult("2024-01-15T16:00:00", pnl=12.0)
        assert result.date == "2024-01-15"
        assert result.pnl == 12.0
        assert result.realized == 0.0

    def test_nan_values_become_zero(self):
        """NaN PNL fields read from a history table count as zero."""
        result = DailyResult("2024-01-15", realized=float("nan"), pnl=float("nan"))
        assert result.pnl == 0.0
        assert result.realized == 0.0


class TestMetrics:
    """Tests for Metrics dataclass."""

    def test_to_dict_keys(self):
        """to_dict is keyed M1..M13 in display order."""
        metrics = Metrics(*range(1, 14))
        d = metrics.to_dict()
        assert tuple(d) == METRIC_KEYS
        assert d["M1"] == 1
        assert d["M10"] == 10
        assert metrics["M13"] == 13


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
