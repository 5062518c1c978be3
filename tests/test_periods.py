"""Unit tests for domain/periods.py."""

import pytest

from portfolio_metrics.domain.models import DailyResult
from portfolio_metrics.domain.periods import (
    PeriodMetrics,
    calculate_period_metrics,
    calculate_wtd,
    sum_since,
    week_start,
)


def results(*rows: tuple[str, float]) -> list[DailyResult]:
    return [DailyResult(d, pnl=pnl) for d, pnl in rows]


class TestWeekStart:
    """Tests for week_start."""

    @pytest.mark.parametrize("day,expected", [
        ("2024-01-15", "2024-01-15"),  # Monday
        ("2024-01-17", "2024-01-15"),  # Wednesday
        ("2024-01-21", "2024-01-15"),  # Sunday
        ("2024-01-01", "2024-01-01"),  # Monday, new year
        ("2023-01-01", "2022-12-26"),  # Sunday, crosses year
    ])
    def test_monday(self, day, expected):
        """Weeks start on Monday."""
        assert week_start(day) == expected


class TestSumSince:
    """Tests for sum_since."""

    def test_inclusive_lower_bound(self):
        """Records on the bound are included."""
        data = results(("2024-01-14", 1.0), ("2024-01-15", 2.0), ("2024-01-16", 4.0))
        assert sum_since(data, "2024-01-15") == pytest.approx(6.0)

    def test_empty(self):
        """Empty history sums to zero."""
        assert sum_since([], "2024-01-01") == 0.0


class TestCalculateWtd:
    """Tests for calculate_wtd."""

    def test_anchored_on_last_record(self):
        """Last record on Wednesday: from that week's Monday onward."""
        data = results(
            ("2024-01-12", 100.0),  # Friday before
            ("2024-01-15", 10.0),
            ("2024-01-16", -3.0),
            ("2024-01-17", 5.0),
        )
        assert calculate_wtd(data) == pytest.approx(12.0)

    def test_anchor_is_not_today(self):
        """A stale history anchors on its own last week."""
        data = results(("2024-01-05", 7.0), ("2024-01-08", 3.0))
        assert calculate_wtd(data) == pytest.approx(3.0)

    def test_empty(self):
        """Empty history yields zero."""
        assert calculate_wtd([]) == 0.0


class TestCalculatePeriodMetrics:
    """Tests for calculate_period_metrics."""

    def test_periods(self):
        """MTD and YTD use today's month and year."""
        data = results(
            ("2023-12-29", 1000.0),
            ("2024-01-31", 10.0),
            ("2024-02-01", 20.0),
            ("2024-02-14", 30.0),
        )
        period = calculate_period_metrics(data, "2024-02-14")
        assert period == PeriodMetrics(wtd=30.0, mtd=50.0, ytd=60.0)

    def test_mtd_independent_of_history_range(self):
        """MTD uses today's month even when history ends earlier."""
        data = results(("2024-01-30", 5.0), ("2024-01-31", 6.0))
        period = calculate_period_metrics(data, "2024-02-02")
        assert period.mtd == 0.0
        assert period.ytd == pytest.approx(11.0)
        assert period.wtd == pytest.approx(11.0)

    def test_empty(self):
        """Empty history yields zeros."""
        assert calculate_period_metrics([], "2024-02-14") == PeriodMetrics(0.0, 0.0, 0.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
