"""Unit tests for interfaces/formatting.py."""

import math

import pytest

from portfolio_metrics.domain.models import METRIC_KEYS, Metrics
from portfolio_metrics.interfaces.formatting import (
    METRIC_NAMES,
    build_report_frame,
    format_currency,
    format_metric,
    format_number,
    format_percent,
    metric_tone,
)


class TestFormatCurrency:
    """Tests for format_currency."""

    @pytest.mark.parametrize("value,expected", [
        (0, "0.00"),
        (1234.5, "1,234.50"),
        (-1234567.891, "-1,234,567.89"),
    ])
    def test_values(self, value, expected):
        """Thousands separators and two decimals."""
        assert format_currency(value) == expected

    def test_not_available(self):
        """NaN and non-numeric values render N/A."""
        assert format_currency(math.nan) == "N/A"
        assert format_currency(None) == "N/A"
        assert format_currency("12") == "N/A"


class TestFormatNumber:
    """Tests for format_number."""

    def test_decimals(self):
        """Fixed decimals without separators."""
        assert format_number(1234.5678) == "1234.57"
        assert format_number(2, decimals=0) == "2"

    def test_nan(self):
        """NaN renders N/A."""
        assert format_number(float("nan")) == "N/A"


class TestFormatPercent:
    """Tests for format_percent."""

    def test_fraction(self):
        """Fractions render as percentages with two decimals."""
        assert format_percent(0.075) == "7.50%"
        assert format_percent(-0.1) == "-10.00%"

    def test_nan(self):
        """NaN renders N/A."""
        assert format_percent(math.nan) == "N/A"


class TestFormatMetric:
    """Tests for format_metric and metric_tone."""

    def test_win_rate_is_percent(self):
        """M10 renders as a percentage."""
        assert format_metric("M10", 60.0) == "60.0%"
        assert format_metric("M10", math.nan) == "N/A"

    def test_others_are_currency(self):
        """Other metrics render as currency."""
        assert format_metric("M1", 1000.0) == "1,000.00"
        assert format_metric("M7", 3) == "3.00"

    @pytest.mark.parametrize("key,value,expected", [
        ("M3", 10.0, "positive"),
        ("M4", -1.0, "negative"),
        ("M13", 0.0, "neutral"),
        ("M1", 10.0, None),
        ("M10", 60.0, None),
    ])
    def test_tone(self, key, value, expected):
        """Only signed metrics get a tone."""
        assert metric_tone(key, value) == expected


class TestBuildReportFrame:
    """Tests for build_report_frame."""

    def test_rows(self):
        """One row per metric in display order."""
        metrics = Metrics(*[float(i) for i in range(1, 14)])
        df = build_report_frame(metrics)

        assert df["key"].to_list() == list(METRIC_KEYS)
        assert df["name"].to_list() == [METRIC_NAMES[k] for k in METRIC_KEYS]
        assert df.filter(df["key"] == "M10")["display"].item() == "10.0%"
        assert df.filter(df["key"] == "M3")["tone"].item() == "positive"
        assert df.filter(df["key"] == "M1")["tone"].item() is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
