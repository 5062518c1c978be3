"""Dashboard Service: Compute dashboard metrics from stored data.

Orchestrates a metrics refresh:
1. Load trades, positions and daily history via repositories
2. Resolve the as-of day (explicit, or today in the configured zone)
3. Run the metrics aggregator
4. Keep the result in a caller-owned cache keyed by as-of day

It also builds the per-position breakdown shown beside the metrics.

The domain aggregator holds no state; this service is the only
place results are cached, and clear_cache() drops everything.
"""

import logging
from datetime import date, datetime
from pathlib import Path

import polars as pl

from portfolio_metrics.domain.metrics import MetricsBreakdown, calculate_metrics_detailed
from portfolio_metrics.domain.models import Metrics, to_day
from portfolio_metrics.domain.positions import (
    PositionSummary,
    PositionTotals,
    calculate_position_summaries,
    calculate_position_totals,
    summarize_position,
)
from portfolio_metrics.infrastructure import (
    DataPaths,
    DEFAULT_PATHS,
    MetricsConfig,
    DEFAULT_CONFIG,
    TradeRepository,
    PositionRepository,
    DailyResultRepository,
    today_in,
)

logger = logging.getLogger(__name__)


class DashboardService:
    """Service for computing and exporting dashboard metrics.

    Example:
        >>> service = DashboardService()
        >>> metrics = service.get_metrics(as_of="2024-01-17")
        >>> metrics.float_pnl
    """

    def __init__(
        self,
        paths: DataPaths = DEFAULT_PATHS,
        config: MetricsConfig | None = None,
    ):
        """Initialize the service.

        Args:
            paths: Data paths configuration
            config: Metric configuration (uses defaults if None)
        """
        self._paths = paths
        self._config = config or DEFAULT_CONFIG
        self._trade_repo = TradeRepository(paths)
        self._position_repo = PositionRepository(paths)
        self._daily_repo = DailyResultRepository(paths)
        self._cache: dict[str, MetricsBreakdown] = {}

    @property
    def config(self) -> MetricsConfig:
        return self._config

    def resolve_as_of(self, as_of: str | date | datetime | None = None) -> str:
        """Explicit as-of day, or today in the configured zone."""
        if as_of is None:
            return today_in(self._config.timezone)
        return to_day(as_of)

    def compute(self, as_of: str | date | datetime | None = None) -> MetricsBreakdown:
        """Compute metrics with intermediate figures.

        Args:
            as_of: Day to compute for (defaults to today)

        Returns:
            MetricsBreakdown

        Raises:
            RepositoryError: If trades or positions cannot be loaded
        """
        day = self.resolve_as_of(as_of)
        if day in self._cache:
            return self._cache[day]

        breakdown = calculate_metrics_detailed(
            trades=self._trade_repo.get_all(),
            positions=self._position_repo.get_all(),
            daily_results=self._daily_repo.get_all(),
            as_of=day,
        )
        logger.info("computed metrics for %s", day)

        self._cache[day] = breakdown
        return breakdown

    def get_metrics(self, as_of: str | date | datetime | None = None) -> Metrics:
        """Compute the 13 dashboard metrics."""
        return self.compute(as_of).metrics

    def get_positions(self) -> list[PositionSummary]:
        """Summary rows for every open position.

        Raises:
            RepositoryError: If trades or positions cannot be loaded
        """
        return calculate_position_summaries(
            self._position_repo.get_all(),
            self._trade_repo.get_all(),
        )

    def get_position(self, symbol: str) -> PositionSummary | None:
        """Summary row for one symbol, or None when no position is open."""
        position = self._position_repo.get_position(symbol)
        if position is None:
            return None
        return summarize_position(position, self._trade_repo.get_symbol(symbol))

    def get_position_totals(self, as_of: str | date | datetime | None = None) -> PositionTotals:
        """Totals row of the positions table for the as-of day."""
        return calculate_position_totals(self.get_metrics(as_of))

    def save_report(self, df: pl.DataFrame, base_name: str = "metrics_report") -> list[Path]:
        """Save a report DataFrame in the configured formats.

        Args:
            df: Report DataFrame
            base_name: File name without extension

        Returns:
            List of saved file paths
        """
        self._paths.ensure_dirs()
        saved = []

        for fmt in self._config.output_formats:
            path = self._paths.report_dir / f"{base_name}.{fmt}"
            if fmt == "csv":
                df.write_csv(path)
            elif fmt == "json":
                df.write_json(path)
            elif fmt == "parquet":
                df.write_parquet(path)
            else:
                logger.warning("unsupported report format: %s", fmt)
                continue
            saved.append(path)

        return saved

    def clear_cache(self) -> None:
        """Drop cached results and repository data."""
        self._cache.clear()
        self._trade_repo.clear_cache()
        self._position_repo.clear_cache()
        self._daily_repo.clear_cache()
