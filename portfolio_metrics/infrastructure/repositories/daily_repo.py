"""Daily Result Repository: Access to the daily PNL history.

Provides read access to data/daily_results.{parquet,json,csv}.
One record per trading day: realized, float and total PNL.
The file is optional; a missing file means an empty history.
"""

import polars as pl

from portfolio_metrics.domain.models import DailyResult
from portfolio_metrics.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    read_frame,
    require_columns,
)
from portfolio_metrics.infrastructure.config import DataPaths, DEFAULT_PATHS


class DailyResultRepository(Repository[list[DailyResult]]):
    """Repository for daily PNL history.

    Records are sorted by date so the last record is the most
    recent trading day.

    Example:
        >>> repo = DailyResultRepository()
        >>> history = repo.get_all()
        >>> last = repo.latest()
    """

    def __init__(self, paths: DataPaths = DEFAULT_PATHS):
        self._paths = paths
        self._cache: list[DailyResult] | None = None

    def get_all(self) -> list[DailyResult]:
        """Load the daily history.

        Returns:
            DailyResult list sorted by date (empty if no file)

        Raises:
            RepositoryError: If the file exists but cannot be read
        """
        if self._cache is not None:
            return self._cache

        path = self._paths.daily_results
        if not path.exists():
            self._cache = []
            return self._cache

        df = read_frame(path)
        require_columns(df, ("date", "pnl"), path)
        if df.schema["date"] != pl.String:
            df = df.with_columns(pl.col("date").cast(pl.String))
        df = df.sort("date", maintain_order=True)

        results = []
        for i, row in enumerate(df.iter_rows(named=True)):
            try:
                results.append(DailyResult(
                    date=row["date"],
                    realized=row.get("realized") or 0.0,
                    floating=row.get("float") or row.get("floating") or 0.0,
                    pnl=row["pnl"] or 0.0,
                ))
            except (TypeError, ValueError) as e:
                raise RepositoryError(f"Invalid daily result at row {i}: {e}", str(path)) from e

        self._cache = results
        return self._cache

    def latest(self) -> DailyResult | None:
        """Most recent daily result, or None if history is empty."""
        results = self.get_all()
        return results[-1] if results else None

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._cache = None
