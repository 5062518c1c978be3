"""Position Repository: Access to the current position snapshot.

Provides read access to data/positions.{parquet,json,csv}.
One row per symbol: signed quantity, average cost and latest price.
"""

import polars as pl

from portfolio_metrics.domain.models import Position
from portfolio_metrics.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    read_frame,
    rename_columns,
    require_columns,
)
from portfolio_metrics.infrastructure.config import DataPaths, DEFAULT_PATHS

COLUMNS = ("symbol", "qty", "avg_price", "last")
ALIASES = {"avgPrice": "avg_price", "quantity": "qty"}


class PositionRepository(Repository[list[Position]]):
    """Repository for current positions.

    Example:
        >>> repo = PositionRepository()
        >>> positions = repo.get_all()
        >>> aapl = repo.get_position("AAPL")
    """

    def __init__(self, paths: DataPaths = DEFAULT_PATHS):
        self._paths = paths
        self._cache: list[Position] | None = None

    def get_all(self) -> list[Position]:
        """Load all positions.

        Raises:
            RepositoryError: If file cannot be read, a row is invalid,
                or a symbol appears more than once
        """
        if self._cache is not None:
            return self._cache

        path = self._paths.positions
        df = rename_columns(read_frame(path), ALIASES)
        require_columns(df, COLUMNS, path)

        duplicates = (
            df.group_by("symbol").len().filter(pl.col("len") > 1)["symbol"].to_list()
        )
        if duplicates:
            raise RepositoryError(
                f"Duplicate positions for: {', '.join(sorted(map(str, duplicates)))}",
                str(path),
            )

        positions = []
        for i, row in enumerate(df.select(COLUMNS).iter_rows(named=True)):
            try:
                positions.append(Position(
                    symbol=str(row["symbol"]),
                    qty=row["qty"],
                    avg_price=row["avg_price"],
                    last=row["last"],
                ))
            except (TypeError, ValueError) as e:
                raise RepositoryError(f"Invalid position at row {i}: {e}", str(path)) from e

        self._cache = positions
        return self._cache

    def get_position(self, symbol: str) -> Position | None:
        """Get the position for a symbol, or None if not held."""
        for position in self.get_all():
            if position.symbol == symbol:
                return position
        return None

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._cache = None
