"""Trade Repository: Access to the enriched trade ledger.

Provides read access to data/trades.{parquet,json,csv}.
Each row is one executed trade with its upstream realized PNL.
"""

import logging

import polars as pl

from portfolio_metrics.domain.models import Trade
from portfolio_metrics.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    read_frame,
    rename_columns,
    require_columns,
)
from portfolio_metrics.infrastructure.config import DataPaths, DEFAULT_PATHS

logger = logging.getLogger(__name__)

COLUMNS = ("date", "symbol", "action", "quantity", "price")
ALIASES = {"realizedPnl": "realized_pnl", "qty": "quantity"}


class TradeRepository(Repository[list[Trade]]):
    """Repository for the trade ledger.

    Trades are returned in file order; the metric engine sorts them
    itself where chronological order matters.

    Example:
        >>> repo = TradeRepository()
        >>> trades = repo.get_all()
        >>> symbols = repo.list_symbols()
    """

    def __init__(self, paths: DataPaths = DEFAULT_PATHS):
        self._paths = paths
        self._frame_cache: pl.DataFrame | None = None
        self._cache: list[Trade] | None = None

    def get_frame(self) -> pl.DataFrame:
        """Load the ledger as a DataFrame.

        Returns:
            DataFrame with columns: date, symbol, action, quantity,
            price, realized_pnl

        Raises:
            RepositoryError: If file cannot be read or columns are missing
        """
        if self._frame_cache is not None:
            return self._frame_cache

        path = self._paths.trades
        df = rename_columns(read_frame(path), ALIASES)
        require_columns(df, COLUMNS, path)
        if "realized_pnl" not in df.columns:
            df = df.with_columns(pl.lit(None, dtype=pl.Float64).alias("realized_pnl"))

        self._frame_cache = df.select(*COLUMNS, "realized_pnl")
        return self._frame_cache

    def get_all(self) -> list[Trade]:
        """Load all trades.

        Raises:
            RepositoryError: If file cannot be read or a row is invalid
        """
        if self._cache is not None:
            return self._cache

        trades = []
        for i, row in enumerate(self.get_frame().iter_rows(named=True)):
            try:
                trades.append(Trade(
                    date=row["date"],
                    symbol=str(row["symbol"]),
                    action=str(row["action"]).lower(),
                    quantity=row["quantity"],
                    price=row["price"],
                    realized_pnl=row["realized_pnl"],
                ))
            except (TypeError, ValueError) as e:
                raise RepositoryError(f"Invalid trade at row {i}: {e}", str(self._paths.trades)) from e

        logger.debug("loaded %d trades from %s", len(trades), self._paths.trades)
        self._cache = trades
        return self._cache

    def get_symbol(self, symbol: str) -> list[Trade]:
        """Get trades for a specific symbol."""
        return [t for t in self.get_all() if t.symbol == symbol]

    def list_symbols(self) -> list[str]:
        """Get list of all traded symbols."""
        return sorted({t.symbol for t in self.get_all()})

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._frame_cache = None
        self._cache = None
