"""Shared fixtures: a small account on Wednesday 2024-01-17."""

import json
from pathlib import Path

import polars as pl
import pytest

from portfolio_metrics.domain.models import DailyResult, Position, Trade
from portfolio_metrics.infrastructure import DataPaths

TODAY = "2024-01-17"

TRADE_ROWS = [
    # date, symbol, action, quantity, price, realized_pnl
    ("2024-01-10T10:00:00", "AAPL", "buy", 10, 100.0, None),
    ("2024-01-12T10:00:00", "AAPL", "sell", 5, 110.0, 50.0),
    ("2024-01-16T10:00:00", "MSFT", "buy", 2, 300.0, None),
    ("2024-01-16T11:00:00", "MSFT", "sell", 2, 290.0, -20.0),
    ("2024-01-17T09:30:00", "AAPL", "sell", 5, 120.0, 100.0),
    ("2024-01-17T10:00:00", "TSLA", "buy", 4, 200.0, None),
    ("2024-01-17T11:00:00", "TSLA", "sell", 3, 210.0, 30.0),
]

POSITION_ROWS = [
    # symbol, qty, avg_price, last
    ("TSLA", 1, 200.0, 215.0),
    ("NVDA", -10, 50.0, 45.0),
]

DAILY_ROWS = [
    # date, realized, float, pnl
    ("2023-12-29", 5.0, 0.0, 5.0),
    ("2024-01-12", 50.0, -40.0, 10.0),
    ("2024-01-15", 0.0, 20.0, 20.0),
    ("2024-01-16", -20.0, 15.0, -5.0),
]


@pytest.fixture
def trades() -> list[Trade]:
    return [Trade(*row) for row in TRADE_ROWS]


@pytest.fixture
def positions() -> list[Position]:
    return [Position(*row) for row in POSITION_ROWS]


@pytest.fixture
def daily_results() -> list[DailyResult]:
    return [DailyResult(*row) for row in DAILY_ROWS]


def write_account(root: Path, suffix: str = ".parquet", daily: bool = True) -> DataPaths:
    """Write the sample account under root/data in the given format."""
    paths = DataPaths(root=root)
    paths.ensure_dirs()

    frames = {
        "trades": pl.DataFrame(
            TRADE_ROWS,
            schema=["date", "symbol", "action", "quantity", "price", "realized_pnl"],
            orient="row",
        ),
        "positions": pl.DataFrame(
            POSITION_ROWS,
            schema=["symbol", "qty", "avg_price", "last"],
            orient="row",
        ),
    }
    if daily:
        frames["daily_results"] = pl.DataFrame(
            DAILY_ROWS,
            schema=["date", "realized", "float", "pnl"],
            orient="row",
        )

    for name, df in frames.items():
        path = paths.data_dir / f"{name}{suffix}"
        if suffix == ".parquet":
            df.write_parquet(path)
        elif suffix == ".csv":
            df.write_csv(path)
        else:
            path.write_text(json.dumps(df.to_dicts()), encoding="utf-8")

    return paths


@pytest.fixture
def account(tmp_path) -> DataPaths:
    """Sample account stored as parquet files."""
    return write_account(tmp_path)
