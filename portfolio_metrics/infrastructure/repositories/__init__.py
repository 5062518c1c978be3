"""Data repositories for Portfolio Metrics.

Provides abstracted data access through the Repository pattern:
- TradeRepository: Enriched trade ledger
- PositionRepository: Current position snapshot
- DailyResultRepository: Daily PNL history
"""

from portfolio_metrics.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    read_frame,
)
from portfolio_metrics.infrastructure.repositories.trade_repo import TradeRepository
from portfolio_metrics.infrastructure.repositories.position_repo import PositionRepository
from portfolio_metrics.infrastructure.repositories.daily_repo import DailyResultRepository

__all__ = [
    "Repository",
    "RepositoryError",
    "read_frame",
    "TradeRepository",
    "PositionRepository",
    "DailyResultRepository",
]
