"""Infrastructure layer for Portfolio Metrics.

Contains:
- config: Data paths and metric configuration
- repositories: Data access abstractions
"""

from portfolio_metrics.infrastructure.config import (
    DataPaths,
    MetricsConfig,
    DEFAULT_PATHS,
    DEFAULT_CONFIG,
    resolve_zone,
    today_in,
)
from portfolio_metrics.infrastructure.repositories import (
    Repository,
    RepositoryError,
    TradeRepository,
    PositionRepository,
    DailyResultRepository,
)

__all__ = [
    # Config
    "DataPaths",
    "MetricsConfig",
    "DEFAULT_PATHS",
    "DEFAULT_CONFIG",
    "resolve_zone",
    "today_in",
    # Repositories
    "Repository",
    "RepositoryError",
    "TradeRepository",
    "PositionRepository",
    "DailyResultRepository",
]
