"""Portfolio Metrics: Trade matching and dashboard metrics engine.

Computes the 13 brokerage dashboard metrics from an enriched trade
ledger, a position snapshot and daily PNL history, including FIFO
lot matching for intraday PNL.

Architecture:
- domain/: Core business logic (models, FIFO, periods, metrics)
- infrastructure/: I/O and configuration
- application/: Use cases and services
- interfaces/: CLI and presentation
"""

__version__ = "0.1.0"

from portfolio_metrics.domain import (
    Trade,
    Position,
    DailyResult,
    Metrics,
    LotBook,
    calculate_metrics,
    calculate_metrics_detailed,
)
from portfolio_metrics.infrastructure import (
    DataPaths,
    MetricsConfig,
    DEFAULT_PATHS,
    RepositoryError,
)

__all__ = [
    # Version
    "__version__",
    # Domain
    "Trade",
    "Position",
    "DailyResult",
    "Metrics",
    "LotBook",
    "calculate_metrics",
    "calculate_metrics_detailed",
    # Infrastructure
    "DataPaths",
    "MetricsConfig",
    "DEFAULT_PATHS",
    "RepositoryError",
]
