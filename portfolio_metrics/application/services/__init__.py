"""Application Services for Portfolio Metrics.

Services orchestrate repository access to implement use cases.

Available services:
- DashboardService: Dashboard metric computation and export
"""

from portfolio_metrics.application.services.dashboard import DashboardService

__all__ = [
    "DashboardService",
]
