"""Application Layer: Use cases and service orchestration.

This layer contains:
- services/: Business logic orchestration
  - dashboard.py: Dashboard metric computation
"""

from portfolio_metrics.application.services import DashboardService

__all__ = [
    "DashboardService",
]
