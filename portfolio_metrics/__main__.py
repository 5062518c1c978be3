"""Entry point for running portfolio_metrics as a module.

Usage:
    python -m portfolio_metrics [command] [options]

Commands:
    metrics     Show the 13 dashboard metrics
    verify      Verify input data

Examples:
    python -m portfolio_metrics metrics
    python -m portfolio_metrics metrics --as-of 2024-01-17 --json
    python -m portfolio_metrics verify --root ./account
"""

import sys

from portfolio_metrics.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
