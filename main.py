"""Main entry point for portfolio-metrics."""

import sys

from portfolio_metrics.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
