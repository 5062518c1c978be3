"""Interfaces Layer: CLI and presentation.

This layer contains:
- cli.py: Command-line interface
- formatting.py: Metric labels, number formatting and tone
"""

from portfolio_metrics.interfaces.cli import main as cli_main

__all__ = ["cli_main"]
