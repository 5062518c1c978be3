"""Command Line Interface for Portfolio Metrics.

Provides CLI access to the dashboard:
- metrics: Show the 13 dashboard metrics
- positions: Show the per-position breakdown
- verify: Verify input data

Usage:
    python -m portfolio_metrics metrics [--as-of YYYY-MM-DD] [--json]
    python -m portfolio_metrics positions [--symbol SYMBOL]
    python -m portfolio_metrics verify [--root DIR]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from portfolio_metrics import __version__
from portfolio_metrics.domain.models import METRIC_KEYS
from portfolio_metrics.infrastructure import (
    DataPaths,
    MetricsConfig,
    RepositoryError,
    TradeRepository,
    PositionRepository,
    DailyResultRepository,
)
from portfolio_metrics.application import DashboardService
from portfolio_metrics.interfaces.formatting import (
    METRIC_NAMES,
    build_report_frame,
    format_currency,
    format_metric,
    format_percent,
    metric_tone,
)

TONE_MARKS = {"positive": "▲", "negative": "▼", "neutral": " "}


def cmd_metrics(args: argparse.Namespace) -> int:
    """Show dashboard metrics."""
    config = MetricsConfig(
        timezone=args.timezone,
        output_formats=tuple(args.formats.split(",")),
    )
    service = DashboardService(paths=DataPaths(root=Path(args.root)), config=config)

    try:
        breakdown = service.compute(args.as_of)
    except (RepositoryError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    metrics = breakdown.metrics

    if args.json:
        print(json.dumps({"as_of": breakdown.today, **metrics.to_dict()}, indent=2))
    else:
        print(f"Portfolio Metrics v{__version__}")
        print("=" * 50)
        print(f"As of: {breakdown.today}")
        print()

        values = metrics.to_dict()
        for key in METRIC_KEYS:
            value = values[key]
            mark = TONE_MARKS.get(metric_tone(key, value), " ")
            display = format_metric(key, value, config.currency_decimals, config.percent_decimals)
            print(f"{key:<4} {METRIC_NAMES[key]:<24} {display:>16} {mark}")

        print()
        print(f"Wins / losses: {breakdown.win_count} / {breakdown.loss_count}")

    if args.save:
        df = build_report_frame(metrics, config.currency_decimals, config.percent_decimals)
        for path in service.save_report(df, f"metrics_{breakdown.today}"):
            print(f"Saved: {path}")

    return 0


def cmd_positions(args: argparse.Namespace) -> int:
    """Show the per-position breakdown."""
    service = DashboardService(
        paths=DataPaths(root=Path(args.root)),
        config=MetricsConfig(timezone=args.timezone),
    )

    try:
        if args.symbol:
            row = service.get_position(args.symbol)
            if row is None:
                print(f"No open position for {args.symbol}")
                return 1
            rows = [row]
            totals = None
        else:
            rows = service.get_positions()
            totals = service.get_position_totals(args.as_of)
    except (RepositoryError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"{'Symbol':<8} {'Qty':>8} {'Avg':>10} {'Last':>10} {'Value':>12} "
          f"{'Unrealized':>12} {'%':>8} {'Realized':>12} {'Trades':>6} {'Total':>12}")
    print("-" * 106)
    for r in rows:
        print(
            f"{r.symbol:<8} {r.qty:>8g} {format_currency(r.avg_price):>10} "
            f"{format_currency(r.last):>10} {format_currency(r.market_value):>12} "
            f"{format_currency(r.unrealized_pnl):>12} {format_percent(r.unrealized_pct):>8} "
            f"{format_currency(r.realized_pnl):>12} {r.trade_count:>6} "
            f"{format_currency(r.total_pnl):>12}"
        )

    if totals is not None:
        print("-" * 106)
        print(
            f"{'Total':<8} {'':>8} {'':>10} {'':>10} {format_currency(totals.market_value):>12} "
            f"{format_currency(totals.unrealized_pnl):>12} {'':>8} "
            f"{format_currency(totals.realized_pnl):>12} {'':>6} "
            f"{format_currency(totals.total_pnl):>12}"
        )

    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Verify input data."""
    paths = DataPaths(root=Path(args.root))

    print("[Data verification]")
    print("=" * 50)

    errors = []

    # 1. Check data files exist
    print("\n1. Checking data files...")
    missing = paths.validate()
    if missing:
        for m in missing:
            print(f"  ✗ Missing: {m}")
            errors.append(f"Missing file: {m}")
    else:
        print("  ✓ Data files present")

    # 2. Load each input
    checks = (
        ("trades", TradeRepository(paths)),
        ("positions", PositionRepository(paths)),
        ("daily results", DailyResultRepository(paths)),
    )
    for i, (label, repo) in enumerate(checks, start=2):
        print(f"\n{i}. Loading {label}...")
        try:
            records = repo.get_all()
            print(f"  ✓ {len(records):,} {label}")
        except RepositoryError as e:
            print(f"  ✗ Error: {e}")
            errors.append(str(e))

    # Summary
    print("\n" + "=" * 50)
    if errors:
        print(f"❌ {len(errors)} problem(s) found")
        return 1
    else:
        print("✅ All checks passed")
        return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="portfolio_metrics",
        description="Portfolio Metrics - Brokerage Dashboard Metrics",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--root",
        default=".",
        help="Project root containing the data/ directory",
    )
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # metrics command
    metrics_parser = subparsers.add_parser(
        "metrics", parents=[common], help="Show dashboard metrics"
    )
    metrics_parser.add_argument(
        "--as-of",
        default=None,
        help="Day to compute for (YYYY-MM-DD, default: today)",
    )
    metrics_parser.add_argument(
        "--timezone",
        default="UTC",
        help="Time zone used to derive today",
    )
    metrics_parser.add_argument(
        "--json",
        action="store_true",
        help="Print metrics as JSON",
    )
    metrics_parser.add_argument(
        "--save",
        action="store_true",
        help="Save report files",
    )
    metrics_parser.add_argument(
        "-f", "--formats",
        default="csv,json",
        help="Report formats (comma-separated)",
    )

    # positions command
    positions_parser = subparsers.add_parser(
        "positions", parents=[common], help="Show the per-position breakdown"
    )
    positions_parser.add_argument(
        "--symbol",
        default=None,
        help="Show a single symbol (no totals row)",
    )
    positions_parser.add_argument(
        "--as-of",
        default=None,
        help="Day the totals row is computed for (YYYY-MM-DD, default: today)",
    )
    positions_parser.add_argument(
        "--timezone",
        default="UTC",
        help="Time zone used to derive today",
    )

    # verify command
    subparsers.add_parser("verify", parents=[common], help="Verify input data")

    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "metrics": cmd_metrics,
        "positions": cmd_positions,
        "verify": cmd_verify,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
