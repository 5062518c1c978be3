"""Configuration: Centralized paths and settings.

This module provides:
- DataPaths: File paths for all data sources
- MetricsConfig: Parameters for metric calculation and display

Directory Structure:
    data/
    ├── trades.parquet           # Enriched trade ledger
    ├── positions.parquet        # Current position snapshot
    ├── daily_results.parquet    # Daily PNL history (optional)
    └── reports/                 # Saved metric reports

Each input may also be supplied as .json or .csv with the same stem.
"""

from dataclasses import dataclass
from datetime import datetime, timezone as dt_timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Lookup order when resolving an input file
SUPPORTED_SUFFIXES = (".parquet", ".json", ".csv")


@dataclass(frozen=True)
class DataPaths:
    """File paths for data sources.

    Attributes:
        root: Project root directory
    """

    root: Path = Path(".")

    # --- Directories ---

    @property
    def data_dir(self) -> Path:
        """Main data directory."""
        return self.root / "data"

    @property
    def report_dir(self) -> Path:
        """Saved metric reports."""
        return self.data_dir / "reports"

    # --- Files ---

    @property
    def trades(self) -> Path:
        """Enriched trade ledger."""
        return self.resolve(self.data_dir / "trades.parquet")

    @property
    def positions(self) -> Path:
        """Current positions."""
        return self.resolve(self.data_dir / "positions.parquet")

    @property
    def daily_results(self) -> Path:
        """Daily PNL history."""
        return self.resolve(self.data_dir / "daily_results.parquet")

    # --- Helper Methods ---

    @staticmethod
    def resolve(path: Path) -> Path:
        """First existing file among the supported suffixes.

        Returns the given path unchanged when none exists.
        """
        for suffix in SUPPORTED_SUFFIXES:
            candidate = path.with_suffix(suffix)
            if candidate.exists():
                return candidate
        return path

    def validate(self) -> list[str]:
        """Check which required paths are missing.

        Daily results are optional and never reported.

        Returns:
            List of missing paths (empty if all exist)
        """
        missing = []

        if not self.data_dir.exists():
            missing.append(str(self.data_dir))
        if not self.trades.exists():
            missing.append(str(self.trades))
        if not self.positions.exists():
            missing.append(str(self.positions))

        return missing

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.report_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class MetricsConfig:
    """Configuration for metric calculation and display.

    Attributes:
        timezone: IANA zone used to derive "today" when no as-of day is given
        currency_decimals: Decimals for currency metrics
        percent_decimals: Decimals for the win rate
        output_formats: Formats for saved reports ("csv", "json", "parquet")
    """

    timezone: str = "UTC"
    currency_decimals: int = 2
    percent_decimals: int = 1
    output_formats: tuple[str, ...] = ("csv", "json")


def resolve_zone(timezone: str) -> tzinfo:
    """Look up an IANA time zone.

    Raises:
        ValueError: If the zone is unknown or no zone database is available
    """
    if timezone.upper() == "UTC":
        return dt_timezone.utc
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ModuleNotFoundError, ValueError) as e:
        raise ValueError(f"unknown time zone: {timezone}") from e


def today_in(timezone: str = "UTC") -> str:
    """Current calendar day (YYYY-MM-DD) in the given zone."""
    return datetime.now(resolve_zone(timezone)).date().isoformat()


# Default instances
DEFAULT_PATHS = DataPaths()
DEFAULT_CONFIG = MetricsConfig()
