"""Base Repository: Abstract interface for data access.

Repository Pattern provides:
- Abstraction over data sources (parquet, JSON, CSV files)
- Caching so repeated metric calls do not re-read files
- Consistent error handling
- Easy testing via dependency injection
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TypeVar, Generic

import polars as pl

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract base class for repositories.

    All repositories should:
    1. Provide a get_all() method
    2. Handle caching internally
    3. Raise RepositoryError on failures
    """

    @abstractmethod
    def get_all(self) -> T:
        """Retrieve all data from the repository.

        Returns:
            The complete dataset

        Raises:
            RepositoryError: If data cannot be loaded
        """
        pass

    @abstractmethod
    def clear_cache(self) -> None:
        """Clear any cached data."""
        pass


class RepositoryError(Exception):
    """Exception raised when repository operations fail."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(f"{message}" + (f" (path: {path})" if path else ""))


def read_frame(path: Path) -> pl.DataFrame:
    """Read a parquet, JSON or CSV file into a DataFrame.

    Raises:
        RepositoryError: If the file is missing, unsupported or unreadable
    """
    if not path.exists():
        raise RepositoryError("File not found", str(path))

    readers = {
        ".parquet": pl.read_parquet,
        ".json": pl.read_json,
        ".csv": pl.read_csv,
    }
    reader = readers.get(path.suffix)
    if reader is None:
        raise RepositoryError(f"Unsupported file type: {path.suffix}", str(path))

    try:
        return reader(path)
    except Exception as e:
        raise RepositoryError(f"Failed to read {path.name}: {e}", str(path)) from e


def rename_columns(df: pl.DataFrame, aliases: dict[str, str]) -> pl.DataFrame:
    """Rename camelCase columns to their snake_case names."""
    mapping = {src: dst for src, dst in aliases.items() if src in df.columns and dst not in df.columns}
    return df.rename(mapping) if mapping else df


def require_columns(df: pl.DataFrame, columns: tuple[str, ...], path: Path) -> None:
    """Raise RepositoryError if any required column is missing."""
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise RepositoryError(f"Missing columns: {', '.join(missing)}", str(path))
