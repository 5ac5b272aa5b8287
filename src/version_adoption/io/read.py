from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from version_adoption.config import ColumnsConfig
from version_adoption.models import HistoryPoint

LOGGER = logging.getLogger(__name__)

CANONICAL_COLUMNS = ["date", "version", "count"]
EPOCH = pd.Timestamp(0, tz="UTC")


def load_table(path: Path, dtype: dict[str, str] | None = None) -> pd.DataFrame:
    if path.suffix == ".parquet":
        return pd.read_parquet(path)
    if path.suffix == ".csv":
        # utf-8-sig strips BOM-prefixed headers from spreadsheet exports.
        return pd.read_csv(path, encoding="utf-8-sig", dtype=dtype)
    raise ValueError(f"Unsupported table file type: {path.suffix}")


def normalize_columns(df: pd.DataFrame, columns: ColumnsConfig) -> pd.DataFrame:
    """Rename configured source columns to ``date``/``version``/``count``."""
    rename_map = {
        columns.date: "date",
        columns.version: "version",
        columns.count: "count",
    }
    missing = [source for source in rename_map if source not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns in input: {', '.join(missing)}")
    return df.rename(columns=rename_map)[CANONICAL_COLUMNS]


def _dates_to_epoch_ms(values: pd.Series) -> pd.Series:
    if pd.api.types.is_numeric_dtype(values):
        return pd.to_numeric(values, errors="coerce")
    # Naive date strings are read as UTC instants.
    parsed = pd.to_datetime(values, errors="coerce", utc=True)
    return (parsed - EPOCH) // pd.Timedelta(milliseconds=1)


def points_from_frame(df: pd.DataFrame) -> list[HistoryPoint]:
    """Convert a canonical frame to points sorted by date, dropping unusable rows."""
    working = pd.DataFrame(
        {
            "date": _dates_to_epoch_ms(df["date"]),
            "version": df["version"],
            "count": pd.to_numeric(df["count"], errors="coerce"),
        }
    )
    usable = working.dropna(subset=CANONICAL_COLUMNS)
    dropped = len(working) - len(usable)
    if dropped:
        LOGGER.warning("Dropped %d rows with unparseable date, version, or count", dropped)
    usable = usable.sort_values("date", kind="mergesort")
    return [
        HistoryPoint(date=int(date), version=str(version), count=float(count))
        for date, version, count in zip(usable["date"], usable["version"], usable["count"])
    ]


def load_history_points(path: Path, columns: ColumnsConfig) -> list[HistoryPoint]:
    # Keep version labels verbatim; "1.10" must not become the float 1.1.
    frame = normalize_columns(load_table(path, dtype={columns.version: "string"}), columns)
    points = points_from_frame(frame)
    LOGGER.info("Loaded %d history points from %s", len(points), path)
    return points
