from __future__ import annotations

import json
from datetime import tzinfo
from pathlib import Path
from typing import Any, Callable

import pandas as pd

from version_adoption.features.pivot import rows_to_frame
from version_adoption.models import ChartData
from version_adoption.viz.tooltip import format_tooltip


def write_table(df: pd.DataFrame, path: Path, fmt: str = "csv") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "parquet":
        df.to_parquet(path, index=False)
        return path
    if fmt == "csv":
        df.to_csv(path, index=False)
        return path
    raise ValueError(f"Unsupported table format: {fmt}")


def write_chart_rows(chart_data: ChartData, path: Path, fmt: str = "csv") -> Path:
    return write_table(rows_to_frame(chart_data.rows, chart_data.versions), path, fmt=fmt)


def summarize_chart(
    chart_data: ChartData,
    *,
    labeler: Callable[[str], str] | None = None,
    tz: tzinfo | None = None,
) -> dict[str, Any]:
    summary: dict[str, Any] = {
        "transform": chart_data.transform,
        "row_count": len(chart_data.rows),
        "versions": list(chart_data.versions),
        "version_labels": {
            version: labeler(version) if labeler else version for version in chart_data.versions
        },
        "ticks": list(chart_data.ticks),
        "first_date": chart_data.rows[0].date if chart_data.rows else None,
        "last_date": chart_data.rows[-1].date if chart_data.rows else None,
        "latest_tooltip": [],
    }
    if chart_data.rows:
        latest = chart_data.rows[-1]
        summary["latest_tooltip"] = format_tooltip(
            latest.date, latest.counts, chart_data.transform, labeler=labeler, tz=tz
        )
    return summary


def write_summary(data: dict[str, Any], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
    return path
