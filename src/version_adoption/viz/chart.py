from __future__ import annotations

from datetime import tzinfo
from pathlib import Path
from typing import Callable

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.ticker import FuncFormatter

from version_adoption.config import MeasurementTransform
from version_adoption.features.pivot import rows_to_frame
from version_adoption.models import ChartData
from version_adoption.preprocess.time import to_datetime
from version_adoption.viz.colors import assign_colors
from version_adoption.viz.common import save_figure
from version_adoption.viz.tooltip import format_tooltip


def format_date_tick(timestamp_ms: int, tz: tzinfo | None = None) -> str:
    moment = to_datetime(timestamp_ms, tz)
    return f"{moment:%b} {moment.day}"


def format_count_tick(value: float, transform: MeasurementTransform) -> str:
    if transform == "percentage":
        return f"{round(value * 100)}%"
    return f"{value:,.0f}"


def plot_version_adoption(
    chart_data: ChartData,
    output_path: Path,
    *,
    labeler: Callable[[str], str] | None = None,
    show_legend: bool = True,
    show_tooltip: bool = True,
    tz: tzinfo | None = None,
) -> Path:
    fig, ax = plt.subplots(figsize=(12, 5))
    if chart_data.is_empty:
        ax.set_axis_off()
        return save_figure(output_path)

    frame = rows_to_frame(chart_data.rows, chart_data.versions).fillna(0.0)
    x_values = [to_datetime(int(date), tz) for date in frame["date"]]
    colors = assign_colors(chart_data.versions)
    series = np.vstack([frame[version].to_numpy(dtype=float) for version in chart_data.versions])
    ax.stackplot(
        x_values,
        series,
        labels=[labeler(version) if labeler else version for version in chart_data.versions],
        colors=[colors[version] for version in chart_data.versions],
        alpha=0.85,
    )

    if len(x_values) > 1:
        ax.set_xlim(x_values[0], x_values[-1])
    ax.set_xticks([to_datetime(tick, tz) for tick in chart_data.ticks])
    ax.set_xticklabels([format_date_tick(tick, tz) for tick in chart_data.ticks])

    transform = chart_data.transform
    if transform == "percentage":
        ax.set_ylim(0, 1)
    ax.yaxis.set_major_formatter(
        FuncFormatter(lambda value, _position: format_count_tick(value, transform))
    )
    ax.grid(True, axis="y", alpha=0.3)

    if show_tooltip:
        latest = chart_data.rows[-1]
        ax.text(
            0.01,
            0.98,
            "\n".join(format_tooltip(latest.date, latest.counts, transform, labeler=labeler, tz=tz)),
            transform=ax.transAxes,
            va="top",
            fontsize=8,
            bbox={"boxstyle": "round", "facecolor": "white", "alpha": 0.85},
        )
    if show_legend:
        ax.legend(loc="upper left", bbox_to_anchor=(1.0, 1.0), fontsize=8)

    ax.set_title("Downloads by version")
    ax.set_ylabel("Share of downloads" if transform == "percentage" else "Downloads")
    return save_figure(output_path)
