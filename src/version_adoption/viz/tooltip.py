from __future__ import annotations

from datetime import tzinfo
from typing import Callable, Mapping

from version_adoption.config import MeasurementTransform
from version_adoption.preprocess.time import to_datetime


def format_measurement(value: float, transform: MeasurementTransform) -> str:
    if transform == "percentage":
        return f"{value * 100:.1f}%"
    return f"{value:,.0f}"


def format_tooltip(
    date: int,
    counts: Mapping[str, float],
    transform: MeasurementTransform,
    *,
    labeler: Callable[[str], str] | None = None,
    tz: tzinfo | None = None,
) -> list[str]:
    """Header line with the day, then ``label: value`` lines, largest value first."""
    moment = to_datetime(date, tz)
    lines = [f"{moment:%b} {moment.day}, {moment.year}"]
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    for version, value in ordered:
        label = labeler(version) if labeler else version
        lines.append(f"{label}: {format_measurement(value, transform)}")
    return lines
