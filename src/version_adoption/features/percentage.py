from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from version_adoption.config import MeasurementTransform
from version_adoption.models import HistoryPoint


def to_percentage(points: Sequence[HistoryPoint]) -> list[HistoryPoint]:
    """Rescale each count to its share of the same-date total.

    The denominator covers only the points passed in. Dates whose total is zero
    map every point to 0.0.
    """
    totals_by_date: dict[int, float] = {}
    for point in points:
        totals_by_date[point.date] = totals_by_date.get(point.date, 0) + point.count

    normalized: list[HistoryPoint] = []
    for point in points:
        total = totals_by_date[point.date]
        share = point.count / total if total else 0.0
        normalized.append(replace(point, count=share))
    return normalized


def apply_measurement_transform(
    points: Sequence[HistoryPoint],
    transform: MeasurementTransform,
) -> list[HistoryPoint]:
    if transform == "percentage":
        return to_percentage(points)
    if transform == "totalDownloads":
        return list(points)
    raise ValueError(f"Unsupported measurement transform: {transform}")
