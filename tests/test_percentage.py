from __future__ import annotations

import math

import pytest

from version_adoption.features.percentage import apply_measurement_transform, to_percentage
from version_adoption.models import HistoryPoint


def test_to_percentage_shares_sum_to_one_per_date() -> None:
    points = [
        HistoryPoint(date=1, version="a", count=10),
        HistoryPoint(date=1, version="b", count=30),
        HistoryPoint(date=2, version="a", count=1),
        HistoryPoint(date=2, version="b", count=2),
    ]

    result = to_percentage(points)

    assert [point.count for point in result[:2]] == [0.25, 0.75]
    assert math.isclose(sum(point.count for point in result if point.date == 2), 1.0)
    assert [point.count for point in points] == [10, 30, 1, 2]


def test_to_percentage_zero_total_maps_to_zero() -> None:
    points = [
        HistoryPoint(date=1, version="a", count=0),
        HistoryPoint(date=1, version="b", count=0),
    ]

    result = to_percentage(points)

    assert [point.count for point in result] == [0.0, 0.0]
    assert not any(math.isnan(point.count) for point in result)


def test_to_percentage_empty_input() -> None:
    assert to_percentage([]) == []


def test_apply_measurement_transform_dispatch() -> None:
    points = [HistoryPoint(date=1, version="a", count=4)]

    assert apply_measurement_transform(points, "totalDownloads") == points
    assert apply_measurement_transform(points, "percentage")[0].count == 1.0
    with pytest.raises(ValueError, match="Unsupported measurement transform"):
        apply_measurement_transform(points, "perDay")  # type: ignore[arg-type]
