from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from version_adoption.viz.tooltip import format_measurement, format_tooltip

UTC = ZoneInfo("UTC")
MARCH_4 = int(datetime(2024, 3, 4, tzinfo=UTC).timestamp() * 1000)


def test_format_tooltip_orders_largest_first_and_relabels() -> None:
    lines = format_tooltip(
        MARCH_4,
        {"1.0": 1200, "2.0": 34567},
        "totalDownloads",
        labeler=lambda version: f"v{version}",
        tz=UTC,
    )

    assert lines == ["Mar 4, 2024", "v2.0: 34,567", "v1.0: 1,200"]


def test_format_tooltip_percentage() -> None:
    lines = format_tooltip(MARCH_4, {"a": 0.25, "b": 0.75}, "percentage", tz=UTC)

    assert lines[1:] == ["b: 75.0%", "a: 25.0%"]


def test_format_measurement() -> None:
    assert format_measurement(0.4217, "percentage") == "42.2%"
    assert format_measurement(1234567.0, "totalDownloads") == "1,234,567"
