from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Sequence

from version_adoption.config import ChartConfig
from version_adoption.features.percentage import apply_measurement_transform
from version_adoption.features.pivot import distinct_versions, pivot
from version_adoption.features.top_versions import select_top_versions
from version_adoption.models import ChartData, HistoryPoint
from version_adoption.viz.ticks import calculate_ticks

LOGGER = logging.getLogger(__name__)


def build_chart_data(
    points: Sequence[HistoryPoint],
    config: ChartConfig,
    *,
    tz: tzinfo | None = None,
) -> ChartData:
    """Run selection, transform and pivot, and derive ticks from the surviving dates."""
    if config.max_versions_shown is not None:
        selected = select_top_versions(
            points,
            config.max_versions_shown,
            config.max_days_shown,
            tz=tz,
        )
        LOGGER.debug(
            "Top-%d selection over %d days kept %d of %d points",
            config.max_versions_shown,
            config.max_days_shown,
            len(selected),
            len(points),
        )
    else:
        selected = list(points)

    datapoints = apply_measurement_transform(selected, config.measurement_transform)
    versions = distinct_versions(datapoints)
    rows = pivot(datapoints)
    ticks = calculate_ticks([point.date for point in datapoints], config.max_ticks, tz=tz)

    LOGGER.info(
        "Chart data ready: %d rows, %d versions, %d ticks (%s)",
        len(rows),
        len(versions),
        len(ticks),
        config.measurement_transform,
    )
    return ChartData(
        rows=rows,
        ticks=ticks,
        versions=versions,
        transform=config.measurement_transform,
    )
