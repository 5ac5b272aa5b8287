from __future__ import annotations

from datetime import tzinfo
from typing import Sequence

from version_adoption.models import HistoryPoint, WindowAggregate
from version_adoption.preprocess.time import DAY_MS, start_of_local_day


def window_start(latest_date: int, window_days: int, tz: tzinfo | None = None) -> int:
    """Earliest date counted toward rankings: local midnight of the latest day minus the window."""
    return start_of_local_day(latest_date, tz) - window_days * DAY_MS


def aggregate_window(
    points: Sequence[HistoryPoint],
    earliest_allowable_date: int,
) -> list[WindowAggregate]:
    """Sum counts per version for points inside the window, in first-encounter order."""
    totals: dict[str, float] = {}
    for point in points:
        if point.date < earliest_allowable_date:
            continue
        totals[point.version] = totals.get(point.version, 0) + point.count
    return [WindowAggregate(version=version, total=total) for version, total in totals.items()]


def rank_versions(aggregates: Sequence[WindowAggregate], n: int) -> list[str]:
    """Return the ``n`` versions with the highest totals.

    Ranking is ascending by total with ties kept in first-encounter order, and the
    tail of that ranking is kept, so lower totals are evicted first.
    """
    if n <= 0:
        return []
    ranked = sorted(
        enumerate(aggregates),
        key=lambda item: (item[1].total, item[0]),
    )
    return [aggregate.version for _, aggregate in ranked[-n:]]


def _display_order(points: Sequence[HistoryPoint], kept: set[str]) -> list[str]:
    ordered: dict[str, None] = {}
    for point in points:
        if point.version in kept and point.version not in ordered:
            ordered[point.version] = None
    return list(ordered)


def select_top_versions(
    points: Sequence[HistoryPoint],
    n: int,
    window_days: int,
    *,
    tz: tzinfo | None = None,
) -> list[HistoryPoint]:
    """Keep the top ``n`` versions of the trailing window and zero-fill their dates.

    ``points`` are expected in ascending date order. Every retained date gets exactly
    one point per kept version, ordered by date and then by each version's first
    appearance in ``points``. Repeated (date, version) pairs resolve to the last one.
    """
    if not points or n <= 0:
        return []

    earliest_allowable_date = window_start(points[-1].date, window_days, tz)
    kept = set(rank_versions(aggregate_window(points, earliest_allowable_date), n))
    versions_in_order = _display_order(points, kept)

    counts_by_date: dict[int, dict[str, float]] = {}
    for point in points:
        if point.version not in kept or point.date < earliest_allowable_date:
            continue
        counts_by_date.setdefault(point.date, {})[point.version] = point.count

    filled: list[HistoryPoint] = []
    for date in sorted(counts_by_date):
        counts = counts_by_date[date]
        for version in versions_in_order:
            filled.append(HistoryPoint(date=date, version=version, count=counts.get(version, 0)))
    return filled
