from __future__ import annotations

from typing import Sequence

import pandas as pd

from version_adoption.models import ChartRow, HistoryPoint


def distinct_versions(points: Sequence[HistoryPoint]) -> list[str]:
    return list(dict.fromkeys(point.version for point in points))


def pivot(points: Sequence[HistoryPoint], *, sort_rows: bool = True) -> list[ChartRow]:
    """Regroup points into one row per date with a ``version -> count`` mapping.

    Versions are visited in first-seen order so every row's mapping shares that key
    order. Rows come back by ascending date; ``sort_rows=False`` keeps the order in
    which dates were first reached while walking version by version.
    """
    versions = distinct_versions(points)
    points_by_version: dict[str, list[HistoryPoint]] = {version: [] for version in versions}
    for point in points:
        points_by_version[point.version].append(point)

    rows: list[ChartRow] = []
    row_index: dict[int, int] = {}
    for version in versions:
        for point in points_by_version[version]:
            if point.date not in row_index:
                row_index[point.date] = len(rows)
                rows.append(ChartRow(date=point.date, counts={}))
            rows[row_index[point.date]].counts[version] = point.count

    if sort_rows:
        rows.sort(key=lambda row: row.date)
    return rows


def rows_to_frame(rows: Sequence[ChartRow], versions: Sequence[str]) -> pd.DataFrame:
    """Flatten rows into a ``date`` column plus one column per version.

    Versions missing from a row (no zero-fill was applied) become NaN.
    """
    columns = ["date", *versions]
    if not rows:
        return pd.DataFrame(columns=columns)
    records = [{"date": row.date, **row.counts} for row in rows]
    return pd.DataFrame.from_records(records).reindex(columns=columns)
