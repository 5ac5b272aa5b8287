from __future__ import annotations

from datetime import tzinfo
from typing import Sequence

from version_adoption.preprocess.time import WEEK_MS, start_of_local_day


def choose_tick_interval(span_ms: int, max_ticks: int) -> int:
    """Smallest power-of-two multiple of a week that fits ``span_ms`` into ``max_ticks - 1`` steps."""
    max_interior_ticks = max_ticks - 1
    interval = WEEK_MS
    while span_ms // interval > max_interior_ticks:
        interval *= 2
    return interval


def calculate_ticks(
    dates: Sequence[int],
    max_ticks: int,
    *,
    tz: tzinfo | None = None,
) -> list[int]:
    """Pick at most ``max_ticks`` axis ticks from ``dates``.

    The first date is always a tick. Each further tick is the first date at or past
    local midnight of the previous tick plus the chosen interval, so ticks land on
    real data dates rather than on a uniform grid. The scan stops once ``max_ticks``
    ticks are collected, since midnight alignment can make a step up to a day short.
    """
    if not dates or max_ticks <= 0:
        return []

    first = dates[0]
    last = dates[-1]
    if max_ticks == 1:
        return [first]
    if max_ticks == 2:
        return [first, last] if last != first else [first]

    interval = choose_tick_interval(last - first, max_ticks)

    ticks = {first}
    next_tick = start_of_local_day(first, tz) + interval
    for date in dates:
        if date >= next_tick:
            ticks.add(date)
            if len(ticks) == max_ticks:
                break
            next_tick = start_of_local_day(date, tz) + interval
    return sorted(ticks)
