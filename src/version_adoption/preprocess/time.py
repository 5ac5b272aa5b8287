from __future__ import annotations

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DAY_MS = 24 * 60 * 60 * 1000
WEEK_MS = 7 * DAY_MS


def resolve_timezone(timezone_name: str | None) -> tzinfo | None:
    if not timezone_name:
        return None
    try:
        return ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"invalid timezone: {timezone_name}") from exc


def start_of_local_day(timestamp_ms: int, tz: tzinfo | None = None) -> int:
    """Return epoch ms of midnight on the day containing ``timestamp_ms``.

    The day is taken in ``tz``; ``None`` means the host's local zone.
    """
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=tz)
    day_start = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return int(round(day_start.timestamp() * 1000))


def to_datetime(timestamp_ms: int, tz: tzinfo | None = None) -> datetime:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=tz)
