from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from version_adoption.preprocess.time import resolve_timezone, start_of_local_day


def _ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def test_start_of_local_day_in_utc() -> None:
    utc = ZoneInfo("UTC")
    instant = _ms(datetime(2024, 3, 10, 15, 42, 7, tzinfo=utc))

    assert start_of_local_day(instant, utc) == _ms(datetime(2024, 3, 10, tzinfo=utc))


def test_start_of_local_day_respects_zone_offset_on_dst_day() -> None:
    pacific = ZoneInfo("America/Los_Angeles")
    # 15:00 UTC is 08:00 PDT on the spring-forward day; midnight that day was still PST.
    instant = _ms(datetime(2024, 3, 10, 15, 0, tzinfo=ZoneInfo("UTC")))

    assert start_of_local_day(instant, pacific) == _ms(datetime(2024, 3, 10, tzinfo=pacific))
    assert start_of_local_day(instant, pacific) == _ms(
        datetime(2024, 3, 10, 8, 0, tzinfo=ZoneInfo("UTC"))
    )


def test_start_of_local_day_uses_host_zone_when_unset() -> None:
    instant = _ms(datetime(2024, 3, 10, 12, 0))

    assert start_of_local_day(instant) == _ms(datetime(2024, 3, 10))


def test_resolve_timezone() -> None:
    assert resolve_timezone(None) is None
    assert resolve_timezone("") is None
    assert resolve_timezone("Europe/Berlin") == ZoneInfo("Europe/Berlin")
    with pytest.raises(ValueError, match="invalid timezone"):
        resolve_timezone("Mars/Olympus_Mons")
