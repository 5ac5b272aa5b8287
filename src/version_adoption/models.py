from __future__ import annotations

from dataclasses import dataclass, field

from version_adoption.config import MeasurementTransform


@dataclass(frozen=True)
class HistoryPoint:
    """Download count observed for one version on one day (``date`` is epoch ms)."""

    date: int
    version: str
    count: float


@dataclass(frozen=True)
class WindowAggregate:
    version: str
    total: float


@dataclass(frozen=True)
class ChartRow:
    date: int
    counts: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class ChartData:
    """Everything a renderer needs: plotted rows, axis ticks and series order."""

    rows: list[ChartRow]
    ticks: list[int]
    versions: list[str]
    transform: MeasurementTransform = "totalDownloads"

    @property
    def is_empty(self) -> bool:
        return not self.rows
