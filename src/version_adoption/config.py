from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

MeasurementTransform = Literal["totalDownloads", "percentage"]

DEFAULT_MAX_DAYS_SHOWN = 30
DEFAULT_MAX_TICKS = 6


class ColumnsConfig(BaseModel):
    date: str = "date"
    version: str = "version"
    count: str = "count"


class TimeConfig(BaseModel):
    # None keeps day boundaries in the host's local zone.
    timezone: str | None = None


class ChartConfig(BaseModel):
    max_days_shown: int = Field(default=DEFAULT_MAX_DAYS_SHOWN, ge=1)
    max_ticks: int = Field(default=DEFAULT_MAX_TICKS, ge=0)
    max_versions_shown: int | None = None
    measurement_transform: MeasurementTransform = "totalDownloads"
    show_legend: bool = True
    show_tooltip: bool = True
    version_labels: dict[str, str] = Field(default_factory=dict)

    def label_version(self, version: str) -> str:
        return self.version_labels.get(version, version)


class OutputsConfig(BaseModel):
    tables_format: Literal["csv", "parquet"] = "csv"
    figures_format: str = "png"


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    columns: ColumnsConfig = Field(default_factory=ColumnsConfig)
    time: TimeConfig = Field(default_factory=TimeConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)
    outputs: OutputsConfig = Field(default_factory=OutputsConfig)


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def load_config(path: Path) -> AppConfig:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    config = AppConfig.model_validate(data)
    config.time.timezone = config.time.timezone or os.getenv("VERSION_ADOPTION_TIMEZONE")
    return config
