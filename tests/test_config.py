from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from version_adoption.config import AppConfig, load_config


def test_load_config_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("{}", encoding="utf-8")

    cfg = load_config(config_path)

    assert cfg.chart.max_days_shown == 30
    assert cfg.chart.max_ticks == 6
    assert cfg.chart.max_versions_shown is None
    assert cfg.chart.measurement_transform == "totalDownloads"
    assert cfg.chart.show_legend is True
    assert cfg.columns.date == "date"
    assert cfg.outputs.tables_format == "csv"


def test_load_config_overrides_and_labels(tmp_path: Path) -> None:
    config_data = {
        "chart": {
            "max_versions_shown": 5,
            "measurement_transform": "percentage",
            "version_labels": {"0.72.0": "RN 0.72"},
        },
        "time": {"timezone": "America/New_York"},
    }
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump(config_data), encoding="utf-8")

    cfg = load_config(config_path)

    assert cfg.chart.max_versions_shown == 5
    assert cfg.chart.measurement_transform == "percentage"
    assert cfg.chart.label_version("0.72.0") == "RN 0.72"
    assert cfg.chart.label_version("0.73.0") == "0.73.0"
    assert cfg.time.timezone == "America/New_York"


def test_load_config_uses_env_timezone(monkeypatch, tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("time:\n  timezone: null\n", encoding="utf-8")
    monkeypatch.setenv("VERSION_ADOPTION_TIMEZONE", "Europe/Berlin")

    cfg = load_config(config_path)

    assert cfg.time.timezone == "Europe/Berlin"


def test_app_config_rejects_unknown_sections_and_bad_values() -> None:
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"charts": {}})
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"chart": {"measurement_transform": "perDay"}})
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"chart": {"max_ticks": -1}})
