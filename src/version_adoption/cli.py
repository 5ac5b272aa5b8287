from __future__ import annotations

import logging
from datetime import tzinfo
from enum import Enum
from pathlib import Path

import typer

from version_adoption.config import DEFAULT_CONFIG_PATH, AppConfig, load_config
from version_adoption.io.read import load_history_points
from version_adoption.io.write import summarize_chart, write_chart_rows, write_summary
from version_adoption.logging import configure_logging
from version_adoption.models import ChartData
from version_adoption.paths import build_output_paths
from version_adoption.pipeline.build_chart import build_chart_data
from version_adoption.preprocess.time import resolve_timezone
from version_adoption.viz.chart import plot_version_adoption

LOGGER = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, add_completion=False)


class TransformName(str, Enum):
    totalDownloads = "totalDownloads"
    percentage = "percentage"


def _load_app_config(config_path: Path) -> AppConfig:
    return load_config(config_path)


def _apply_overrides(
    cfg: AppConfig,
    max_versions: int | None,
    transform: TransformName | None,
) -> None:
    if max_versions is not None:
        cfg.chart.max_versions_shown = max_versions
    if transform is not None:
        cfg.chart.measurement_transform = transform.value


def _resolve_timezone(cfg: AppConfig) -> tzinfo | None:
    try:
        return resolve_timezone(cfg.time.timezone)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _build(input_path: Path, cfg: AppConfig, tz: tzinfo | None) -> ChartData:
    try:
        points = load_history_points(input_path, cfg.columns)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return build_chart_data(points, cfg.chart, tz=tz)


@app.command()
def build(
    input_path: Path = typer.Option(
        ..., "--input", exists=True, readable=True, resolve_path=True
    ),
    out: Path = typer.Option(Path("out"), resolve_path=True),
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, exists=True, readable=True, resolve_path=True),
    max_versions: int | None = typer.Option(
        None, help="Override chart.max_versions_shown."
    ),
    transform: TransformName | None = typer.Option(
        None, help="Override chart.measurement_transform."
    ),
) -> None:
    """Write pivoted chart rows and a chart summary from a history table."""
    configure_logging()
    cfg = _load_app_config(config)
    _apply_overrides(cfg, max_versions, transform)
    tz = _resolve_timezone(cfg)
    chart_data = _build(input_path, cfg, tz)

    paths = build_output_paths(out)
    rows_path = write_chart_rows(
        chart_data,
        paths.chart_rows(cfg.outputs.tables_format),
        fmt=cfg.outputs.tables_format,
    )
    summary = summarize_chart(chart_data, labeler=cfg.chart.label_version, tz=tz)
    write_summary(summary, paths.chart_summary())
    typer.echo(
        f"Build complete. Rows: {len(chart_data.rows)}, versions: {len(chart_data.versions)}. "
        f"Table: {rows_path}"
    )


@app.command()
def plot(
    input_path: Path = typer.Option(
        ..., "--input", exists=True, readable=True, resolve_path=True
    ),
    out: Path = typer.Option(Path("out"), resolve_path=True),
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, exists=True, readable=True, resolve_path=True),
    max_versions: int | None = typer.Option(
        None, help="Override chart.max_versions_shown."
    ),
    transform: TransformName | None = typer.Option(
        None, help="Override chart.measurement_transform."
    ),
) -> None:
    """Render the stacked version adoption chart to out/figures/."""
    configure_logging()
    cfg = _load_app_config(config)
    _apply_overrides(cfg, max_versions, transform)
    tz = _resolve_timezone(cfg)
    chart_data = _build(input_path, cfg, tz)
    if chart_data.is_empty:
        LOGGER.warning("No history points survived filtering; writing an empty figure")

    paths = build_output_paths(out)
    figure_path = plot_version_adoption(
        chart_data,
        paths.chart_figure(cfg.outputs.figures_format),
        labeler=cfg.chart.label_version,
        show_legend=cfg.chart.show_legend,
        show_tooltip=cfg.chart.show_tooltip,
        tz=tz,
    )
    typer.echo(f"Figure written to: {figure_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
