from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class OutputPaths:
    root: Path
    tables: Path
    figures: Path
    summary: Path

    def chart_rows(self, fmt: str) -> Path:
        return self.tables / f"chart_rows.{fmt}"

    def chart_figure(self, fmt: str) -> Path:
        return self.figures / f"version_adoption.{fmt}"

    def chart_summary(self) -> Path:
        return self.summary / "chart_summary.json"


def build_output_paths(out_dir: Path) -> OutputPaths:
    paths = OutputPaths(
        root=out_dir,
        tables=out_dir / "tables",
        figures=out_dir / "figures",
        summary=out_dir / "summary",
    )
    for path in (paths.root, paths.tables, paths.figures, paths.summary):
        path.mkdir(parents=True, exist_ok=True)
    return paths
