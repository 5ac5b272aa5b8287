from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt

DEFAULT_DPI = 120


def save_figure(path: Path, dpi: int = DEFAULT_DPI) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    figure = plt.gcf()
    figure.tight_layout()
    # The legend sits outside the axes, so crop to the drawn artists.
    figure.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(figure)
    return path
