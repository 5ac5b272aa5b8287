from __future__ import annotations

import hashlib
from typing import Iterable

# Qualitative palette ordered so neighbouring slots are visually distinct.
PALETTE = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
]


def _palette_index(label: str) -> int:
    digest = hashlib.sha256(label.encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big") % len(PALETTE)


def color_for(label: str, avoid_token: int | None = None) -> tuple[str, int]:
    """Map ``label`` to a palette color, consistently.

    ``avoid_token`` is the token returned for the previous series; when the label
    hashes to that same slot the next slot is used instead. The returned token
    should be passed to the following call.
    """
    index = _palette_index(label)
    if avoid_token is not None and index == avoid_token:
        index = (index + 1) % len(PALETTE)
    return PALETTE[index], index


def assign_colors(versions: Iterable[str]) -> dict[str, str]:
    colors: dict[str, str] = {}
    token: int | None = None
    for version in versions:
        colors[version], token = color_for(version, token)
    return colors
