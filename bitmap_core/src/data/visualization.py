"""Visualization utilities."""

from __future__ import annotations

from typing import Any

import matplotlib.pyplot as plt

from bitmap_core.src.utils.array_utils import to_numpy


def visualize(bitmap: Any) -> None:
    """Display ``bitmap`` using ``matplotlib`` if its cells are numeric."""
    try:
        plt.imshow(to_numpy(bitmap), interpolation="nearest")
        plt.axis("off")
        plt.show()
    except (TypeError, ValueError):
        for row in bitmap.rows():
            print(" ".join(str(v) for v in row))
