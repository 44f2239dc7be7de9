"""Conversions between :class:`Bitmap` and numpy arrays or nested lists."""

from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np

from bitmap_core.src.core.bitmap import Bitmap
from bitmap_core.src.core.geometry import Size


def to_numpy(bitmap: Bitmap[Any], dtype: Any = None) -> np.ndarray:
    """Return a ``(height, width)`` array holding a copy of ``bitmap``."""
    arr = np.array(bitmap.data(), dtype=dtype)
    return arr.reshape(bitmap.height, bitmap.width)


def from_numpy(arr: np.ndarray) -> Bitmap[Any]:
    """Return a bitmap from a 2D array indexed ``arr[y, x]``."""
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise ValueError(f"expected a 2D array, got {arr.ndim} dimensions")
    height, width = arr.shape
    return Bitmap.from_iterable(Size(width, height), arr.ravel(order="C").tolist())


def from_rows(rows: Sequence[Sequence[Any]]) -> Bitmap[Any]:
    """Return a bitmap from a list of equally long rows."""
    if not rows:
        return Bitmap()
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")
    values: List[Any] = [v for row in rows for v in row]
    return Bitmap.from_iterable(Size(width, len(rows)), values)


__all__ = ["to_numpy", "from_numpy", "from_rows"]
