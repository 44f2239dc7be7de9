"""Generic dense 2D bitmap container."""

from .src.core import (
    Bitmap,
    BitmapError,
    InvalidSizeError,
    OutOfRangeError,
    Point,
    Rect,
    Size,
    SizeDataMismatchError,
    is_point_in_bitmap,
)

__all__ = [
    "Bitmap",
    "BitmapError",
    "InvalidSizeError",
    "OutOfRangeError",
    "Point",
    "Rect",
    "Size",
    "SizeDataMismatchError",
    "is_point_in_bitmap",
]
