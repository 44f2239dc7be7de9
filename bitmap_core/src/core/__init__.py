"""Core bitmap container and its value types."""

from .bitmap import Bitmap, is_point_in_bitmap
from .errors import BitmapError, InvalidSizeError, OutOfRangeError, SizeDataMismatchError
from .geometry import Point, Rect, Size

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
