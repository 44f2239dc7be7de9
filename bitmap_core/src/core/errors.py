"""Exception types raised by bitmap construction and access."""

from __future__ import annotations

from typing import Any

__all__ = [
    "BitmapError",
    "InvalidSizeError",
    "SizeDataMismatchError",
    "OutOfRangeError",
]


class BitmapError(Exception):
    """Base class for all bitmap contract violations."""


class InvalidSizeError(BitmapError, ValueError):
    """Raised when a bitmap is created or resized with an unusable size."""

    def __init__(self, width: int, height: int, reason: str = "negative size") -> None:
        self.width = width
        self.height = height
        super().__init__(f"bitmap: bitmap obtain {reason} {{{width}, {height}}}")


class SizeDataMismatchError(BitmapError, ValueError):
    """Raised when supplied element data does not fill the requested size."""

    def __init__(self, width: int, height: int, actual: int) -> None:
        self.width = width
        self.height = height
        self.expected = width * height
        self.actual = actual
        super().__init__(
            f"bitmap constructor size ({width}x{height}) and iterator range "
            f"({actual}) are incompatible"
        )


class OutOfRangeError(BitmapError, IndexError):
    """Raised by checked access for a point outside the bitmap."""

    def __init__(self, point: Any, width: int, height: int) -> None:
        self.point = point
        self.width = width
        self.height = height
        super().__init__(
            f"bitmap: point(x = {point.x}, y = {point.y}) is outside the bitmap "
            f"(width = {width}, height = {height})"
        )
