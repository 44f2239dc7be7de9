"""Coordinate and extent value types used by :class:`Bitmap`."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A 2D integer coordinate, origin top-left."""

    x: int = 0
    y: int = 0

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"


@dataclass(frozen=True)
class Size:
    """A 2D integer extent.

    Components are signed so negative user input can be represented and
    rejected by the bitmap; a size is only usable when :meth:`is_positive`.
    """

    width: int = 0
    height: int = 0

    def is_positive(self) -> bool:
        """Return ``True`` if neither dimension is negative."""
        return self.width >= 0 and self.height >= 0

    def point_count(self) -> int:
        """Return ``width * height``."""
        return self.width * self.height

    def __repr__(self) -> str:
        return f"Size(width={self.width}, height={self.height})"


@dataclass(frozen=True)
class Rect:
    """A sub-region described by its top-left ``pos`` and its ``size``."""

    pos: Point = Point()
    size: Size = Size()

    @classmethod
    def from_values(cls, x: int, y: int, width: int, height: int) -> "Rect":
        """Build a rectangle from its four components."""
        return cls(Point(x, y), Size(width, height))

    @property
    def x(self) -> int:
        return self.pos.x

    @property
    def y(self) -> int:
        return self.pos.y

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def __repr__(self) -> str:
        return f"Rect(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


__all__ = ["Point", "Size", "Rect"]
