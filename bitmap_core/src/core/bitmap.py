"""Dense 2D bitmap container with row-major storage."""

from __future__ import annotations

import copy as _copy
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from .errors import InvalidSizeError, OutOfRangeError, SizeDataMismatchError
from .geometry import Point, Rect, Size
from bitmap_core.src.utils import config_loader
from bitmap_core.src.utils.logger import get_logger

T = TypeVar("T")

SizeLike = Union[Size, Tuple[int, int]]
RectLike = Union[Rect, Tuple[int, int, int, int]]

logger = get_logger(__name__)

_MISSING = object()


def _as_size(size: SizeLike) -> Size:
    if isinstance(size, Size):
        return size
    width, height = size
    return Size(width, height)


def _size_and_value(size: Union[SizeLike, int], height: Any, value: Any) -> Tuple[Size, Any]:
    """Resolve the ``(size, value)`` and ``(width, height, value)`` call forms."""
    if isinstance(size, int):
        if height is _MISSING:
            raise TypeError("a height is required when the size is given as a width")
        size = Size(size, height)
    else:
        if height is not _MISSING:
            if value is not _MISSING:
                raise TypeError("pass either a size and a value or width, height and value")
            value = height
        size = _as_size(size)
    return size, (None if value is _MISSING else value)


def _as_rect(rect: RectLike) -> Rect:
    if isinstance(rect, Rect):
        return rect
    return Rect.from_values(*rect)


def _as_point(x: Union[Point, int], y: Optional[int] = None) -> Point:
    if isinstance(x, Point):
        if y is not None:
            raise TypeError("pass either a Point or x and y, not both")
        return x
    if y is None:
        raise TypeError("a y coordinate is required when x is not a Point")
    return Point(x, y)


class _ReadOnlyView(Sequence[T]):
    """Read-only sequence over a bitmap's backing list."""

    __slots__ = ("_data",)

    def __init__(self, data: List[T]) -> None:
        self._data = data

    def __getitem__(self, index):
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"_ReadOnlyView(len={len(self._data)})"


class Bitmap(Generic[T]):
    """A dense 2D grid of ``T`` values stored row by row.

    Cell ``(x, y)`` lives at index ``y * width + x`` of a flat list; ``x`` is
    the fast-varying dimension and the origin is the top-left corner.

    Fill values are stored by reference, so every cell of a freshly filled
    bitmap holds the same object. Use immutable element values, or write each
    cell explicitly, when cells must be independent.

    Bitmaps are not thread-safe. Concurrent mutation of one instance needs
    external synchronisation by the caller.
    """

    __slots__ = ("_size", "_data")

    def __init__(
        self,
        size: Union[SizeLike, int, None] = None,
        height: Any = _MISSING,
        value: Any = _MISSING,
    ) -> None:
        """Create ``Bitmap(size, value)`` or ``Bitmap(width, height, value)``.

        Without arguments the bitmap is empty (0x0).
        """
        if size is None:
            self._size = Size()
            self._data: List[T] = []
            return
        size, value = _size_and_value(size, height, value)
        _throw_if_size_is_invalid(size)
        self._size = size
        self._data = [value] * size.point_count()

    # Alternate constructors ----------------------------------------------

    @classmethod
    def from_dimensions(cls, width: int, height: int, value: Optional[T] = None) -> "Bitmap[T]":
        """Return a ``width`` x ``height`` bitmap with every cell set to ``value``."""
        return cls(Size(width, height), value)

    @classmethod
    def from_iterable(cls, size: SizeLike, values: Iterable[T]) -> "Bitmap[T]":
        """Return a bitmap of ``size`` holding ``values`` in row-major order.

        Raises :class:`InvalidSizeError` for a negative size and
        :class:`SizeDataMismatchError` unless exactly ``width * height``
        values are supplied.
        """
        size = _as_size(size)
        _throw_if_size_is_invalid(size)
        data = list(values)
        if len(data) != size.point_count():
            raise SizeDataMismatchError(size.width, size.height, len(data))
        return cls._adopt(size, data)

    @classmethod
    def _adopt(cls, size: Size, data: List[T]) -> "Bitmap[T]":
        bitmap = cls.__new__(cls)
        bitmap._size = size
        bitmap._data = data
        return bitmap

    # Copy / move ---------------------------------------------------------

    def copy(self) -> "Bitmap[T]":
        """Return a bitmap with its own copy of the storage."""
        return self._adopt(self._size, list(self._data))

    def __copy__(self) -> "Bitmap[T]":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Bitmap[T]":
        return self._adopt(self._size, _copy.deepcopy(self._data, memo))

    def take(self) -> "Bitmap[T]":
        """Move the storage into a new bitmap and leave this one empty (0x0)."""
        moved = self._adopt(self._size, self._data)
        self._size = Size()
        self._data = []
        return moved

    # Size ----------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._size.width

    @property
    def height(self) -> int:
        return self._size.height

    @property
    def size(self) -> Size:
        return self._size

    def point_count(self) -> int:
        """Return the number of cells in the bitmap."""
        return self._size.width * self._size.height

    def resize(self, size: Union[SizeLike, int], height: Any = _MISSING, value: Any = _MISSING) -> None:
        """Replace the storage with a ``size`` bitmap filled with ``value``.

        Called as ``resize(size, value)`` or ``resize(width, height, value)``.

        Prior content is discarded, not preserved. Views obtained from
        :meth:`data` or :meth:`const_data` before the call no longer reflect
        this bitmap.
        """
        size, value = _size_and_value(size, height, value)
        _throw_if_size_is_invalid(size)
        logger.debug(f"resize {self._size.width}x{self._size.height} -> {size.width}x{size.height}")
        self._data = [value] * size.point_count()
        self._size = size

    # Raw storage ---------------------------------------------------------

    def data(self) -> List[T]:
        """Return the backing list for direct manipulation.

        Changing its length breaks the bitmap invariant; only assign cells.
        """
        return self._data

    def const_data(self) -> Optional[Sequence[T]]:
        """Return a read-only view of the storage, ``None`` if it is empty."""
        if not self._data:
            return None
        return _ReadOnlyView(self._data)

    def data_pos(self, x: Union[Point, int], y: Optional[int] = None) -> int:
        """Convert a point into an index of :meth:`data`.

        No range check is performed.
        """
        point = _as_point(x, y)
        return point.y * self._size.width + point.x

    # Coordinate access ---------------------------------------------------

    def at(self, x: Union[Point, int], y: Optional[int] = None) -> T:
        """Return the value at ``(x, y)`` or at a :class:`Point`.

        Raises :class:`OutOfRangeError` for points outside the bitmap.
        """
        point = _as_point(x, y)
        self._throw_if_out_of_range(point)
        return self._data[point.y * self._size.width + point.x]

    def set(self, x: Union[Point, int], y: Any, value: Any = _MISSING) -> None:
        """Set a cell, called as ``set(x, y, value)`` or ``set(point, value)``.

        Raises :class:`OutOfRangeError` for points outside the bitmap.
        """
        if value is _MISSING:
            point, value = _as_point(x), y
        else:
            point = _as_point(x, y)
        self._throw_if_out_of_range(point)
        self._data[point.y * self._size.width + point.x] = value

    def at_unchecked(self, x: int, y: int) -> T:
        """Return the value at ``(x, y)`` without a range check.

        Only for call sites that already guarantee the point is inside the
        bitmap; anything else reads an arbitrary cell or raises ``IndexError``.
        """
        return self._data[y * self._size.width + x]

    def set_unchecked(self, x: int, y: int, value: T) -> None:
        """Set the value at ``(x, y)`` without a range check."""
        self._data[y * self._size.width + x] = value

    def __getitem__(self, key: Union[Point, Tuple[int, int]]) -> T:
        if isinstance(key, Point):
            return self.at(key)
        x, y = key
        return self.at(x, y)

    def __setitem__(self, key: Union[Point, Tuple[int, int]], value: T) -> None:
        if isinstance(key, Point):
            self.set(key, value)
            return
        x, y = key
        self.set(x, y, value)

    def _throw_if_out_of_range(self, point: Point) -> None:
        if not is_point_in_bitmap(self, point):
            raise OutOfRangeError(point, self._size.width, self._size.height)

    # Iteration -----------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._data)

    def rows(self) -> Iterator[List[T]]:
        """Yield each row, top to bottom, as a new list."""
        width = self._size.width
        for y in range(self._size.height):
            yield self._data[y * width : (y + 1) * width]

    def to_list(self) -> List[List[T]]:
        """Return the cells as a list of row lists."""
        return list(self.rows())

    # Extraction ----------------------------------------------------------

    def subbitmap(self, rect: RectLike, value: Optional[T] = None) -> "Bitmap[T]":
        """Return the cells inside ``rect`` as a new bitmap of ``rect.size``.

        Parts of ``rect`` outside this bitmap are filled with ``value``; a
        rectangle that misses the bitmap entirely yields a bitmap holding only
        ``value``. Padded cells all reference the same ``value`` object.
        Raises :class:`InvalidSizeError` if ``rect`` has a negative size.
        """
        rect = _as_rect(rect)
        result: Bitmap[T] = Bitmap(rect.size, value)

        if self.width <= rect.x or self.height <= rect.y:
            logger.debug(f"subbitmap {rect} lies outside {self.width}x{self.height}")
            return result

        # A negative origin shifts the copied block inside the result.
        src_x = max(rect.x, 0)
        src_y = max(rect.y, 0)
        dst_x = src_x - rect.x
        dst_y = src_y - rect.y
        copy_width = min(rect.width - dst_x, self.width - src_x)
        copy_height = min(rect.height - dst_y, self.height - src_y)
        if copy_width <= 0 or copy_height <= 0:
            return result

        if copy_width < rect.width or copy_height < rect.height:
            logger.debug(f"subbitmap {rect} clipped to {copy_width}x{copy_height}")

        src = self._data
        dst = result._data
        for row in range(copy_height):
            in_offset = (src_y + row) * self.width + src_x
            out_offset = (dst_y + row) * result.width + dst_x
            dst[out_offset : out_offset + copy_width] = src[in_offset : in_offset + copy_width]

        return result

    # Comparison ----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self._size == other._size and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Bitmap(width={self.width}, height={self.height})"


def is_point_in_bitmap(bitmap: Bitmap[Any], point: Point) -> bool:
    """Return ``True`` if ``point`` addresses a cell of ``bitmap``."""
    return 0 <= point.x < bitmap.width and 0 <= point.y < bitmap.height


def _throw_if_size_is_invalid(size: Size) -> None:
    if not size.is_positive():
        logger.warning(f"rejected negative bitmap size {size.width}x{size.height}")
        raise InvalidSizeError(size.width, size.height)
    if size.point_count() > config_loader.MAX_POINT_COUNT:
        logger.warning(
            f"rejected bitmap size {size.width}x{size.height}: point count exceeds "
            f"{config_loader.MAX_POINT_COUNT}"
        )
        raise InvalidSizeError(size.width, size.height, reason="oversized point count")


__all__ = ["Bitmap", "is_point_in_bitmap"]
