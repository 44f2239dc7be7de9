import pytest

from bitmap_core.src.core.bitmap import Bitmap
from bitmap_core.src.core.errors import (
    BitmapError,
    InvalidSizeError,
    SizeDataMismatchError,
)
from bitmap_core.src.core.geometry import Size
from bitmap_core.src.utils import config_loader


def test_default_is_empty():
    bmp = Bitmap()
    assert bmp.width == 0 and bmp.height == 0
    assert bmp.size == Size(0, 0)
    assert len(bmp) == 0
    assert bmp.data() == []


@pytest.mark.parametrize("width,height", [(0, 0), (1, 1), (3, 2), (0, 5), (7, 0)])
def test_fill_construction(width, height):
    bmp = Bitmap(Size(width, height), 9)
    assert bmp.width == width
    assert bmp.height == height
    assert bmp.point_count() == width * height
    assert len(bmp.data()) == width * height
    assert all(v == 9 for v in bmp)


def test_fill_defaults_to_none():
    bmp = Bitmap(Size(2, 2))
    assert list(bmp) == [None] * 4


def test_tuple_size_and_dimensions_constructor():
    assert Bitmap((3, 2), 1) == Bitmap.from_dimensions(3, 2, 1)
    assert Bitmap.from_dimensions(3, 2, 1).size == Size(3, 2)


@pytest.mark.parametrize("width,height", [(-1, 0), (0, -1), (-2, -3), (4, -1)])
def test_negative_size_rejected(width, height):
    with pytest.raises(InvalidSizeError) as exc:
        Bitmap(Size(width, height), 0)
    assert exc.value.width == width
    assert exc.value.height == height
    with pytest.raises(InvalidSizeError):
        Bitmap.from_dimensions(width, height)
    with pytest.raises(InvalidSizeError):
        Bitmap.from_iterable(Size(width, height), [])


def test_error_hierarchy():
    with pytest.raises(ValueError):
        Bitmap(Size(-1, 1))
    with pytest.raises(BitmapError):
        Bitmap(Size(-1, 1))


def test_from_iterable_row_major_order():
    values = list(range(6))
    bmp = Bitmap.from_iterable(Size(3, 2), values)
    for y in range(2):
        for x in range(3):
            assert bmp.at(x, y) == values[y * 3 + x]


def test_from_iterable_accepts_generator():
    bmp = Bitmap.from_iterable((2, 2), (v * 2 for v in range(4)))
    assert bmp.to_list() == [[0, 2], [4, 6]]


@pytest.mark.parametrize("count", [0, 5, 7])
def test_from_iterable_length_mismatch(count):
    with pytest.raises(SizeDataMismatchError) as exc:
        Bitmap.from_iterable(Size(3, 2), range(count))
    assert exc.value.expected == 6
    assert exc.value.actual == count
    assert "(3x2)" in str(exc.value)


def test_point_count_limit(monkeypatch):
    monkeypatch.setattr(config_loader, "MAX_POINT_COUNT", 10)
    Bitmap(Size(5, 2), 0)
    with pytest.raises(InvalidSizeError) as exc:
        Bitmap(Size(11, 1), 0)
    assert "oversized" in str(exc.value)


def test_width_height_constructor():
    bmp = Bitmap(3, 2, 7)
    assert bmp.size == Size(3, 2)
    assert list(bmp) == [7] * 6
    assert Bitmap(2, 2).to_list() == [[None, None], [None, None]]
    assert Bitmap(2, 1, value=4) == Bitmap(Size(2, 1), 4)
    assert Bitmap(Size(2, 1), value=4) == Bitmap((2, 1), 4)


def test_width_height_constructor_rejects_negative():
    with pytest.raises(InvalidSizeError) as exc:
        Bitmap(-3, 2, 0)
    assert (exc.value.width, exc.value.height) == (-3, 2)


def test_ambiguous_constructor_calls():
    with pytest.raises(TypeError):
        Bitmap(3)
    with pytest.raises(TypeError):
        Bitmap(Size(1, 1), 0, 0)
