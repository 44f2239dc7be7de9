import copy

from bitmap_core.src.core.bitmap import Bitmap
from bitmap_core.src.core.geometry import Size


def test_copy_is_independent():
    original = Bitmap(Size(2, 2), 0)
    dup = original.copy()
    assert dup == original
    dup.set(1, 1, 5)
    assert original.at(1, 1) == 0
    assert dup.data() is not original.data()


def test_copy_module_support():
    original = Bitmap.from_iterable(Size(2, 1), [[1], [2]])
    shallow = copy.copy(original)
    deep = copy.deepcopy(original)
    shallow.set(0, 0, [9])
    assert original.at(0, 0) == [1]
    deep.at(1, 0).append(3)
    assert original.at(1, 0) == [2]


def test_take_transfers_storage():
    original = Bitmap.from_iterable(Size(2, 2), [1, 2, 3, 4])
    storage = original.data()
    moved = original.take()
    assert moved.size == Size(2, 2)
    assert moved.data() is storage
    assert original.size == Size(0, 0)
    assert len(original) == 0
    assert original.const_data() is None


def test_source_usable_after_take():
    original = Bitmap(Size(1, 1), 1)
    original.take()
    original.resize(Size(2, 1), 3)
    assert list(original) == [3, 3]


def test_equality():
    assert Bitmap(Size(2, 1), 0) == Bitmap.from_iterable(Size(2, 1), [0, 0])
    assert Bitmap(Size(2, 1), 0) != Bitmap(Size(1, 2), 0)
    assert Bitmap(Size(2, 1), 0) != Bitmap(Size(2, 1), 1)
    assert Bitmap() != [[]]
    assert repr(Bitmap(Size(3, 2))) == "Bitmap(width=3, height=2)"
