import pytest

from klib.dynarr import INITIAL_CAPACITY, SCALE_FACTOR, DynArray


def test_push_back_and_overwrite():
    arr = DynArray()
    for i in range(128):
        arr.push_back(i * i)
    for i in range(128):
        assert arr[i] == i * i

    for i in range(128):
        arr[i] = i - 3
    for i in range(128):
        assert arr[i] == i - 3
    assert len(arr) == 128


def test_extend_appends_in_order():
    arr2 = DynArray()
    arr3 = DynArray()
    for v in (1, 2, 3):
        arr2.push_back(v)
    for v in (4, 5, 6):
        arr3.push_back(v)

    arr2.extend(arr3)

    assert len(arr2) == 6
    assert list(arr2) == [1, 2, 3, 4, 5, 6]
    assert list(arr3) == [4, 5, 6]


def test_extend_with_empty_keeps_length():
    arr2 = DynArray([1, 2, 3, 4, 5, 6])
    arr2.extend(DynArray())
    assert len(arr2) == 6


def test_extend_with_itself_doubles_contents():
    arr = DynArray([1, 2])
    arr.extend(arr)
    assert list(arr) == [1, 2, 1, 2]


def test_initial_capacity():
    arr = DynArray()
    assert arr.capacity == INITIAL_CAPACITY
    assert len(arr) == 0


def test_capacity_grows_by_scale_factor():
    arr = DynArray()
    for i in range(INITIAL_CAPACITY):
        arr.push_back(i)
    assert arr.capacity == INITIAL_CAPACITY
    arr.push_back(INITIAL_CAPACITY)
    assert arr.capacity == INITIAL_CAPACITY * SCALE_FACTOR


def test_capacity_never_below_length():
    arr = DynArray()
    for i in range(200):
        arr.push_back(i)
        assert len(arr) <= arr.capacity


def test_constructor_from_items_roundtrip():
    items = ["a", "b", "c"]
    assert list(DynArray(items)) == items


def test_index_out_of_range():
    arr = DynArray([1])
    with pytest.raises(IndexError):
        arr[1]
    with pytest.raises(IndexError):
        arr[5] = 0
    assert list(arr) == [1]
    assert len(arr) == 1


def test_equality():
    assert DynArray([1, 2]) == DynArray([1, 2])
    assert not DynArray([1, 2]) == DynArray([2, 1])