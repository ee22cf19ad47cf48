import pytest

from arborlib.containers import Cursor, FixedStack, index_of


@pytest.mark.parametrize("cls", [FixedStack, Cursor])
def test_push_pop_round_trip(cls):
    container = cls(3)
    for value in ("a", "b", "c"):
        container.push(value)
    assert len(container) == 3
    assert list(container) == ["a", "b", "c"]
    assert [container.pop() for _ in range(3)] == ["c", "b", "a"]
    assert len(container) == 0


@pytest.mark.parametrize("cls", [FixedStack, Cursor])
def test_push_when_full_raises(cls):
    container = cls(1)
    container.push(1)
    with pytest.raises(IndexError):
        container.push(2)
    assert list(container) == [1]


@pytest.mark.parametrize("cls", [FixedStack, Cursor])
def test_pop_empty_raises(cls):
    with pytest.raises(IndexError):
        cls(2).pop()


@pytest.mark.parametrize("cls", [FixedStack, Cursor])
def test_get_bounds(cls):
    container = cls(4)
    container.push(10)
    assert container.get(0) == 10
    with pytest.raises(IndexError):
        container.get(1)


@pytest.mark.parametrize("cls", [FixedStack, Cursor])
def test_set_replaces_and_appends(cls):
    container = cls(4)
    container.push(1)
    container.set(0, 5)
    container.set(1, 6)
    assert list(container) == [5, 6]
    with pytest.raises(IndexError):
        container.set(3, 7)


def test_set_append_respects_capacity():
    stack = FixedStack(1)
    stack.set(0, "x")
    with pytest.raises(IndexError):
        stack.set(1, "y")
    assert list(stack) == ["x"]


def test_remove_unordered_swaps_last_in():
    stack = FixedStack(5)
    for value in (1, 2, 3, 4):
        stack.push(value)
    assert stack.remove_unordered(2) is True
    assert list(stack) == [1, 4, 3]


def test_remove_unordered_missing():
    stack = FixedStack(3)
    stack.push(1)
    assert stack.remove_unordered(9) is False
    assert list(stack) == [1]


def test_remove_last_element():
    cursor = Cursor(3)
    cursor.push("a")
    cursor.push("b")
    assert cursor.remove("b") is True
    assert list(cursor) == ["a"]


def test_remove_does_not_recheck_swapped_slot():
    cursor = Cursor(2)
    cursor.push(1)
    cursor.push(1)
    assert cursor.remove(1) is True
    assert list(cursor) == [1]


def test_copy_into():
    source = Cursor(3)
    source.push("a")
    source.push("b")
    dest = Cursor(4)
    dest.push("z")
    dest.push("y")
    dest.push("x")
    source.copy_into(dest)
    assert list(dest) == ["a", "b"]
    assert len(dest) == len(source)


def test_copy_into_too_small():
    source = Cursor(3)
    for value in range(3):
        source.push(value)
    with pytest.raises(ValueError):
        source.copy_into(Cursor(2))


def test_negative_capacity():
    with pytest.raises(ValueError):
        FixedStack(-1)


def test_index_of_found_and_missing():
    items = ["x", "y", "x"]
    assert index_of(items, "x") == 0
    assert index_of(items, "y") == 1
    assert index_of(items, "q") == len(items)
    assert index_of([], "q") == 0