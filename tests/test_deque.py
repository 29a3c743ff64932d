import pytest

from searchcore.deque import Deque


def test_empty_deque():
    items = Deque()
    assert len(items) == 0
    assert list(items) == []


@pytest.mark.parametrize("method", ["pop_front", "pop_back", "front", "back"])
def test_empty_access_raises(method):
    with pytest.raises(IndexError):
        getattr(Deque(), method)()


def test_push_both_ends_keeps_order():
    items = Deque()
    for value in range(200):
        items.push_back(value)
    for value in range(-1, -51, -1):
        items.push_front(value)
    assert len(items) == 250
    assert list(items) == list(range(-50, 200))
    assert items.front() == -50
    assert items.back() == 199


def test_indexing_matches_iteration():
    items = Deque(range(100))
    assert [items[i] for i in range(len(items))] == list(items)


def test_index_out_of_bounds():
    items = Deque([1, 2, 3])
    with pytest.raises(IndexError):
        items[3]
    with pytest.raises(IndexError):
        items[-1]
    with pytest.raises(IndexError):
        items[3] = 0
    assert items[2] == 3
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_setitem():
    items = Deque(["a", "b", "c"])
    items[1] = "z"
    assert list(items) == ["a", "z", "c"]


def test_pop_returns_values():
    items = Deque([1, 2, 3])
    assert items.pop_front() == 1
    assert items.pop_back() == 3
    assert list(items) == [2]
    assert items.front() == items.back() == 2


def test_drain_then_reuse():
    items = Deque(range(10))
    while len(items):
        items.pop_back()
    with pytest.raises(IndexError):
        items.pop_front()
    items.push_front("x")
    assert list(items) == ["x"]


def test_clear():
    items = Deque(range(70))
    items.clear()
    assert len(items) == 0
    with pytest.raises(IndexError):
        items.back()


def test_swap():
    first = Deque([1, 2])
    second = Deque(["a"])
    first.swap(second)
    assert list(first) == ["a"]
    assert list(second) == [1, 2]