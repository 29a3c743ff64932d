"""Sorted mapping backed by a self-balancing (AVL) binary search tree."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterator

Less = Callable[[Any, Any], bool]


class _Node:
    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _clone(node: _Node | None) -> _Node | None:
    if node is None:
        return None
    copy = _Node(node.key, node.value)
    copy.height = node.height
    copy.left = _clone(node.left)
    copy.right = _clone(node.right)
    return copy


class OrderedMap:
    """Mapping whose keys are kept sorted by ``less`` (``<`` by default).

    Two keys are the same key when neither is less than the other.
    """

    def __init__(self, less: Less | None = None) -> None:
        self._less: Less = less or operator.lt
        self._root: _Node | None = None
        self._size = 0

    # Lookup helpers

    def _find_node(self, key: Any) -> _Node | None:
        less = self._less
        node = self._root
        while node is not None:
            if less(key, node.key):
                node = node.left
            elif less(node.key, key):
                node = node.right
            else:
                return node
        return None

    def _nodes(self, reverse: bool = False) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right if reverse else node.left
            node = stack.pop()
            yield node
            node = node.left if reverse else node.right

    # Tree modification

    def _insert(self, node: _Node | None, key: Any, value: Any) -> _Node:
        if node is None:
            return _Node(key, value)
        if self._less(key, node.key):
            node.left = self._insert(node.left, key, value)
        else:
            node.right = self._insert(node.right, key, value)
        return _rebalance(node)

    def _remove_min(self, node: _Node) -> _Node | None:
        if node.left is None:
            return node.right
        node.left = self._remove_min(node.left)
        return _rebalance(node)

    def _remove(self, node: _Node, key: Any) -> _Node | None:
        if self._less(key, node.key):
            node.left = self._remove(node.left, key)
        elif self._less(node.key, key):
            node.right = self._remove(node.right, key)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            remaining_right = self._remove_min(node.right)
            successor.left = node.left
            successor.right = remaining_right
            node = successor
        return _rebalance(node)

    # Public interface

    def insert(self, key: Any, value: Any) -> tuple[Any, bool]:
        """Insert ``key`` unless present; return (stored value, whether inserted)."""
        existing = self._find_node(key)
        if existing is not None:
            return existing.value, False
        self._root = self._insert(self._root, key, value)
        self._size += 1
        return value, True

    def at(self, key: Any) -> Any:
        """The value for ``key``; raises KeyError when it is absent."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def get_or_insert(self, key: Any, default: Any = None) -> Any:
        """The value for ``key``, inserting ``default`` first when it is absent."""
        value, _ = self.insert(key, default)
        return value

    def erase(self, key: Any) -> int:
        """Remove ``key``; return the number of elements removed (0 or 1)."""
        if self._find_node(key) is None:
            return 0
        self._root = self._remove(self._root, key)
        self._size -= 1
        return 1

    def erase_and_next(self, key: Any) -> tuple[Any, Any] | None:
        """Remove ``key`` and return the (key, value) after it, or None at the end.

        Raises KeyError when ``key`` is absent.
        """
        if not self.erase(key):
            raise KeyError(key)
        return self.upper_bound(key)

    def find(self, key: Any) -> tuple[Any, Any] | None:
        """The (key, value) pair for ``key``, or None."""
        node = self._find_node(key)
        return (node.key, node.value) if node is not None else None

    def count(self, key: Any) -> int:
        """Number of elements stored under ``key``: 1 if present, else 0."""
        node = self._find_node(key)
        if node is None:
            return 0
        return 1

    def lower_bound(self, key: Any) -> tuple[Any, Any] | None:
        """The first (key, value) whose key is not less than ``key``, or None."""
        less = self._less
        node, candidate = self._root, None
        while node is not None:
            if not less(node.key, key):
                candidate = node
                node = node.left
            else:
                node = node.right
        return (candidate.key, candidate.value) if candidate is not None else None

    def upper_bound(self, key: Any) -> tuple[Any, Any] | None:
        """The first (key, value) whose key is greater than ``key``, or None."""
        less = self._less
        node, candidate = self._root, None
        while node is not None:
            if less(key, node.key):
                candidate = node
                node = node.left
            else:
                node = node.right
        return (candidate.key, candidate.value) if candidate is not None else None

    def equal_range(self, key: Any) -> tuple[tuple[Any, Any] | None, tuple[Any, Any] | None]:
        """The pair (lower_bound(key), upper_bound(key))."""
        return self.lower_bound(key), self.upper_bound(key)

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over (key, value) pairs in key order."""
        return ((node.key, node.value) for node in self._nodes())

    def keys(self) -> Iterator[Any]:
        """Iterate over keys in order."""
        return (node.key for node in self._nodes())

    def values(self) -> Iterator[Any]:
        """Iterate over values in key order."""
        return (node.value for node in self._nodes())

    def clear(self) -> None:
        """Remove every element."""
        self._root = None
        self._size = 0

    def copy(self) -> "OrderedMap":
        """An independent map with the same entries and ordering."""
        other = OrderedMap(self._less)
        other._root = _clone(self._root)
        other._size = self._size
        return other

    def swap(self, other: "OrderedMap") -> None:
        """Exchange contents and ordering with ``other``."""
        self._root, other._root = other._root, self._root
        self._size, other._size = other._size, self._size
        self._less, other._less = other._less, self._less

    def __getitem__(self, key: Any) -> Any:
        return self.at(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        node = self._find_node(key)
        if node is not None:
            node.value = value
        else:
            self.insert(key, value)

    def __delitem__(self, key: Any) -> None:
        if not self.erase(key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return self._find_node(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __reversed__(self) -> Iterator[Any]:
        return (node.key for node in self._nodes(reverse=True))

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"OrderedMap({{{body}}})"