"""Double-ended queue with bounds-checked access."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator


class Deque:
    """Double-ended queue; reading or popping an empty deque raises IndexError."""

    def __init__(self, items: Iterable | None = None) -> None:
        self._items: deque = deque(items or ())

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop_front from empty deque")
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the back value."""
        if not self._items:
            raise IndexError("pop_back from empty deque")
        return self._items.pop()

    def front(self) -> Any:
        """The front value."""
        if not self._items:
            raise IndexError("front from empty deque")
        return self._items[0]

    def back(self) -> Any:
        """The back value."""
        if not self._items:
            raise IndexError("back from empty deque")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def swap(self, other: "Deque") -> None:
        """Exchange contents with ``other``."""
        self._items, other._items = other._items, self._items

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of bounds")

    def __getitem__(self, index: int) -> Any:
        self._check(index)
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"