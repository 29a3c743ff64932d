"""A view of a contiguous window of a mutable sequence."""

from __future__ import annotations

from typing import Any, Iterator, MutableSequence


class Span:
    """A window ``data[offset:offset + size]`` that reads and writes through."""

    __slots__ = ("data", "offset", "size")

    def __init__(self, data: MutableSequence, offset: int = 0, size: int | None = None) -> None:
        if size is None:
            size = len(data) - offset
        if offset < 0 or size < 0 or offset + size > len(data):
            raise IndexError("span lies outside the sequence")
        self.data = data
        self.offset = offset
        self.size = size

    def front(self) -> Any:
        """The first element."""
        return self[0]

    def back(self) -> Any:
        """The last element."""
        return self[self.size - 1]

    def subspan(self, offset: int, size: int | None = None) -> "Span":
        """A span starting ``offset`` into this one, of ``size`` elements (or to the end)."""
        if offset < 0 or offset > self.size:
            raise IndexError("subspan offset out of range")
        if size is None:
            size = self.size - offset
        if size < 0 or offset + size > self.size:
            raise IndexError("subspan size out of range")
        return Span(self.data, self.offset + offset, size)

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError("span index out of range")

    def __getitem__(self, index: int) -> Any:
        self._check(index)
        return self.data[self.offset + index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check(index)
        self.data[self.offset + index] = value

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        for index in range(self.offset, self.offset + self.size):
            yield self.data[index]

    def __repr__(self) -> str:
        return f"Span({list(self)!r})"