"""An insert-only B+ tree stored in a memory-mapped file."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import Any, Callable

from searchcore.vector_file import VectorFile

Compare = Callable[[Any, Any], int]

_NODE_HEADER = struct.Struct("<II")  # is_leaf, key_count
_CHILD = struct.Struct("<I")


def _default_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _field_count(layout: struct.Struct) -> int:
    return len(layout.unpack(bytes(layout.size)))


@dataclass
class _Node:
    is_leaf: bool
    entries: list = field(default_factory=list)  # [key, value or child index]


@dataclass(frozen=True)
class _Split:
    left: int
    right: int
    key: Any


class OrderedMapFile:
    """Insert-only sorted map of fixed-size keys and values, kept in a file.

    Keys and values are laid out by ``struct`` formats; single-field formats
    give plain values, others tuples. ``compare(a, b)`` returns a negative
    number, zero or a positive number, and ``order`` is the number of
    entries per tree node.
    """

    def __init__(
        self,
        path: str | os.PathLike,
        key_format: str,
        value_format: str,
        order: int = 64,
        compare: Compare | None = None,
    ) -> None:
        if order < 3:
            raise ValueError("order must be at least 3")
        self._key = struct.Struct(key_format)
        self._value = struct.Struct(value_format)
        self._key_fields = _field_count(self._key)
        self._value_fields = _field_count(self._value)
        self._slot_size = max(_CHILD.size, self._value.size)
        self._entry_size = self._key.size + self._slot_size
        self._order = order
        self._node_size = _NODE_HEADER.size + order * self._entry_size
        self._compare: Compare = compare or _default_compare
        self._nodes = VectorFile(path, f"{self._node_size}s", "I")
        if len(self._nodes) == 0:
            self._append(_Node(is_leaf=True))

    # Node encoding

    def _pack(self, layout: struct.Struct, fields: int, buf, offset: int, value: Any) -> None:
        if fields == 1:
            layout.pack_into(buf, offset, value)
        else:
            layout.pack_into(buf, offset, *value)

    def _unpack(self, layout: struct.Struct, fields: int, buf, offset: int) -> Any:
        values = layout.unpack_from(buf, offset)
        return values[0] if fields == 1 else values

    def _decode(self, raw: bytes) -> _Node:
        is_leaf, key_count = _NODE_HEADER.unpack_from(raw, 0)
        entries = []
        offset = _NODE_HEADER.size
        for _ in range(key_count):
            key = self._unpack(self._key, self._key_fields, raw, offset)
            slot_offset = offset + self._key.size
            if is_leaf:
                slot = self._unpack(self._value, self._value_fields, raw, slot_offset)
            else:
                slot = _CHILD.unpack_from(raw, slot_offset)[0]
            entries.append([key, slot])
            offset += self._entry_size
        return _Node(bool(is_leaf), entries)

    def _encode(self, node: _Node) -> bytes:
        if len(node.entries) > self._order:
            raise RuntimeError("node overflow")
        buf = bytearray(self._node_size)
        _NODE_HEADER.pack_into(buf, 0, int(node.is_leaf), len(node.entries))
        offset = _NODE_HEADER.size
        for key, slot in node.entries:
            self._pack(self._key, self._key_fields, buf, offset, key)
            slot_offset = offset + self._key.size
            if node.is_leaf:
                self._pack(self._value, self._value_fields, buf, slot_offset, slot)
            else:
                _CHILD.pack_into(buf, slot_offset, slot)
            offset += self._entry_size
        return bytes(buf)

    def _read(self, index: int) -> _Node:
        return self._decode(self._nodes[index])

    def _write(self, index: int, node: _Node) -> None:
        self._nodes[index] = self._encode(node)

    def _append(self, node: _Node) -> int:
        self._nodes.push_back(self._encode(node))
        return len(self._nodes) - 1

    # Tree operations

    def _find_position(self, node: _Node, key: Any) -> int:
        left, right = 0, len(node.entries)
        while left < right:
            mid = left + (right - left) // 2
            if self._compare(node.entries[mid][0], key) < 0:
                left = mid + 1
            else:
                right = mid
        return left

    def _find_impl(self, key: Any) -> tuple[Any, Any] | None:
        if len(self) == 0:
            return None
        index = 0
        while True:
            node = self._read(index)
            if not node.entries:
                return None
            pos = self._find_position(node, key)
            exact = pos < len(node.entries) and self._compare(node.entries[pos][0], key) == 0
            if node.is_leaf:
                if exact:
                    found_key, value = node.entries[pos]
                    return found_key, value
                return None
            if not exact and pos > 0:
                pos -= 1
            index = node.entries[pos][1]

    def _insert_with_space(self, index: int, key: Any, slot: Any) -> None:
        node = self._read(index)
        node.entries.insert(self._find_position(node, key), [key, slot])
        self._write(index, node)

    def _split(self, index: int) -> _Split:
        old = self._read(index)
        half = self._order // 2
        keep = len(old.entries) - half
        new = _Node(old.is_leaf, old.entries[keep:])
        old.entries = old.entries[:keep]
        self._write(index, old)
        right = self._append(new)
        return _Split(left=index, right=right, key=new.entries[0][0])

    def _insert_into(self, index: int, key: Any, value: Any) -> tuple[bool, _Split | None]:
        node = self._read(index)
        pos = self._find_position(node, key)
        if node.is_leaf:
            if pos < len(node.entries) and self._compare(node.entries[pos][0], key) == 0:
                return False, None
            if len(node.entries) == self._order:
                split = self._split(index)
                target = split.right if self._compare(split.key, key) <= 0 else split.left
                self._insert_with_space(target, key, value)
                return True, split
            node.entries.insert(pos, [key, value])
            self._write(index, node)
            return True, None

        target_entry = pos if pos == 0 else pos - 1
        child = node.entries[target_entry][1]
        inserted, split = self._insert_into(child, key, value)
        if not inserted:
            return False, None
        if split is None:
            return True, None

        node = self._read(index)
        node.entries[target_entry][0] = self._read(child).entries[0][0]
        node.entries.insert(self._find_position(node, split.key), [split.key, split.right])
        self._write(index, node)
        if len(node.entries) == self._order:
            return True, self._split(index)
        return True, None

    # Public interface

    def insert(self, key: Any, value: Any) -> bool:
        """Insert ``key`` with ``value``; False when the key is already present."""
        inserted, split = self._insert_into(0, key, value)
        if not inserted:
            return False
        if split is not None:
            old_root = self._read(0)
            new_root = _Node(
                is_leaf=False,
                entries=[[old_root.entries[0][0], len(self._nodes)], [split.key, split.right]],
            )
            self._append(new_root)
            first, last = self._nodes[0], self._nodes[-1]
            self._nodes[0], self._nodes[-1] = last, first
        self._nodes.custom_data = len(self) + 1
        return True

    def find(self, key: Any) -> tuple[Any, Any] | None:
        """The stored (key, value) pair for ``key``, or None."""
        return self._find_impl(key)

    def close(self) -> None:
        """Close the backing file."""
        self._nodes.close()

    def __contains__(self, key: object) -> bool:
        return self._find_impl(key) is not None

    def __len__(self) -> int:
        return self._nodes.custom_data

    def __enter__(self) -> "OrderedMapFile":
        return self

    def __exit__(self, *args) -> None:
        self.close()