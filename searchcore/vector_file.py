"""A growable array of fixed-size records stored in a memory-mapped file."""

from __future__ import annotations

import mmap
import os
import struct
from typing import Any, Iterator

PAGE_SIZE = 4096
"""Files are resized in whole multiples of this many bytes."""

_FILE_HEADER = struct.Struct("=QQ")  # capacity, size


def _align_up(n: int, alignment: int) -> int:
    return (n + alignment - 1) & ~(alignment - 1)


def _alignment(fmt: str) -> int:
    """Alignment of a struct format: the size of its largest primitive field."""
    prefix, body = "@", fmt
    if body and body[0] in "@=<>!":
        prefix, body = body[0], body[1:]
    align = 1
    for ch in body:
        if ch.isdigit() or ch.isspace() or ch in "sxp":
            continue
        align = max(align, struct.calcsize(prefix + ch))
    return align


def _field_count(layout: struct.Struct) -> int:
    return len(layout.unpack(bytes(layout.size)))


def _pack_into(layout: struct.Struct, fields: int, buf, offset: int, value: Any) -> None:
    if fields == 1:
        layout.pack_into(buf, offset, value)
    else:
        layout.pack_into(buf, offset, *value)


def _unpack_from(layout: struct.Struct, fields: int, buf, offset: int) -> Any:
    values = layout.unpack_from(buf, offset)
    return values[0] if fields == 1 else values


class VectorFile:
    """Vector of ``struct``-formatted records kept in a memory-mapped file.

    Supports random access, push back and pop back. Records with a single
    field are read and written as plain values, others as tuples. An
    optional block of custom data, laid out by ``custom_format``, is kept in
    the file header.
    """

    def __init__(self, path: str | os.PathLike, item_format: str, custom_format: str | None = None) -> None:
        self._item = struct.Struct(item_format)
        if self._item.size == 0:
            raise ValueError("item format must describe at least one byte")
        self._item_fields = _field_count(self._item)
        item_align = _alignment(item_format)

        if custom_format is None:
            self._custom: struct.Struct | None = None
            self._custom_fields = 0
            self._file_header_space = _align_up(_FILE_HEADER.size, item_align)
            self._header_space = self._file_header_space
        else:
            self._custom = struct.Struct(custom_format)
            self._custom_fields = _field_count(self._custom)
            self._file_header_space = _align_up(_FILE_HEADER.size, _alignment(custom_format))
            self._header_space = _align_up(self._file_header_space + self._custom.size, item_align)

        self._initial_capacity = max(PAGE_SIZE // self._item.size, 1)

        exists = os.path.exists(path)
        self._fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o600)
        try:
            if exists:
                file_size = os.fstat(self._fd).st_size
                if file_size < self._header_space:
                    raise ValueError("file is too small to hold a vector header")
            else:
                file_size = self._header_space + self._initial_capacity * self._item.size
                os.ftruncate(self._fd, file_size)
            self._map: mmap.mmap | None = mmap.mmap(self._fd, file_size)
        except BaseException:
            os.close(self._fd)
            self._fd = -1
            raise
        self._file_size = file_size

        if not exists:
            _FILE_HEADER.pack_into(self._map, 0, self._initial_capacity, 0)
        self._capacity, self._size = _FILE_HEADER.unpack_from(self._map, 0)
        if self._header_space + self._capacity * self._item.size > file_size or self._size > self._capacity:
            self.close()
            raise ValueError("vector file header does not match the file")

    # Properties

    @property
    def capacity(self) -> int:
        """Number of records the file can hold without growing."""
        return self._capacity

    @property
    def header_space(self) -> int:
        """Bytes before the first record."""
        return self._header_space

    @property
    def custom_data(self) -> Any:
        """The custom header data, or None when no custom format was given."""
        if self._custom is None:
            return None
        return _unpack_from(self._custom, self._custom_fields, self._buffer, self._file_header_space)

    @custom_data.setter
    def custom_data(self, value: Any) -> None:
        if self._custom is None:
            raise ValueError("vector file has no custom data")
        _pack_into(self._custom, self._custom_fields, self._buffer, self._file_header_space, value)

    # Internals

    @property
    def _buffer(self) -> mmap.mmap:
        if self._map is None:
            raise ValueError("vector file is closed")
        return self._map

    def _offset(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("index out of range")
        return self._header_space + index * self._item.size

    def _store_header(self) -> None:
        _FILE_HEADER.pack_into(self._buffer, 0, self._capacity, self._size)

    def _force_resize(self, new_capacity: int) -> None:
        self._buffer.close()
        self._map = None
        data_size = self._header_space + new_capacity * self._item.size
        new_file_size = _align_up(data_size, PAGE_SIZE)
        os.ftruncate(self._fd, new_file_size)
        self._map = mmap.mmap(self._fd, new_file_size)
        self._file_size = new_file_size
        self._capacity = (new_file_size - self._header_space) // self._item.size
        self._store_header()

    # Public interface

    def push_back(self, value: Any) -> None:
        """Append a record, growing the file when it is full."""
        if self._size >= self._capacity:
            self._force_resize(self._capacity * 2)
        offset = self._header_space + self._size * self._item.size
        _pack_into(self._item, self._item_fields, self._buffer, offset, value)
        self._size += 1
        self._store_header()

    def pop_back(self) -> Any:
        """Remove and return the last record; shrinks the file when mostly empty."""
        if self._size == 0:
            raise IndexError("index out of range")
        value = self[self._size - 1]
        self._size -= 1
        self._store_header()
        if self._size < self._capacity // 4 and self._capacity > self._initial_capacity * 2:
            self._force_resize(self._capacity // 2)
        return value

    def reserve(self, capacity: int) -> None:
        """Make room for at least ``capacity`` records; may reserve more."""
        if self._capacity >= capacity:
            return
        self._force_resize(capacity)

    def front(self) -> Any:
        """The first record."""
        return self[0]

    def back(self) -> Any:
        """The last record."""
        return self[self._size - 1] if self._size else self[0]

    def close(self) -> None:
        """Unmap and close the backing file."""
        if self._map is not None:
            self._map.close()
            self._map = None
        if self._fd != -1:
            os.close(self._fd)
            self._fd = -1

    def __getitem__(self, index: int) -> Any:
        offset = self._offset(index)
        return _unpack_from(self._item, self._item_fields, self._buffer, offset)

    def __setitem__(self, index: int, value: Any) -> None:
        offset = self._offset(index)
        _pack_into(self._item, self._item_fields, self._buffer, offset, value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for index in range(self._size):
            yield self[index]

    def __enter__(self) -> "VectorFile":
        return self

    def __exit__(self, *args) -> None:
        self.close()