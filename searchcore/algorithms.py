"""Sequence algorithms over Python sequences, addressed by index ranges.

Functions that take ``first``/``last`` work on the half-open range
``seq[first:last]``; ``last`` defaults to the end of the sequence. Functions
that write into a destination return the index one past the last element
written, and searches return ``last`` (or the sequence length) when nothing
is found.
"""

from __future__ import annotations

import operator
from itertools import islice, pairwise, zip_longest
from typing import Any, Callable, Iterable, MutableSequence, Sequence

Pred = Callable[[Any], bool]
BinaryPred = Callable[[Any, Any], bool]
Less = Callable[[Any, Any], bool]

_MISSING = object()


def _bounds(seq: Sequence, first: int, last: int | None) -> tuple[int, int]:
    return first, len(seq) if last is None else last


def _write(dest: MutableSequence, items: Iterable, d_first: int) -> int:
    pos = d_first
    for item in items:
        dest[pos] = item
        pos += 1
    return pos


# Non-modifying operations


def for_each(items: Iterable, func: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Call ``func`` on every item and return ``func``."""
    for item in items:
        func(item)
    return func


def for_each_n(seq: Iterable, n: int, func: Callable[[Any], Any]) -> int:
    """Call ``func`` on the first ``n`` items; return the index after them."""
    processed = 0
    for item in islice(seq, max(n, 0)):
        func(item)
        processed += 1
    return processed


def all_of(items: Iterable, pred: Pred) -> bool:
    """True when ``pred`` holds for every item (and for an empty input)."""
    return all(pred(item) for item in items)


def any_of(items: Iterable, pred: Pred) -> bool:
    """True when ``pred`` holds for at least one item."""
    return any(pred(item) for item in items)


def none_of(items: Iterable, pred: Pred) -> bool:
    """True when ``pred`` holds for no item."""
    return not any_of(items, pred)


def find(seq: Sequence, value: Any, first: int = 0, last: int | None = None) -> int:
    """Index of the first element equal to ``value`` in the range, else ``last``."""
    return find_if(seq, lambda item: item == value, first, last)


def find_if(seq: Sequence, pred: Pred, first: int = 0, last: int | None = None) -> int:
    """Index of the first element satisfying ``pred`` in the range, else ``last``."""
    first, last = _bounds(seq, first, last)
    for index in range(first, last):
        if pred(seq[index]):
            return index
    return last


def find_if_not(seq: Sequence, pred: Pred, first: int = 0, last: int | None = None) -> int:
    """Index of the first element not satisfying ``pred``, else ``last``."""
    return find_if(seq, lambda item: not pred(item), first, last)


def _matches_at(seq: Sequence, pattern: Sequence, start: int, pred: BinaryPred) -> bool:
    return all(pred(seq[start + k], item) for k, item in enumerate(pattern))


def search(seq: Sequence, pattern: Iterable, pred: BinaryPred | None = None) -> int:
    """Index where ``pattern`` first occurs in ``seq``; ``len(seq)`` if absent.

    An empty pattern matches at index 0.
    """
    pred = pred or operator.eq
    pattern = list(pattern)
    if not pattern:
        return 0
    for start in range(len(seq) - len(pattern) + 1):
        if _matches_at(seq, pattern, start, pred):
            return start
    return len(seq)


def find_end(seq: Sequence, pattern: Iterable, pred: BinaryPred | None = None) -> int:
    """Index where ``pattern`` last occurs in ``seq``; ``len(seq)`` if absent or empty."""
    pred = pred or operator.eq
    pattern = list(pattern)
    if not pattern:
        return len(seq)
    for start in range(len(seq) - len(pattern), -1, -1):
        if _matches_at(seq, pattern, start, pred):
            return start
    return len(seq)


def find_first_of(seq: Sequence, candidates: Iterable, pred: BinaryPred | None = None) -> int:
    """Index of the first element matching any candidate; ``len(seq)`` if none.

    ``pred`` is called as ``pred(candidate, element)``.
    """
    pred = pred or operator.eq
    candidates = list(candidates)
    for index, item in enumerate(seq):
        if any(pred(candidate, item) for candidate in candidates):
            return index
    return len(seq)


def adjacent_find(seq: Sequence, pred: BinaryPred | None = None) -> int:
    """Index of the first element whose successor matches it; ``len(seq)`` if none.

    ``pred`` is called as ``pred(next_element, element)``.
    """
    pred = pred or operator.eq
    for index, (current, following) in enumerate(pairwise(seq)):
        if pred(following, current):
            return index
    return len(seq)


def count(items: Iterable, value: Any) -> int:
    """Number of items equal to ``value``."""
    return sum(1 for item in items if item == value)


def count_if(items: Iterable, pred: Pred) -> int:
    """Number of items satisfying ``pred``."""
    return sum(1 for item in items if pred(item))


def equal(a: Iterable, b: Iterable, pred: BinaryPred | None = None) -> bool:
    """True when ``a`` and ``b`` have the same length and match element-wise."""
    pred = pred or operator.eq
    for left, right in zip_longest(a, b, fillvalue=_MISSING):
        if left is _MISSING or right is _MISSING:
            return False
        if not pred(left, right):
            return False
    return True


def search_n(seq: Sequence, n: int, value: Any) -> int:
    """Start of the first run of ``n`` elements equal to ``value``; ``len(seq)`` if none.

    A non-positive ``n`` matches at index 0.
    """
    if n <= 0:
        return 0
    run = 0
    for index, item in enumerate(seq):
        if item == value:
            run += 1
            if run == n:
                return index - n + 1
        else:
            run = 0
    return len(seq)


# Copying and filling


def copy(source: Iterable, dest: MutableSequence, d_first: int = 0) -> int:
    """Copy ``source`` into ``dest`` starting at ``d_first``."""
    return _write(dest, source, d_first)


def copy_if(source: Iterable, dest: MutableSequence, pred: Pred, d_first: int = 0) -> int:
    """Copy the items of ``source`` satisfying ``pred`` into ``dest``."""
    return _write(dest, (item for item in source if pred(item)), d_first)


def copy_n(source: Iterable, n: int, dest: MutableSequence, d_first: int = 0) -> int:
    """Copy the first ``n`` items of ``source``; nothing when ``n`` is not positive."""
    return _write(dest, islice(source, max(n, 0)), d_first)


def copy_backward(source: Iterable, dest: MutableSequence, d_last: int | None = None) -> int:
    """Copy ``source`` so that it ends just before ``d_last``; return its start index."""
    end = len(dest) if d_last is None else d_last
    items = list(source)
    start = end - len(items)
    if start < 0:
        raise IndexError("destination range is too small")
    _write(dest, items, start)
    return start


def fill(seq: MutableSequence, value: Any, first: int = 0, last: int | None = None) -> None:
    """Assign ``value`` to every element of the range."""
    first, last = _bounds(seq, first, last)
    for index in range(first, last):
        seq[index] = value


def fill_n(seq: MutableSequence, n: int, value: Any, first: int = 0) -> int:
    """Assign ``value`` to ``n`` elements starting at ``first``."""
    count_ = max(n, 0)
    return _write(seq, (value for _ in range(count_)), first)


def transform(source: Iterable, dest: MutableSequence, op: Callable[[Any], Any], d_first: int = 0) -> int:
    """Write ``op(item)`` for each item of ``source`` into ``dest``."""
    return _write(dest, (op(item) for item in source), d_first)


def transform_binary(
    source1: Iterable,
    source2: Iterable,
    dest: MutableSequence,
    op: Callable[[Any, Any], Any],
    d_first: int = 0,
) -> int:
    """Write ``op(a, b)`` for paired items; ``source2`` must be at least as long."""
    second = iter(source2)

    def results():
        for item in source1:
            other = next(second, _MISSING)
            if other is _MISSING:
                raise ValueError("second source is shorter than the first")
            yield op(item, other)

    return _write(dest, results(), d_first)


def generate(seq: MutableSequence, gen: Callable[[], Any], first: int = 0, last: int | None = None) -> None:
    """Assign successive results of ``gen()`` to the range."""
    first, last = _bounds(seq, first, last)
    for index in range(first, last):
        seq[index] = gen()


def generate_n(seq: MutableSequence, n: int, gen: Callable[[], Any], first: int = 0) -> int:
    """Assign ``n`` successive results of ``gen()`` starting at ``first``."""
    return _write(seq, (gen() for _ in range(max(n, 0))), first)


# Removing and replacing


def remove(seq: MutableSequence, value: Any, first: int = 0, last: int | None = None) -> int:
    """Compact the range, dropping elements equal to ``value``; return the new end.

    Elements past the returned index are left in an unspecified state.
    """
    return remove_if(seq, lambda item: item == value, first, last)


def remove_if(seq: MutableSequence, pred: Pred, first: int = 0, last: int | None = None) -> int:
    """Compact the range, dropping elements satisfying ``pred``; return the new end."""
    first, last = _bounds(seq, first, last)
    write = first
    for read in range(first, last):
        item = seq[read]
        if not pred(item):
            seq[write] = item
            write += 1
    return write


def remove_copy(source: Iterable, dest: MutableSequence, value: Any, d_first: int = 0) -> int:
    """Copy the items not equal to ``value`` into ``dest``."""
    return _write(dest, (item for item in source if not item == value), d_first)


def remove_copy_if(source: Iterable, dest: MutableSequence, pred: Pred, d_first: int = 0) -> int:
    """Copy the items not satisfying ``pred`` into ``dest``."""
    return _write(dest, (item for item in source if not pred(item)), d_first)


def replace(
    seq: MutableSequence, old_value: Any, new_value: Any, first: int = 0, last: int | None = None
) -> None:
    """Replace every element equal to ``old_value`` with ``new_value``."""
    replace_if(seq, lambda item: item == old_value, new_value, first, last)


def replace_if(
    seq: MutableSequence, pred: Pred, new_value: Any, first: int = 0, last: int | None = None
) -> None:
    """Replace every element satisfying ``pred`` with ``new_value``."""
    first, last = _bounds(seq, first, last)
    for index in range(first, last):
        if pred(seq[index]):
            seq[index] = new_value


def replace_copy(
    source: Iterable, dest: MutableSequence, old_value: Any, new_value: Any, d_first: int = 0
) -> int:
    """Copy ``source`` into ``dest``, writing ``new_value`` for items equal to ``old_value``."""
    return replace_copy_if(source, dest, lambda item: item == old_value, new_value, d_first)


def replace_copy_if(
    source: Iterable, dest: MutableSequence, pred: Pred, new_value: Any, d_first: int = 0
) -> int:
    """Copy ``source`` into ``dest``, writing ``new_value`` for items satisfying ``pred``."""
    return _write(dest, (new_value if pred(item) else item for item in source), d_first)


# Reordering


def iter_swap(a: MutableSequence, i: int, b: MutableSequence, j: int) -> None:
    """Swap ``a[i]`` and ``b[j]``."""
    a[i], b[j] = b[j], a[i]


def swap_ranges(
    a: MutableSequence, b: MutableSequence, first: int = 0, last: int | None = None, b_first: int = 0
) -> int:
    """Swap ``a[first:last]`` with the equally long range of ``b`` at ``b_first``.

    Returns the index in ``b`` one past the swapped range.
    """
    first, last = _bounds(a, first, last)
    for offset, index in enumerate(range(first, last)):
        iter_swap(a, index, b, b_first + offset)
    return b_first + max(last - first, 0)


def reverse(seq: MutableSequence, first: int = 0, last: int | None = None) -> None:
    """Reverse the range in place."""
    first, last = _bounds(seq, first, last)
    if last - first > 1:
        seq[first:last] = seq[first:last][::-1]


def reverse_copy(source: Sequence, dest: MutableSequence, d_first: int = 0) -> int:
    """Copy ``source`` into ``dest`` in reverse order."""
    return _write(dest, reversed(source), d_first)


def rotate(seq: MutableSequence, middle: int, first: int = 0, last: int | None = None) -> int:
    """Rotate the range so ``seq[middle]`` becomes its first element.

    Returns the new index of the element that was at ``first``.
    """
    first, last = _bounds(seq, first, last)
    if not first <= middle <= last:
        raise ValueError("middle must lie within the range")
    if first == middle:
        return last
    if middle == last:
        return first
    seq[first:last] = seq[middle:last] + seq[first:middle]
    return first + (last - middle)


def shift_left(seq: MutableSequence, n: int, first: int = 0, last: int | None = None) -> int:
    """Shift the range left by ``n``; return the end of the shifted elements.

    A non-positive ``n`` does nothing and returns ``last``; an ``n`` at least
    the range length does nothing and returns ``first``.
    """
    first, last = _bounds(seq, first, last)
    if n <= 0:
        return last
    if n >= last - first:
        return first
    seq[first : last - n] = seq[first + n : last]
    return last - n


def shift_right(seq: MutableSequence, n: int, first: int = 0, last: int | None = None) -> int:
    """Shift the range right by ``n``; return the start of the shifted elements.

    A non-positive ``n`` does nothing and returns ``first``; an ``n`` at least
    the range length does nothing and returns ``last``.
    """
    first, last = _bounds(seq, first, last)
    if n <= 0:
        return first
    if n >= last - first:
        return last
    seq[first + n : last] = seq[first : last - n]
    return first + n


# Sorted ranges


def lower_bound(
    seq: Sequence, value: Any, less: Less | None = None, first: int = 0, last: int | None = None
) -> int:
    """First index in the sorted range whose element is not less than ``value``."""
    less = less or operator.lt
    low, high = _bounds(seq, first, last)
    while low < high:
        mid = low + (high - low) // 2
        if less(seq[mid], value):
            low = mid + 1
        else:
            high = mid
    return low


def upper_bound(
    seq: Sequence, value: Any, less: Less | None = None, first: int = 0, last: int | None = None
) -> int:
    """First index in the sorted range whose element is greater than ``value``."""
    less = less or operator.lt
    low, high = _bounds(seq, first, last)
    while low < high:
        mid = low + (high - low) // 2
        if less(value, seq[mid]):
            high = mid
        else:
            low = mid + 1
    return low


def binary_search(seq: Sequence, value: Any, less: Less | None = None) -> bool:
    """True when the sorted ``seq`` holds an element equivalent to ``value``."""
    less = less or operator.lt
    index = lower_bound(seq, value, less)
    return index != len(seq) and not less(value, seq[index])


# Comparisons


def max_value(a: Any, b: Any, less: Less | None = None) -> Any:
    """The greater of ``a`` and ``b``; ``a`` when they are equivalent."""
    less = less or operator.lt
    return b if less(a, b) else a


def min_value(a: Any, b: Any, less: Less | None = None) -> Any:
    """The lesser of ``a`` and ``b``; ``b`` when they are equivalent."""
    less = less or operator.lt
    return a if less(a, b) else b


def max_element(seq: Sequence, less: Less | None = None) -> int:
    """Index of the first greatest element; ``len(seq)`` when empty."""
    less = less or operator.lt
    best = len(seq)
    for index, item in enumerate(seq):
        if best == len(seq) or less(seq[best], item):
            best = index
    return best


def min_element(seq: Sequence, less: Less | None = None) -> int:
    """Index of the first smallest element; ``len(seq)`` when empty."""
    less = less or operator.lt
    best = len(seq)
    for index, item in enumerate(seq):
        if best == len(seq) or less(item, seq[best]):
            best = index
    return best


def clamp(value: Any, lo: Any, hi: Any, less: Less | None = None) -> Any:
    """``lo`` if ``value`` is below it, ``hi`` if above, else ``value``."""
    less = less or operator.lt
    if less(value, lo):
        return lo
    if less(hi, value):
        return hi
    return value


def clamp_range(
    seq: MutableSequence,
    lo: Any,
    hi: Any,
    less: Less | None = None,
    first: int = 0,
    last: int | None = None,
) -> None:
    """Clamp every element of the range in place."""
    first, last = _bounds(seq, first, last)
    for index in range(first, last):
        seq[index] = clamp(seq[index], lo, hi, less)