"""Doubly linked list with node handles for positional insert and erase."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class ListNode:
    """A node of a :class:`LinkedList`; holds a value and its neighbours."""

    value: Any
    prev: ListNode | None = field(default=None, repr=False)
    next: ListNode | None = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list. Positions are nodes; None stands for the end."""

    def __init__(self, items: Iterable | None = None) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_back(self, value: Any) -> ListNode:
        """Append ``value`` and return its node."""
        node = ListNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def push_front(self, value: Any) -> ListNode:
        """Prepend ``value`` and return its node."""
        node = ListNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1
        return node

    def pop_back(self) -> Any:
        """Remove and return the last value; None when the list is empty."""
        node = self._tail
        if node is None:
            return None
        self.erase(node)
        return node.value

    def pop_front(self) -> Any:
        """Remove and return the first value; None when the list is empty."""
        node = self._head
        if node is None:
            return None
        self.erase(node)
        return node.value

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._size = 0

    def first_node(self) -> ListNode | None:
        """The first node, or None when the list is empty."""
        return self._head

    def nodes(self) -> Iterator[ListNode]:
        """Iterate over the nodes from front to back."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def insert(self, node: ListNode | None, value: Any) -> ListNode:
        """Insert ``value`` before ``node`` (at the end when None); return the new node."""
        if node is None:
            return self.push_back(value)
        new = ListNode(value, prev=node.prev, next=node)
        if node.prev is None:
            self._head = new
        else:
            node.prev.next = new
        node.prev = new
        self._size += 1
        return new

    def erase(self, node: ListNode | None) -> ListNode | None:
        """Remove ``node``; return the node that followed it (None at the end)."""
        if node is None:
            return None
        following = node.next
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return following

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __copy__(self) -> "LinkedList":
        return type(self)(self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"