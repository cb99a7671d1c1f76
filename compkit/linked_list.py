"""A doubly linked list with positional access from the nearer end."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("x", "next", "prev")

    def __init__(self, x: Any = None) -> None:
        self.x = x
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


class DLList(Generic[T]):
    """Doubly linked list between two sentinel nodes."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head = _Node()
        self._tail = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._n = 0
        for x in items:
            self.add(self._n, x)

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def _node(self, i: int) -> _Node:
        # i == n yields the tail sentinel, used for appending.
        if i < self._n // 2:
            node = self._head.next
            for _ in range(i):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._n - i):
                node = node.prev
        return node

    def _check(self, i: int) -> None:
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range for list of size {self._n}")

    def get(self, i: int) -> Optional[T]:
        """Element at ``i``, or None when the list is empty."""
        if self._n == 0:
            return None
        self._check(i)
        return self._node(i).x

    def set(self, i: int, x: T) -> Optional[T]:
        """Replace the element at ``i`` and return the old one; None when empty."""
        if self._n == 0:
            return None
        self._check(i)
        node = self._node(i)
        old, node.x = node.x, x
        return old

    def add(self, i: int, x: T) -> None:
        """Insert ``x`` so that it ends up at position ``i``."""
        if not 0 <= i <= self._n:
            raise IndexError(f"index {i} out of range for insertion into size {self._n}")
        after = self._node(i)
        node = _Node(x)
        node.prev = after.prev
        node.next = after
        after.prev.next = node
        after.prev = node
        self._n += 1

    def remove(self, i: int) -> Optional[T]:
        """Remove and return the element at ``i``; None when the list is empty."""
        if self._n == 0:
            return None
        self._check(i)
        node = self._node(i)
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        self._n -= 1
        return node.x

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not self._tail:
            yield node.x
            node = node.next

    def __repr__(self) -> str:
        return f"DLList({list(self)!r})"