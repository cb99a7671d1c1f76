"""An indexable skip list: positional insert, remove and lookup in expected O(log n)."""

from __future__ import annotations

import random
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

MAX_LEVEL = 20


class _Node:
    __slots__ = ("value", "next", "skip")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: list[Optional[_Node]] = [None] * MAX_LEVEL
        # Distance in positions to the node that ``next`` points at.
        self.skip: list[int] = [1] * MAX_LEVEL


class SkipList(Generic[T]):
    """A list-like sequence backed by a skip list with per-level skip counts."""

    def __init__(self, items: Iterable[T] = (), seed: Optional[int] = None) -> None:
        self._head = _Node()
        self._len = 0
        self._rng = random.Random(seed)
        for item in items:
            self.push_back(item)

    def __len__(self) -> int:
        return self._len

    def _gen_level(self) -> int:
        level = 1
        while level < MAX_LEVEL and self._rng.random() < 0.5:
            level += 1
        return level

    def insert(self, index: int, element: T) -> None:
        """Insert ``element`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._len:
            raise IndexError("index out of bounds")
        self._len += 1
        node = _Node(element)
        level = self._gen_level()
        cur = self._head
        for lv in reversed(range(MAX_LEVEL)):
            while cur.skip[lv] <= index:
                index -= cur.skip[lv]
                cur = cur.next[lv]
            if lv < level:
                node.next[lv] = cur.next[lv]
                cur.next[lv] = node
                node.skip[lv] = cur.skip[lv] - index
                cur.skip[lv] = index + 1
            else:
                cur.skip[lv] += 1

    def remove(self, index: int) -> T:
        """Remove and return the element at ``index``."""
        if not 0 <= index < self._len:
            raise IndexError("index out of bounds")
        self._len -= 1
        cur = self._head
        index += 1
        for lv in reversed(range(MAX_LEVEL)):
            while cur.skip[lv] < index:
                index -= cur.skip[lv]
                cur = cur.next[lv]
            if cur.skip[lv] == index:
                target = cur.next[lv]
                cur.next[lv] = target.next[lv]
                cur.skip[lv] += target.skip[lv] - 1
                if lv == 0:
                    return target.value
            else:
                cur.skip[lv] -= 1
        raise AssertionError("skip list structure is corrupted")

    def push_back(self, element: T) -> None:
        self.insert(self._len, element)

    def push_front(self, element: T) -> None:
        self.insert(0, element)

    def pop_back(self) -> Optional[T]:
        """Remove and return the last element, or None when empty."""
        if self._len == 0:
            return None
        return self.remove(self._len - 1)

    def pop_front(self) -> Optional[T]:
        """Remove and return the first element, or None when empty."""
        if self._len == 0:
            return None
        return self.remove(0)

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise IndexError("index out of bounds")
        cur = self._head
        index += 1
        for lv in reversed(range(MAX_LEVEL)):
            while cur.skip[lv] <= index:
                index -= cur.skip[lv]
                cur = cur.next[lv]
        return cur.value

    def __iter__(self) -> Iterator[T]:
        node = self._head.next[0]
        while node is not None:
            yield node.value
            node = node.next[0]

    def __repr__(self) -> str:
        return f"SkipList({list(self)!r})"