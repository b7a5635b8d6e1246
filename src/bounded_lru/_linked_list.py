# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
"""Intrusive doubly linked list used to track recency order."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Node(Generic[K, V]):
    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.prev: Node[K, V] | None = None
        self.next: Node[K, V] | None = None

    def __repr__(self) -> str:
        return f"Node(key={self.key!r})"


class RecencyList(Generic[K, V]):
    """
    Circular list with a sentinel node.

    ``sentinel.next`` is the most-recently-used node and ``sentinel.prev`` the
    least-recently-used one. Not thread-safe on its own; callers hold a lock.
    """

    def __init__(self) -> None:
        sentinel: Node[Any, Any] = Node(None, None)
        sentinel.prev = sentinel
        sentinel.next = sentinel
        self._sentinel: Node[K, V] = sentinel
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Node[K, V]]:
        """Iterate from most- to least-recently used."""
        node = self._sentinel.next
        while node is not None and node is not self._sentinel:
            nxt = node.next
            yield node
            node = nxt

    def iter_lru_first(self) -> Iterator[Node[K, V]]:
        node = self._sentinel.prev
        while node is not None and node is not self._sentinel:
            prev = node.prev
            yield node
            node = prev

    def push_front(self, node: Node[K, V]) -> None:
        head = self._sentinel.next
        if head is None:
            raise RuntimeError("recency list sentinel is detached")
        node.prev = self._sentinel
        node.next = head
        head.prev = node
        self._sentinel.next = node
        self._len += 1

    def unlink(self, node: Node[K, V]) -> None:
        prev, nxt = node.prev, node.next
        if prev is None or nxt is None:
            raise ValueError(f"{node!r} is not linked")
        prev.next = nxt
        nxt.prev = prev
        node.prev = None
        node.next = None
        self._len -= 1

    def move_to_front(self, node: Node[K, V]) -> None:
        if self._sentinel.next is node:
            return
        self.unlink(node)
        self.push_front(node)

    def pop_back(self) -> Node[K, V] | None:
        """Unlink and return the least-recently-used node, or None if empty."""
        tail = self._sentinel.prev
        if tail is None or tail is self._sentinel:
            return None
        self.unlink(tail)
        return tail

    def clear(self) -> None:
        # Break links so dropped nodes don't keep each other alive.
        for node in list(self):
            node.prev = None
            node.next = None
        self._sentinel.prev = self._sentinel
        self._sentinel.next = self._sentinel
        self._len = 0
