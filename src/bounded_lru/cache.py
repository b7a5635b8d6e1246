# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
"""Bounded, thread-safe least-recently-used cache."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Hashable, TypeVar

from ._linked_list import Node, RecencyList
from .config import CacheConfig
from .errors import InvalidCapacityError, SnapshotError
from .models import CacheHit, CacheSnapshot, CacheStats

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """
    Fixed-capacity key/value store with least-recently-used eviction.

    A dict maps each key to its node in a doubly linked recency list, so
    lookups, promotions and evictions are all O(1). ``get`` hits and every
    ``put`` move the touched entry to the most-recently-used position. When a
    new key is inserted into a full cache, the least-recently-used entry is
    evicted first, so ``size()`` never exceeds ``capacity()``.

    The index and the recency list are guarded together by a single
    ``threading.Lock``; every public method is safe to call from multiple
    threads.

    Examples:
        ```python
        cache: LRUCache[int, str] = LRUCache(2)
        cache.put(1, "a")
        cache.put(2, "b")
        cache.get(1)       # CacheHit(value='a'), 1 is now most-recently-used
        cache.put(3, "c")  # evicts 2
        cache.get(2)       # None
        ```
    """

    def __init__(
        self,
        capacity: int,
        *,
        on_evict: Callable[[K, V], None] | None = None,
        name: str | None = None,
    ) -> None:
        # bool is an int subclass, but LRUCache(True) is almost certainly a bug
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(capacity)
        self._capacity = capacity
        self._on_evict = on_evict
        self.name = name

        self._index: dict[K, Node[K, V]] = {}
        self._order: RecencyList[K, V] = RecencyList()
        self._lock = threading.Lock()

        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @classmethod
    def from_config(
        cls,
        config: CacheConfig,
        *,
        on_evict: Callable[[K, V], None] | None = None,
    ) -> LRUCache[K, V]:
        return cls(config.capacity, on_evict=on_evict, name=config.name)

    @classmethod
    def from_snapshot(
        cls,
        snapshot: CacheSnapshot,
        *,
        capacity: int | None = None,
        on_evict: Callable[[K, V], None] | None = None,
        name: str | None = None,
    ) -> LRUCache[K, V]:
        """
        Build a cache holding the snapshot's entries in the same recency order.

        Args:
            snapshot: Entries ordered least-recently-used first.
            capacity: Overrides ``snapshot.capacity`` when given. Must still
                hold every entry; restoring never evicts.
        """
        cache: LRUCache[K, V] = cls(
            snapshot.capacity if capacity is None else capacity,
            on_evict=on_evict,
            name=name,
        )
        if len(snapshot.entries) > cache._capacity:
            raise SnapshotError(
                f"Snapshot holds {len(snapshot.entries)} entries, "
                f"more than capacity {cache._capacity}"
            )
        for key, value in snapshot.entries:
            try:
                duplicate = key in cache._index
            except TypeError as exc:
                raise SnapshotError(f"Unhashable key in snapshot: {key!r}") from exc
            if duplicate:
                raise SnapshotError(f"Duplicate key in snapshot: {key!r}")
            node = Node(key, value)
            cache._index[key] = node
            cache._order.push_front(node)
        logger.debug(
            "Restored %d entries into %s", len(snapshot.entries), cache._label()
        )
        return cache

    def get(self, key: K) -> CacheHit[V] | None:
        """Return the cached value and mark it most-recently-used, or None on a miss."""
        with self._lock:
            node = self._index.get(key)
            if node is None:
                self._misses += 1
                return None
            self._hits += 1
            self._order.move_to_front(node)
            return CacheHit(node.value)

    def put(self, key: K, value: V) -> None:
        """
        Insert or replace ``key`` as the most-recently-used entry.

        Replacing an existing key never evicts. Inserting a new key into a
        full cache evicts exactly one entry, the least-recently-used one.
        """
        evicted: Node[K, V] | None = None
        with self._lock:
            node = self._index.get(key)
            if node is not None:
                node.value = value
                self._order.move_to_front(node)
                return

            if len(self._index) >= self._capacity:
                evicted = self._order.pop_back()
                if evicted is not None:
                    del self._index[evicted.key]
                    self._evictions += 1

            node = Node(key, value)
            self._index[key] = node
            self._order.push_front(node)

        if evicted is not None:
            self._notify_evicted(evicted.key, evicted.value)

    def remove(self, key: K) -> CacheHit[V] | None:
        """Delete ``key`` and return its value. Other entries keep their order."""
        with self._lock:
            node = self._index.pop(key, None)
            if node is None:
                return None
            self._order.unlink(node)
            return CacheHit(node.value)

    def peek(self, key: K) -> CacheHit[V] | None:
        """Like ``get`` but without promoting the entry or counting a hit/miss."""
        with self._lock:
            node = self._index.get(key)
            return None if node is None else CacheHit(node.value)

    def contains(self, key: K) -> bool:
        with self._lock:
            return key in self._index

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def size(self) -> int:
        with self._lock:
            return len(self._index)

    def __len__(self) -> int:
        return self.size()

    def capacity(self) -> int:
        return self._capacity

    def keys(self) -> list[K]:
        """Keys ordered most-recently-used first."""
        with self._lock:
            return [node.key for node in self._order]

    def items(self) -> list[tuple[K, V]]:
        """(key, value) pairs ordered most-recently-used first."""
        with self._lock:
            return [(node.key, node.value) for node in self._order]

    def clear(self) -> None:
        """Drop every entry. Not counted as evictions and ``on_evict`` is not called."""
        with self._lock:
            self._index.clear()
            self._order.clear()

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                capacity=self._capacity,
                size=len(self._index),
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
            )

    def reset_stats(self) -> None:
        with self._lock:
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def snapshot(self) -> CacheSnapshot:
        """Capture the current entries, least-recently-used first."""
        with self._lock:
            entries = [(node.key, node.value) for node in self._order.iter_lru_first()]
        return CacheSnapshot(capacity=self._capacity, entries=entries)

    def __repr__(self) -> str:
        name = f"name={self.name!r}, " if self.name else ""
        return f"LRUCache({name}size={len(self._index)}, capacity={self._capacity})"

    def _label(self) -> str:
        return f"cache {self.name!r}" if self.name else "cache"

    def _notify_evicted(self, key: K, value: V) -> None:
        # Runs outside the lock so callbacks may use the cache again.
        logger.debug("Evicted %r from %s", key, self._label())
        if self._on_evict is None:
            return
        try:
            self._on_evict(key, value)
        except Exception:
            logger.warning(
                "on_evict callback failed for key %r in %s",
                key,
                self._label(),
                exc_info=True,
            )
