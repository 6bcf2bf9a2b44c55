"""
Bounded least-recently-used cache.

Sits in front of by-id lookups in the service layer. Writers invalidate
keys explicitly after a successful update or delete; nothing expires on
its own. Every invalidation bumps a generation counter so that a reader
which loaded a value before the invalidation cannot store it afterwards.

Dependencies: collections, threading
System role: Lookup cache for hot identifiers
"""

import threading
from collections import OrderedDict
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """
    Thread-safe LRU cache with a fixed capacity.

    Attributes:
        max_size: Maximum number of entries kept before evicting the oldest
    """

    def __init__(self, max_size: int = 256) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._data: OrderedDict[K, V] = OrderedDict()
        self._generations: dict[K, int] = {}
        self._epoch = 0
        self._lock = threading.Lock()

    def get(self, key: K) -> V | None:
        """Return the cached value and mark it most recently used, or None."""
        with self._lock:
            if key not in self._data:
                return None
            self._data.move_to_end(key)
            return self._data[key]

    def put(self, key: K, value: V) -> None:
        """Store a value, evicting the least recently used entry when full."""
        with self._lock:
            self._store(key, value)

    def _store(self, key: K, value: V) -> None:
        self._data[key] = value
        self._data.move_to_end(key)
        while len(self._data) > self.max_size:
            self._data.popitem(last=False)

    def generation(self, key: K) -> int:
        """Return a token that changes whenever the key or the cache is invalidated."""
        with self._lock:
            return self._epoch + self._generations.get(key, 0)

    def put_if_unchanged(self, key: K, value: V, generation: int) -> bool:
        """
        Store a value loaded while the key was at the given generation.

        Returns:
            bool: False (and nothing stored) when the key was invalidated since
        """
        with self._lock:
            if self._epoch + self._generations.get(key, 0) != generation:
                return False
            self._store(key, value)
            return True

    def invalidate(self, key: K) -> None:
        with self._lock:
            self._data.pop(key, None)
            self._generations[key] = self._generations.get(key, 0) + 1

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._epoch += 1

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
