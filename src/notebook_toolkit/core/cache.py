"""
Module: core.cache

Purpose:
    Bounded memoization map shared by the measurement provider and the
    layout engine.

Key Classes:
    - BoundedCache: Capacity-bounded map with FIFO eviction

Eviction:
    The oldest *inserted* key is evicted first. Lookups do not refresh a
    key's position (this is not an LRU). Hits are dominated by recently
    typed short strings, so insertion order is a good enough proxy.

Dependencies:
    - logging (std)

Used By:
    - measurement.provider: Width and metrics caches
    - layout.engine: Line and layout caches
"""

from __future__ import annotations

import logging
from typing import Dict, Generic, Hashable, Iterator, Optional, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_MAX_ENTRIES = 100


class BoundedCache(Generic[K, V]):
    """
    Insertion-ordered cache with a fixed capacity.

    Python dicts preserve insertion order, so the first key yielded by
    iteration is always the oldest entry.

    Attributes:
        max_entries: Maximum number of entries kept.
        name: Label used in debug logs.

    Example:
        >>> cache = BoundedCache(max_entries=2)
        >>> cache.put("a", 1); cache.put("b", 2); cache.put("c", 3)
        >>> list(cache.keys())
        ['b', 'c']
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES, name: str = "cache"):
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1: {max_entries}")
        self._data: Dict[K, V] = {}
        self._max_entries = max_entries
        self._name = name

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def name(self) -> str:
        return self._name

    def get(self, key: K) -> Optional[V]:
        """Return the cached value or None on a miss."""
        return self._data.get(key)

    def put(self, key: K, value: V) -> None:
        """
        Store a value, evicting the oldest entry when full.

        Overwriting an existing key keeps its original position and
        never evicts.
        """
        if key in self._data:
            self._data[key] = value
            return
        while len(self._data) >= self._max_entries:
            oldest = next(iter(self._data))
            del self._data[oldest]
            logger.debug(f"{self._name} EVICT: {oldest!r:.80}")
        self._data[key] = value

    def clear(self) -> None:
        """Drop every entry."""
        self._data.clear()

    def keys(self) -> Iterator[K]:
        """Keys from oldest to newest."""
        return iter(list(self._data))

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    @property
    def size(self) -> int:
        """Number of entries currently cached."""
        return len(self._data)
