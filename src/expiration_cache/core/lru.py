"""Fixed-capacity LRU store.

Keeps entries in an OrderedDict ordered from least to most recently used
and evicts from the front whenever an insert or a capacity change leaves
more entries than allowed.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from contextlib import nullcontext
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class LruCache(Generic[K, V]):
    # Least recently used entry sits at the front of _data
    def __init__(self, max_size: int, *, thread_safe: bool = True) -> None:
        self._max_size = max(1, int(max_size))
        self._data: "OrderedDict[K, V]" = OrderedDict()
        self._lock = threading.RLock() if thread_safe else nullcontext()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        with self._lock:
            if key not in self._data:
                return default
            # Move to end to mark as recently used
            self._data.move_to_end(key, last=True)
            return self._data[key]

    def put(self, key: K, value: V) -> Optional[V]:
        with self._lock:
            old = self._data.get(key)
            self._data[key] = value
            self._data.move_to_end(key, last=True)
            self._evict_overflow()
            return old

    def remove(self, key: K) -> Optional[V]:
        with self._lock:
            return self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._data)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._data

    def contains_key(self, key: object) -> bool:
        # Membership test only, recency is left alone
        with self._lock:
            return key in self._data

    def contains_value(self, value: object) -> bool:
        with self._lock:
            return any(value == stored for stored in self._data.values())

    # Bulk accessors copy under the lock so callers may read or write the
    # store while walking the result

    def keys(self) -> List[K]:
        with self._lock:
            return list(self._data)

    def values(self) -> List[V]:
        with self._lock:
            return list(self._data.values())

    def items(self) -> List[Tuple[K, V]]:
        with self._lock:
            return list(self._data.items())

    def get_max_cache_size(self) -> int:
        return self._max_size

    def set_max_cache_size(self, max_cache_size: int) -> None:
        with self._lock:
            self._max_size = max(1, int(max_cache_size))
            self._evict_overflow()

    def _evict_overflow(self) -> None:
        while len(self._data) > self._max_size:
            key, _ = self._data.popitem(last=False)
            logger.debug("Evicted least recently used key %r (max size %d)", key, self._max_size)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())
