"""In-memory cache that expires values on top of an LRU store.

Values are wrapped in a CacheEntry carrying a monotonic expiration
timestamp and kept in an LruCache, which evicts by recency regardless of
expiry. Expiration is lazy: get() notices a stale entry and drops it, while
the bulk accessors (len, in, keys, values, items) report raw contents and
may still include entries that are logically expired. purge_expired() is
available for an explicit sweep.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import abc
from contextlib import nullcontext
from datetime import timedelta
from typing import (
    Iterable,
    Iterator,
    KeysView,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Set,
    Tuple,
    TypeVar,
    Union,
)

from expiration_cache import config
from expiration_cache.core.errors import ValidationError
from expiration_cache.core.interfaces import BoundedStore
from expiration_cache.core.lru import LruCache
from expiration_cache.core.models import CacheEntry, SnapshotEntry

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

Ttl = Union[float, int, timedelta]

_MISSING = object()


def _to_seconds(ttl: Ttl) -> float:
    if isinstance(ttl, timedelta):
        return ttl.total_seconds()
    try:
        return float(ttl)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid ttl: {ttl!r}") from exc


class ExpirationCache(MutableMapping[K, V]):
    """LRU-bounded mapping whose values expire after a time-to-live.

    Key behavior:
      - put() stamps each value with ``now + ttl``; the ttl is the per-call
        one or the default in effect at that moment.
      - get()/lookup()/``cache[key]`` drop an entry once ``now > expires_at``.
      - len, ``in``, keys(), values() and items() are NOT filtered by expiry.
      - put() returns the previous value without checking whether it had
        already expired.
      - items() returns detached snapshots; changing them does not touch
        the cache.
    """

    def __init__(
        self,
        max_size: Optional[int] = None,
        default_ttl: Optional[Ttl] = None,
        *,
        thread_safe: Optional[bool] = None,
        store: Optional[BoundedStore[K, CacheEntry[V]]] = None,
    ) -> None:
        if max_size is None:
            max_size = config.DEFAULT_MAX_SIZE
        if default_ttl is None:
            default_ttl = config.DEFAULT_TTL_SECONDS
        if thread_safe is None:
            thread_safe = config.THREAD_SAFE

        self._default_ttl = self._validate_ttl(default_ttl)
        # max_size only sizes the default store; an injected one keeps its own
        if store is None:
            store = LruCache(max_size, thread_safe=thread_safe)
        self._store: BoundedStore[K, CacheEntry[V]] = store
        self._lock = threading.RLock() if thread_safe else nullcontext()

    # ------------------------------------------------------------------
    # configuration

    @property
    def default_expiration(self) -> float:
        """Default time-to-live in seconds."""
        return self._default_ttl

    def set_default_expiration(self, ttl: Ttl) -> None:
        """Replace the default ttl used by later puts; stored entries keep theirs."""
        seconds = self._validate_ttl(ttl)
        self._default_ttl = seconds
        logger.debug("Default expiration set to %.3fs", seconds)

    def get_max_cache_size(self) -> int:
        return self._store.get_max_cache_size()

    def set_max_cache_size(self, max_cache_size: int) -> None:
        # Shrinking evicts least recently used entries right away
        self._store.set_max_cache_size(max_cache_size)

    @staticmethod
    def _validate_ttl(ttl: Ttl) -> float:
        seconds = _to_seconds(ttl)
        if not seconds > 0:
            raise ValidationError(f"ttl must be positive, got {ttl!r}")
        return seconds

    # ------------------------------------------------------------------
    # insertion

    def put(self, key: K, value: V, ttl: Optional[Ttl] = None) -> Optional[V]:
        """Store ``value`` under ``key`` and return the previous value, if any.

        The previous value is returned even if it had already expired.
        """
        seconds = self._default_ttl if ttl is None else _to_seconds(ttl)
        with self._lock:
            entry = CacheEntry(value=value, expires_at=time.monotonic() + seconds)
            old = self._store.put(key, entry)
            if old is None:
                return None
            return old.value

    def put_all(self, mapping: Union[Mapping[K, V], Iterable[Tuple[K, V]]]) -> None:
        # One put per pair with the default ttl; nothing is rolled back on failure
        pairs = mapping.items() if isinstance(mapping, Mapping) else mapping
        for key, value in pairs:
            self.put(key, value)

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    # ------------------------------------------------------------------
    # lookup

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return default

            if entry.is_expired(time.monotonic()):
                self._store.remove(key)
                logger.debug("Expired key %r removed on lookup", key)
                return default

            return entry.value

    def lookup(self, key: K) -> Optional[V]:
        return self.get(key)

    def __getitem__(self, key: K) -> V:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def remove(self, key: K) -> Optional[V]:
        """Remove ``key`` whatever its expiry state and return its value."""
        with self._lock:
            entry = self._store.remove(key)
        if entry is None:
            return None
        return entry.value

    def __delitem__(self, key: K) -> None:
        with self._lock:
            entry = self._store.remove(key)
        if entry is None:
            raise KeyError(key)

    def popitem(self) -> Tuple[K, V]:
        """Remove and return the least recently used live ``(key, value)`` pair.

        Expired entries met on the way are dropped, not returned.
        """
        with self._lock:
            now = time.monotonic()
            for key in list(self._store.keys()):
                entry = self._store.remove(key)
                if entry is None:
                    continue
                if entry.is_expired(now):
                    logger.debug("Expired key %r dropped by popitem", key)
                    continue
                return key, entry.value
        raise KeyError("popitem(): cache is empty")

    # ------------------------------------------------------------------
    # bulk surface (raw contents, expired entries included)

    def size(self) -> int:
        return self._store.size()

    def is_empty(self) -> bool:
        return self._store.is_empty()

    def contains_key(self, key: object) -> bool:
        return self._store.contains_key(key)

    def contains_value(self, value: object) -> bool:
        # CacheEntry equality only looks at the wrapped value
        return self._store.contains_value(CacheEntry(value=value, expires_at=0.0))

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def keys(self) -> KeysView[K]:
        # Iterates a snapshot, so reading keys while walking it is safe
        return abc.KeysView(self)

    def values(self) -> Union[Set[V], List[V]]:
        """Return a new collection of the stored values with duplicates collapsed.

        A set when every value is hashable; otherwise a list deduplicated
        by equality.
        """
        values = [entry.value for entry in self._store.values()]
        try:
            return set(values)
        except TypeError:
            unique: List[V] = []
            for value in values:
                if not any(value == seen for seen in unique):
                    unique.append(value)
            return unique

    def items(self) -> Set[SnapshotEntry[K, V]]:
        """Return detached key/value snapshots of the stored entries."""
        return {SnapshotEntry(key=key, value=entry.value) for key, entry in self._store.items()}

    def purge_expired(self) -> int:
        """Drop every entry that has expired and return how many were removed."""
        with self._lock:
            now = time.monotonic()
            stale = [key for key, entry in list(self._store.items()) if entry.is_expired(now)]
            for key in stale:
                self._store.remove(key)
        if stale:
            logger.debug("Purged %d expired entries", len(stale))
        return len(stale)

    def __len__(self) -> int:
        return self._store.size()

    def __contains__(self, key: object) -> bool:
        return self._store.contains_key(key)

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._store.keys()))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self.size()}, "
            f"max_size={self.get_max_cache_size()}, default_ttl={self._default_ttl})"
        )
