"""Core protocol and interface definitions.

Defines the minimal Cache capability (lookup + capacity accessors) that
ExpirationCache offers besides the full mapping interface, and the
BoundedStore contract any LRU store placed under it must satisfy.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Tuple, TypeVar, runtime_checkable

K = TypeVar("K")
V = TypeVar("V")


@runtime_checkable
class Cache(Protocol[K, V]):
    """Minimal cache capability, distinct from the full mapping API."""

    def lookup(self, key: K) -> Optional[V]:
        ...

    def get_max_cache_size(self) -> int:
        ...

    def set_max_cache_size(self, max_cache_size: int) -> None:
        ...


@runtime_checkable
class BoundedStore(Protocol[K, V]):
    """Contract for the capacity-bounded store under ExpirationCache.

    get() marks the key as recently used; put() may silently evict the
    least recently used entry. Views reflect current contents unfiltered.
    """

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        ...

    def put(self, key: K, value: V) -> Optional[V]:
        ...

    def remove(self, key: K) -> Optional[V]:
        ...

    def clear(self) -> None:
        ...

    def size(self) -> int:
        ...

    def is_empty(self) -> bool:
        ...

    def contains_key(self, key: K) -> bool:
        ...

    def contains_value(self, value: V) -> bool:
        ...

    def keys(self) -> Iterable[K]:
        ...

    def values(self) -> Iterable[V]:
        ...

    def items(self) -> Iterable[Tuple[K, V]]:
        ...

    def get_max_cache_size(self) -> int:
        ...

    def set_max_cache_size(self, max_cache_size: int) -> None:
        ...
