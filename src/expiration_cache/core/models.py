"""Value types stored in and returned by the expiration cache.

CacheEntry is the envelope kept in the LRU store (value + monotonic
expiration timestamp). SnapshotEntry is the detached key/value pair handed
out by ExpirationCache.items().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class CacheEntry(Generic[V]):
    """Stored value plus the instant after which it is stale.

    Equality and hashing only consider ``value``, so two entries holding
    equal values compare equal whatever their expiration times are.
    """

    value: V
    expires_at: float = field(compare=False)  # time.monotonic()

    def is_expired(self, now: float) -> bool:
        # Reaching expires_at exactly still counts as fresh
        return now > self.expires_at


@dataclass(eq=False, slots=True)
class SnapshotEntry(Generic[K, V]):
    """Key/value pair copied out of the cache.

    This is a snapshot, not a view: set_value() only changes this object
    and is never written back into the cache it came from.
    """

    key: K
    value: V

    def set_value(self, value: V) -> V:
        old = self.value
        self.value = value
        return old

    def __iter__(self) -> Iterator[object]:
        # Allows `key, value = entry` and dict(cache.items())
        yield self.key
        yield self.value
