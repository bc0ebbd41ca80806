"""Memoize function results in an ExpirationCache.

Intended for short-lived lookups (resolved addresses, parsed documents)
that are expensive to recompute but must not be served forever.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, TypeVar

from expiration_cache.core.cache import ExpirationCache, Ttl

R = TypeVar("R")

_MISSING = object()


@dataclass(frozen=True, slots=True)
class _CallKey:
    # Cache key for one call: positional args + sorted keyword args
    args: Tuple[Any, ...]
    kwargs: Tuple[Tuple[str, Any], ...]


def memoize(
    cache: Optional[ExpirationCache[_CallKey, Any]] = None,
    *,
    ttl: Optional[Ttl] = None,
) -> Callable[[Callable[..., R]], Callable[..., R]]:
    """Cache the decorated function's results per call arguments.

    Arguments must be hashable. ``ttl`` overrides the cache's default
    expiration for entries written by this function. ``None`` results are
    cached like any other value.
    """

    def decorator(func: Callable[..., R]) -> Callable[..., R]:
        store = cache if cache is not None else ExpirationCache()

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> R:
            key = _CallKey(args=args, kwargs=tuple(sorted(kwargs.items())))
            cached = store.get(key, _MISSING)
            if cached is not _MISSING:
                return cached

            result = func(*args, **kwargs)
            store.put(key, result, ttl)
            return result

        wrapper.cache = store  # type: ignore[attr-defined]
        wrapper.cache_clear = store.clear  # type: ignore[attr-defined]
        return wrapper

    return decorator
