"""Configuration and environment helpers for the cache.

Provides small helpers to read typed environment variables and exposes
the defaults used when an ExpirationCache is built without explicit
arguments (DEFAULT_MAX_SIZE, DEFAULT_TTL_SECONDS, THREAD_SAFE).
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_positive_float(name: str, default: float) -> float:
    value = _env_float(name, default)
    # NaN fails this comparison too
    return value if value > 0 else default


# Capacity of the underlying LRU store
DEFAULT_MAX_SIZE = _env_int("EXPIRATION_CACHE_MAX_SIZE", 256)

# Time-to-live applied by put() when no per-call ttl is given (seconds)
DEFAULT_TTL_SECONDS = _env_positive_float("EXPIRATION_CACHE_DEFAULT_TTL", 60.0)

# Guard get/put check-then-act sequences with a lock
THREAD_SAFE = _env_bool("EXPIRATION_CACHE_THREAD_SAFE", True)
