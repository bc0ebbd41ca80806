from __future__ import annotations


class ExpirationCacheError(Exception):
    """Base error for the expiration cache."""


class ValidationError(ExpirationCacheError, ValueError):
    """Raised when a configuration argument is invalid."""
