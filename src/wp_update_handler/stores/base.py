"""
CacheStore Protocol — Base interface for all transient backends.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """
    Protocol that all cache stores must implement.

    Stores keep raw ``(value, expires_at)`` pairs. Expiration is decided by
    the ReleaseCache that reads them, so a store may hand back stale entries.
    """

    def load(self, key: str) -> tuple[Any, float] | None:
        """Return the stored value and its expiry timestamp, or None."""
        ...

    def save(self, key: str, value: Any, expires_at: float) -> None:
        """Store a value, replacing any previous entry for the key."""
        ...

    def remove(self, key: str) -> None:
        """Drop the entry for a key if present."""
        ...

    def close(self) -> None:
        """Release any connection held by the store."""
        ...
