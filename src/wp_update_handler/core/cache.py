"""
Release cache with lazy expiration.

Wraps a CacheStore and decides freshness on read: an expired entry is treated
as absent and left for the next ``set`` to overwrite. Nothing is swept in the
background.
"""

import copy
import logging
import time
from collections.abc import Callable

from wp_update_handler.stores.base import CacheStore
from wp_update_handler.stores.memory import MemoryCacheStore

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL = 6 * 60 * 60  # 6 hours, in seconds

PLUGIN_CACHE_PREFIX = "wp_plugin_update_"
THEME_CACHE_PREFIX = "wp_theme_update_"


def cache_key(prefix: str, identity: str) -> str:
    """Build a cache key from a namespace prefix and a package identity."""
    return f"{prefix}{identity}"


class ReleaseCache:
    """Keyed, time-bounded store of normalized release records."""

    def __init__(self, store: CacheStore | None = None, clock: Callable[[], float] = time.time):
        self.store = store if store is not None else MemoryCacheStore()
        self.clock = clock

    def get(self, key: str) -> dict | None:
        """Return the cached record, or None when missing or expired."""
        entry = self.store.load(key)
        if entry is None:
            logger.debug(f"[CACHE] Miss for {key}")
            return None

        value, expires_at = entry
        if self.clock() >= expires_at:
            logger.debug(f"[CACHE] Expired entry for {key}")
            return None

        logger.debug(f"[CACHE] Hit for {key}")
        return copy.deepcopy(value)

    def set(self, key: str, value: dict, ttl: int = DEFAULT_CACHE_TTL) -> None:
        """Store a record that expires ``ttl`` seconds from now."""
        expires_at = self.clock() + ttl
        self.store.save(key, copy.deepcopy(value), expires_at)
        logger.debug(f"[CACHE] Stored {key} for {ttl}s")

    def delete(self, key: str) -> None:
        """Forget the record for a key."""
        self.store.remove(key)
        logger.info(f"[CACHE] Cleared {key}")

    def close(self) -> None:
        self.store.close()
