"""Cache backends for normalized release records."""

from wp_update_handler.stores.base import CacheStore
from wp_update_handler.stores.memory import MemoryCacheStore
from wp_update_handler.stores.sqlite import SQLiteCacheStore


def get_store(db_path: str | None = None) -> CacheStore:
    """Factory: a SQLite store when a database path is given, else in-memory."""
    from pathlib import Path

    if db_path:
        return SQLiteCacheStore(db_path=Path(db_path))
    return MemoryCacheStore()


__all__ = ["CacheStore", "MemoryCacheStore", "SQLiteCacheStore", "get_store"]
