"""
Memory Store — Process-local transient storage.
"""

import copy
import logging
from typing import Any

logger = logging.getLogger(__name__)


class MemoryCacheStore:
    """Keeps entries in a dict for the life of the process."""

    def __init__(self):
        self.entries: dict[str, tuple[Any, float]] = {}

    def load(self, key: str) -> tuple[Any, float] | None:
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        return copy.deepcopy(value), expires_at

    def save(self, key: str, value: Any, expires_at: float) -> None:
        self.entries[key] = (copy.deepcopy(value), expires_at)
        logger.debug(f"[MEMORY] Stored {key}")

    def remove(self, key: str) -> None:
        self.entries.pop(key, None)

    def close(self) -> None:
        pass
