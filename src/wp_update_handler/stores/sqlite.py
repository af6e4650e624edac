"""
SQLite Store — Persistent transient storage shared between processes.

Values are stored as JSON text. Concurrent writers to the same key simply
replace each other's rows (last write wins).
"""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS transients (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    expires_at REAL NOT NULL
)
"""

SELECT_SQL = "SELECT value, expires_at FROM transients WHERE key = ?"

UPSERT_SQL = """
INSERT OR REPLACE INTO transients (key, value, expires_at)
VALUES (?, ?, ?)
"""

DELETE_SQL = "DELETE FROM transients WHERE key = ?"


class SQLiteCacheStore:
    """
    Stores transients in a SQLite database.

    Creates a 'transients' table keyed by cache key. Each operation commits
    immediately so other processes see the change.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(self.db_path))
        self.conn.execute(CREATE_TABLE_SQL)
        self.conn.commit()

    def load(self, key: str) -> tuple[Any, float] | None:
        row = self.conn.execute(SELECT_SQL, (key,)).fetchone()
        if row is None:
            return None
        try:
            return json.loads(row[0]), float(row[1])
        except json.JSONDecodeError:
            logger.warning(f"[SQLite] Corrupted transient {key}, ignoring")
            return None

    def save(self, key: str, value: Any, expires_at: float) -> None:
        self.conn.execute(UPSERT_SQL, (key, json.dumps(value), expires_at))
        self.conn.commit()
        logger.debug(f"[SQLite] Stored {key} in {self.db_path}")

    def remove(self, key: str) -> None:
        self.conn.execute(DELETE_SQL, (key,))
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()
