# src/cache/sqlite_store.py — v2
"""SQLite-based cache store.

Uses stdlib sqlite3: one file, one table. Cached data is disposable, so a
table left behind by an older schema is dropped and rebuilt instead of
failing the open.
"""

from __future__ import annotations

import logging
import sqlite3
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from sonaveeb.cache.base_cache_store import BaseCacheStore
from sonaveeb.cache.models import CacheEntry, SchemaStatus
from sonaveeb.core.errors import CacheUnavailable

logger = logging.getLogger(__name__)

TABLE_NAME = "cache"
TIMESTAMP_COLUMN = "created_at"

_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    key TEXT PRIMARY KEY,
    value BLOB,
    {TIMESTAMP_COLUMN} INTEGER
)
"""

# Seconds to wait on a lock held by another process.
_BUSY_TIMEOUT_S = 5.0


def check_schema(conn: sqlite3.Connection) -> SchemaStatus:
    """Reflect on the cache table and decide whether it can be reused.

    A missing table is compatible (it will be created). A table without the
    timestamp column was written by an older schema and must be rebuilt.
    """
    rows = conn.execute(f"PRAGMA table_info({TABLE_NAME})").fetchall()
    if not rows:
        return "compatible"
    columns = {row[1] for row in rows}
    if TIMESTAMP_COLUMN not in columns:
        return "rebuild"
    return "compatible"


class SqliteCacheStore(BaseCacheStore):
    """SQLite-backed key/value cache with write timestamps."""

    def __init__(
        self,
        db_path: Path | str,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._db_path = Path(db_path).expanduser()
        self._clock = clock
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheUnavailable(
                f"cannot create cache directory {self._db_path.parent}: {e}"
            ) from e
        try:
            self._conn = sqlite3.connect(str(self._db_path), timeout=_BUSY_TIMEOUT_S)
        except sqlite3.Error as e:
            raise CacheUnavailable(f"cannot open cache {self._db_path}: {e}") from e
        try:
            self._init_schema()
        except sqlite3.Error as e:
            self._conn.close()
            raise CacheUnavailable(f"cannot open cache {self._db_path}: {e}") from e

    @property
    def path(self) -> Path:
        return self._db_path

    def _init_schema(self) -> None:
        if check_schema(self._conn) == "rebuild":
            logger.info("Rebuilding outdated cache table in %s", self._db_path)
            self._conn.execute(f"DROP TABLE IF EXISTS {TABLE_NAME}")
        self._conn.execute(_SCHEMA)
        self._conn.commit()

    def get(self, key: str) -> CacheEntry | None:
        """Retrieve cache entry by key."""
        try:
            row = self._conn.execute(
                f"SELECT value, {TIMESTAMP_COLUMN} FROM {TABLE_NAME} WHERE key = ?",
                (key,),
            ).fetchone()
        except sqlite3.Error as e:
            raise CacheUnavailable(f"cache read failed for {key!r}: {e}") from e
        if row is None:
            return None
        value, created_at = row
        return CacheEntry(
            key=key,
            value=bytes(value or b""),
            created_at=datetime.fromtimestamp(created_at or 0, tz=timezone.utc),
        )

    def set(self, key: str, value: bytes) -> None:
        """Store a cache entry (upsert)."""
        try:
            self._conn.execute(
                f"INSERT OR REPLACE INTO {TABLE_NAME} (key, value, {TIMESTAMP_COLUMN})"
                " VALUES (?, ?, ?)",
                (key, sqlite3.Binary(value), int(self._clock())),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            raise CacheUnavailable(f"cache write failed for {key!r}: {e}") from e

    def delete(self, key: str) -> None:
        """Remove a cache entry."""
        try:
            self._conn.execute(f"DELETE FROM {TABLE_NAME} WHERE key = ?", (key,))
            self._conn.commit()
        except sqlite3.Error as e:
            raise CacheUnavailable(f"cache delete failed for {key!r}: {e}") from e

    def clear(self) -> None:
        """Remove every cache entry."""
        try:
            self._conn.execute(f"DELETE FROM {TABLE_NAME}")
            self._conn.commit()
        except sqlite3.Error as e:
            raise CacheUnavailable(f"cache clear failed: {e}") from e
        logger.debug("Cleared cache %s", self._db_path)

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()
