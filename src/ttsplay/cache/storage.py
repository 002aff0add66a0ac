"""SQLite key-value storage implementation."""

import asyncio
import logging
import sqlite3
from pathlib import Path

from ..tts.errors import CacheWriteError
from .base import KeyValueStore

logger = logging.getLogger(__name__)


class SQLiteStore(KeyValueStore):
    """SQLite-backed durable key-value store.

    Each operation opens its own connection so the store can be shared
    between concurrent requests; blocking database work runs in a thread.
    """

    def __init__(self, path: Path, max_bytes: int | None = None):
        """Initialize storage with database at given path.

        Args:
            path: Database file path (parent directories are created)
            max_bytes: Optional quota on the total length of stored values
        """
        self.db_path = Path(path)
        self.max_bytes = max_bytes

        # Create cache directory if it doesn't exist
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._init_db()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection with WAL mode for concurrency."""
        conn = sqlite3.connect(
            str(self.db_path),
            timeout=30.0,  # 30 second timeout if locked
            check_same_thread=False,
        )
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA busy_timeout=30000")
        conn.execute("PRAGMA synchronous=NORMAL")
        return conn

    def _init_db(self) -> None:
        """Initialize database schema."""
        conn = self._get_connection()
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_sync(self, key: str) -> str | None:
        conn = self._get_connection()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return row[0] if row else None

    def _set_sync(self, key: str, value: str) -> None:
        conn = self._get_connection()
        try:
            if self.max_bytes is not None:
                (current,) = conn.execute(
                    "SELECT COALESCE(SUM(LENGTH(value)), 0) FROM kv WHERE key != ?",
                    (key,),
                ).fetchone()
                if current + len(value) > self.max_bytes:
                    raise CacheWriteError(
                        f"Store quota exceeded: {current + len(value)} > {self.max_bytes}"
                    )

            conn.execute(
                """
                INSERT INTO kv (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """,
                (key, value),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise CacheWriteError(f"Failed to write {key}: {e}", e) from e
        finally:
            conn.close()

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self._get_sync, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._set_sync, key, value)
        logger.debug(f"Stored {len(value)} chars under {key[:40]}")
