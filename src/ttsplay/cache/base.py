"""Abstract base class for string key-value stores.

The synthesis pipeline only ever needs get and upsert, so stores can be
swapped for in-memory doubles in tests.
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """String-keyed, string-valued store that persists across runs.

    Writes are idempotent upserts: writing the same value under the same key
    twice is harmless, so concurrent writers need no locking.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Insert or replace the value stored under key.

        Raises:
            CacheWriteError: If the store refuses the write (e.g. quota exceeded)
        """
        pass

    def close(self) -> None:
        """Release any resources held by the store."""
        pass
