"""In-process key-value store."""

from ..tts.errors import CacheWriteError
from .base import KeyValueStore


class MemoryStore(KeyValueStore):
    """Dict-backed store with an optional size quota.

    Args:
        max_bytes: Maximum total length of stored values; None means unlimited
    """

    def __init__(self, max_bytes: int | None = None) -> None:
        self.max_bytes = max_bytes
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.max_bytes is not None:
            current = sum(len(v) for k, v in self._data.items() if k != key)
            if current + len(value) > self.max_bytes:
                raise CacheWriteError(
                    f"Store quota exceeded: {current + len(value)} > {self.max_bytes}"
                )
        self._data[key] = value

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
