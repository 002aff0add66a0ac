"""Durable key-value storage for ttsplay audio and settings."""

from pathlib import Path

from .base import KeyValueStore
from .memory import MemoryStore
from .storage import SQLiteStore

__all__ = ["KeyValueStore", "MemoryStore", "SQLiteStore", "get_cache_dir"]


def get_cache_dir() -> Path:
    """Get or create the ttsplay cache directory.

    Creates ~/.cache/ttsplay/ if it doesn't exist.

    Returns:
        Path to the cache directory
    """
    cache_dir = Path.home() / ".cache" / "ttsplay"
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir
