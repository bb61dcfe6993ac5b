"""In-memory cache adapter implementing ResourceCachePort."""

from __future__ import annotations

import threading

from tempurl.core.exceptions import CacheMissError
from tempurl.core.models import CacheStatistics


class MemoryCache:
    """Process-local cache holding content in a dictionary.

    Useful for tests and short-lived processes. Content does not survive
    the process.
    """

    def __init__(self, entries: dict[str, bytes] | None = None) -> None:
        """Initialize the cache, optionally pre-populated.

        Args:
            entries: Initial mapping of logical path to content.
        """
        self._entries: dict[str, bytes] = dict(entries or {})
        self._lock = threading.Lock()

    def exists(self, path: str) -> bool:
        with self._lock:
            return path in self._entries

    def get(self, path: str) -> bytes:
        with self._lock:
            try:
                return self._entries[path]
            except KeyError:
                raise CacheMissError(path) from None

    def put(self, path: str, content: bytes) -> None:
        with self._lock:
            self._entries[path] = bytes(content)

    def invalidate(self, path: str) -> None:
        with self._lock:
            self._entries.pop(path, None)

    def list_all_keys(self) -> list[str]:
        with self._lock:
            return sorted(self._entries)

    def statistics(self) -> CacheStatistics:
        with self._lock:
            return CacheStatistics(
                entry_count=len(self._entries),
                total_size=sum(len(c) for c in self._entries.values()),
            )
