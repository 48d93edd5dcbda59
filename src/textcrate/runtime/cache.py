"""Thread-safe blueprint cache keyed by call site.

Entries are created lazily and never evicted: a repository declares a
fixed, small set of call sites, so the cache is bounded by the
declaration itself.

Thread Safety:
    Double-checked get-or-create under an RLock. The blueprint is built
    outside the lock so user formatter constructors never run while it is
    held; when two threads race, the first insert wins and both receive
    that instance.

Python 3.13+.
"""

from collections.abc import Callable, Hashable
from threading import RLock

__all__ = ["BlueprintCache"]


class BlueprintCache[K: Hashable, V]:
    """Get-or-create mapping with hit/miss statistics.

    Example:
        >>> cache: BlueprintCache[str, int] = BlueprintCache()
        >>> cache.get_or_create("a", lambda: 1)
        1
        >>> cache.get_or_create("a", lambda: 2)
        1
        >>> cache.get_stats()
        {'size': 1, 'hits': 1, 'misses': 1}
    """

    __slots__ = ("_entries", "_hits", "_lock", "_misses")

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get_or_create(self, key: K, build: Callable[[], V]) -> V:
        """Return the cached value for key, building it on first use.

        Args:
            key: Cache key
            build: Zero-argument callable producing the value

        Returns:
            The single cached value for key
        """
        with self._lock:
            if key in self._entries:
                self._hits += 1
                return self._entries[key]
            self._misses += 1

        value = build()

        with self._lock:
            # Another thread may have inserted while we were building
            existing = self._entries.get(key)
            if existing is not None:
                return existing
            self._entries[key] = value
            return value

    def get(self, key: K) -> V | None:
        with self._lock:
            return self._entries.get(key)

    def clear(self) -> None:
        """Drop all entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dict with keys: size, hits, misses
        """
        with self._lock:
            return {"size": len(self._entries), "hits": self._hits, "misses": self._misses}

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
