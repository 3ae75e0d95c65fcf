"""Thread-safe cache of constructed formatters.

Each resolver owns one cache mapping a canonical string key to the
formatter built for it, so two requests that resolve to the same
configuration share one formatter.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - Unbounded by default; optional LRU eviction via OrderedDict
    - Keys are plain strings built by the resolvers
    - Construction happens under the lock: a key is never built twice

Thread Safety:
    All operations protected by RLock. The lock is exposed so a resolver
    can hold it across configure-then-format sequences on mutable
    formatters.

Python 3.13+.
"""

from collections import OrderedDict
from collections.abc import Callable
from threading import RLock

__all__ = ["FormatterCache"]


class FormatterCache[T]:
    """Thread-safe key -> formatter cache with construction counting.

    Attributes:
        maxsize: Maximum number of entries (None = unbounded)
        hits: Lookups served from the cache
        misses: Lookups that had to construct
        constructions: Formatters built (equals misses unless a factory raised)
    """

    __slots__ = ("_constructions", "_entries", "_hits", "_lock", "_maxsize", "_misses")

    def __init__(self, maxsize: int | None = None) -> None:
        """Initialize formatter cache.

        Args:
            maxsize: Maximum number of entries, None for unbounded

        Raises:
            ValueError: If maxsize is not positive
        """
        if maxsize is not None and maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._entries: OrderedDict[str, T] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0
        self._constructions = 0

    @property
    def lock(self) -> RLock:
        """The cache lock (reentrant)."""
        return self._lock

    def get_or_create(self, key: str, factory: Callable[[], T]) -> T:
        """Return the formatter cached under ``key``, building it on a miss.

        Thread-safe. The factory runs under the cache lock, so concurrent
        callers with the same key get the same instance.

        Args:
            key: Canonical configuration key
            factory: Zero-argument constructor for the formatter

        Returns:
            Cached or freshly constructed formatter
        """
        with self._lock:
            if key in self._entries:
                if self._maxsize is not None:
                    self._entries.move_to_end(key)
                self._hits += 1
                return self._entries[key]

            self._misses += 1
            value = factory()
            self._constructions += 1

            if self._maxsize is not None and len(self._entries) >= self._maxsize:
                self._entries.popitem(last=False)
            self._entries[key] = value
            return value

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        """Drop all cached formatters and reset metrics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._constructions = 0

    @property
    def constructions(self) -> int:
        """Number of formatters built since the last clear."""
        with self._lock:
            return self._constructions

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        with self._lock:
            return self._misses

    def get_stats(self) -> dict[str, int | float | None]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached formatters
            - maxsize (int | None): Capacity, None when unbounded
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - constructions (int): Number of formatters built
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._entries),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "constructions": self._constructions,
                "hit_rate": round(hit_rate, 2),
            }
