"""Thread-safe in-memory cache with in-flight de-duplication.

Only successful computations are stored. While a value is being
computed, other callers asking for the same key wait on the same
Future instead of starting a second computation.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """In-memory cache without expiry.

    Implements CachePort. Entries live until clear() is called.

    Attributes:
        name: Cache name for logging

    Example:
        cache = InMemoryCache[BoundaryDataset](name="boundary")
        dataset = cache.get_or_compute(url, source.fetch)
    """

    name: str = "cache"

    _store: Dict[str, Any] = field(default_factory=dict, repr=False)
    _inflight: Dict[str, Future[Any]] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Statistics
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)
    _computations: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            if key in self._store:
                self._hits += 1
                return self._store[key]
            self._misses += 1
            return None

    def set(self, key: str, value: T) -> None:
        with self._lock:
            self._store[key] = value
            self._logger.debug("Cache entry set", extra={"key": key})

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.

        Raises:
            Exception: Whatever compute_fn raised, re-raised in every
                caller that was waiting on the same computation.
        """
        with self._lock:
            if key in self._store:
                self._hits += 1
                self._logger.debug("Cache hit", extra={"key": key})
                return self._store[key]

            self._misses += 1
            pending = self._inflight.get(key)
            if pending is None:
                pending = Future()
                self._inflight[key] = pending
                owner = True
            else:
                owner = False

        if not owner:
            self._logger.debug("Waiting on in-flight computation", extra={"key": key})
            return pending.result()

        # Compute outside the lock so waiters are not blocked on it
        self._logger.debug("Cache miss, computing", extra={"key": key})
        try:
            value = compute_fn()
        except BaseException as e:
            with self._lock:
                self._computations += 1
                del self._inflight[key]
            pending.set_exception(e)
            self._logger.debug(
                "Computation failed, not cached",
                extra={"key": key, "error": str(e)},
            )
            raise

        with self._lock:
            self._computations += 1
            self._store[key] = value
            del self._inflight[key]
        pending.set_result(value)
        return value

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._store

    def clear(self) -> int:
        """Clear all entries from the cache.

        In-flight computations are unaffected.

        Returns:
            Number of entries that were cleared.
        """
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return cache statistics.

        Returns:
            Dictionary with hit/miss/computation counts and size.
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "computations": self._computations,
                "hit_rate_percent": round(hit_rate, 1),
            }
