"""Cache port - Injectable memoization abstraction.

Used by BoundaryDataCache to hold the dataset for the process
lifetime and to de-duplicate concurrent fetches.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementation: adapters/cache/memory_cache.py (InMemoryCache)
    """

    def get(self, key: str) -> Optional[T]:
        """Get a value from the cache.

        Returns:
            The cached value, or None if not found.
        """
        ...

    def set(self, key: str, value: T) -> None:
        """Set a value in the cache."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Concurrent callers for the same missing key share a single
        call to compute_fn. If it raises, nothing is cached and every
        waiting caller receives the same exception.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...
