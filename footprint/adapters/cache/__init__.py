"""Cache adapters - Implementations of the CachePort.

Available implementations:
- InMemoryCache: Thread-safe in-memory cache with in-flight de-duplication
"""

from .memory_cache import InMemoryCache

__all__ = ["InMemoryCache"]
