"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters (storage, HTTP, caching).
"""

from .boundary import BoundarySourcePort
from .cache import CachePort
from .storage import KeyValueStorePort

__all__ = [
    "BoundarySourcePort",
    "CachePort",
    "KeyValueStorePort",
]
