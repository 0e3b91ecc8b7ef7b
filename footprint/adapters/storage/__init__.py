"""Storage adapters - Implementations of KeyValueStorePort and the ledger repository.

Available implementations:
- JsonFileStore: All keys in one JSON file, atomically replaced on write
- InMemoryStore: Dict-backed store for tests
- LedgerRepository: Serializes the visited ledger under one store key
"""

from .json_file_store import JsonFileStore
from .ledger_repository import LedgerRepository, LocationRecord
from .memory_store import InMemoryStore

__all__ = ["JsonFileStore", "InMemoryStore", "LedgerRepository", "LocationRecord"]
