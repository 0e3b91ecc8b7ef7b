"""Storage port - Durable key-value store abstraction.

The ledger is mirrored under a single key as a JSON string; the store
itself knows nothing about locations.
"""

from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorePort(Protocol):
    """Port for a durable string key-value store.

    Implementations:
    - adapters/storage/json_file_store.py (JsonFileStore) - Production
    - adapters/storage/memory_store.py (InMemoryStore) - Testing
    """

    def get(self, key: str) -> Optional[str]:
        """Read the value stored under a key.

        Args:
            key: The store key.

        Returns:
            The stored string, or None if the key is absent.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Overwrite the value stored under a key.

        Args:
            key: The store key.
            value: The string to store.
        """
        ...

    def delete(self, key: str) -> bool:
        """Remove a key.

        Returns:
            True if the key existed.
        """
        ...
