"""In-memory key-value store.

Nothing survives the process. Use it in tests, or for throwaway
sessions where the ledger must not touch disk.

Example:
    @pytest.fixture
    def store():
        return InMemoryStore()
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class InMemoryStore:
    """Dict-backed implementation of KeyValueStorePort."""

    _data: Dict[str, str] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    # Number of set() calls, handy for write-through assertions
    writes: int = field(default=0, repr=False)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value
            self.writes += 1

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None
