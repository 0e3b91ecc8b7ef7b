"""JSON file key-value store.

All keys live in one JSON object on disk. Writes go to a temporary
file in the same directory that is then moved over the original, so a
crash mid-write leaves the previous contents intact.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from ...config import StorageConfig, get_config
from ...domain.errors import PersistenceReadError, PersistenceWriteError


@dataclass
class JsonFileStore:
    """Durable key-value store backed by a single JSON file.

    Implements KeyValueStorePort.

    Attributes:
        config: Storage configuration (data dir, file name)
    """

    config: StorageConfig = field(default_factory=lambda: get_config().storage)

    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def path(self) -> Path:
        return self.config.store_path

    def get(self, key: str) -> Optional[str]:
        """Read the value stored under a key.

        Raises:
            PersistenceReadError: If the store file exists but cannot
                be read or decoded.
        """
        with self._lock:
            value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise PersistenceReadError(
                f"Stored value for '{key}' is not a string",
                key=key,
            )
        return value

    def set(self, key: str, value: str) -> None:
        """Overwrite the value stored under a key.

        Raises:
            PersistenceWriteError: If the file cannot be written.
        """
        with self._lock:
            try:
                data = self._read_all()
            except PersistenceReadError as e:
                # A corrupt store is replaced rather than blocking writes
                self._logger.warning(
                    "Replacing unreadable store file",
                    extra={"path": str(self.path), "error": str(e)},
                )
                data = {}
            data[key] = value
            self._write_all(data, key)

    def delete(self, key: str) -> bool:
        with self._lock:
            data = self._read_all()
            if key not in data:
                return False
            del data[key]
            self._write_all(data, key)
            return True

    def _read_all(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise PersistenceReadError(
                f"Cannot read store file {self.path}",
                key="*",
                cause=e,
            )

        if not isinstance(data, dict):
            raise PersistenceReadError(
                f"Store file {self.path} does not contain a JSON object",
                key="*",
            )
        return data

    def _write_all(self, data: Dict[str, object], key: str) -> None:
        tmp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=".store-", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise PersistenceWriteError(
                f"Cannot write store file {self.path}",
                key=key,
                cause=e,
            )
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        self._logger.debug(
            "Store written",
            extra={"path": str(self.path), "key": key, "keys": len(data)},
        )
