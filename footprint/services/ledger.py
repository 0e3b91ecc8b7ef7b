"""Visited ledger - Ordered, name-unique list of visited locations.

Every mutation is written through to the repository before the call
returns. A failed write is logged and the in-memory list stays
authoritative until the next successful save.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterator, List

from ..adapters.storage.ledger_repository import LedgerRepository
from ..domain.errors import DuplicateLocationError, PersistenceWriteError
from ..domain.models import LedgerStats, Location, LocationKind


@dataclass
class VisitedLedger:
    """The user's visited locations, in insertion order.

    The duplicate check and the append happen under one lock, so
    concurrent add() calls for the same name admit exactly one.

    Attributes:
        repository: Where the ledger is loaded from and mirrored to
    """

    repository: LedgerRepository

    _entries: List[Location] = field(init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._entries = self.repository.load()
        self._logger.info(
            "Ledger initialized", extra={"entries": len(self._entries)}
        )

    def add(self, location: Location) -> None:
        """Append a location.

        Raises:
            DuplicateLocationError: If a location with the same name
                is already present.
        """
        with self._lock:
            if self._index_of(location.name) is not None:
                raise DuplicateLocationError(
                    f"City {location.name} is already added!",
                    name=location.name,
                )
            self._entries.append(location)
            self._persist()

        self._logger.info(
            "Location added",
            extra={"location": location.name, "kind": location.kind.value},
        )

    def add_if_absent(self, location: Location) -> bool:
        """Append a location unless its name is already present.

        Returns:
            True if the location was appended.
        """
        try:
            self.add(location)
        except DuplicateLocationError:
            self._logger.debug(
                "Location already present, ignored",
                extra={"location": location.name},
            )
            return False
        return True

    def clear(self) -> None:
        """Remove every location and persist the empty ledger."""
        with self._lock:
            removed = len(self._entries)
            self._entries = []
            self._persist()
        self._logger.info("Ledger cleared", extra={"removed": removed})

    def list(self) -> tuple[Location, ...]:
        """Return a snapshot of the ledger in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def contains(self, name: str) -> bool:
        with self._lock:
            return self._index_of(name) is not None

    def get(self, name: str) -> Location:
        """Return the entry with the given name.

        Raises:
            KeyError: If no entry has that name.
        """
        with self._lock:
            index = self._index_of(name)
            if index is None:
                raise KeyError(name)
            return self._entries[index]

    def stats(self) -> LedgerStats:
        entries = self.list()
        cities = [loc for loc in entries if loc.kind is LocationKind.CITY]
        touched = {loc.province for loc in cities if loc.province}
        touched.update(loc.name for loc in entries if loc.kind is LocationKind.PROVINCE)
        return LedgerStats(
            cities=len(cities),
            provinces=len(entries) - len(cities),
            provinces_touched=tuple(sorted(touched)),
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[Location]:
        return iter(self.list())

    def _index_of(self, name: str) -> int | None:
        for i, entry in enumerate(self._entries):
            if entry.name == name:
                return i
        return None

    def _persist(self) -> None:
        try:
            self.repository.save(self._entries)
        except PersistenceWriteError as e:
            self._logger.error(
                "Failed to save ledger, keeping in-memory state",
                extra={"entries": len(self._entries), "error": str(e)},
            )
