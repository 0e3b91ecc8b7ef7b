"""Ledger repository - Serializes the visited list under one store key.

Stored format is a JSON array of records:

    [{"name": "北京市", "type": "city", "coordinates": [39.9, 116.4],
      "province": "北京"},
     {"name": "广东", "type": "province"}]

Loading never fails: a missing key, invalid JSON or a record that does
not match the schema yields an empty ledger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ...config import get_config
from ...domain.errors import PersistenceReadError, PersistenceWriteError
from ...domain.models import Coordinates, Location, LocationKind
from ...ports.storage import KeyValueStorePort


class LocationRecord(BaseModel):
    """Wire schema of one persisted location."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    type: Literal["city", "province"]
    coordinates: Optional[Tuple[float, float]] = None
    province: Optional[str] = None

    @classmethod
    def from_location(cls, location: Location) -> LocationRecord:
        return cls(
            name=location.name,
            type=location.kind.value,
            coordinates=location.coordinates.as_pair() if location.coordinates else None,
            province=location.province,
        )

    def to_location(self) -> Location:
        coordinates = None
        if self.coordinates is not None:
            coordinates = Coordinates(
                latitude=self.coordinates[0], longitude=self.coordinates[1]
            )
        return Location(
            name=self.name,
            kind=LocationKind(self.type),
            coordinates=coordinates,
            province=self.province,
        )


_RECORDS = TypeAdapter(List[LocationRecord])


@dataclass
class LedgerRepository:
    """Loads and saves the full ledger under a fixed key.

    Attributes:
        store: Durable key-value store
        key: Store key holding the ledger
    """

    store: KeyValueStorePort
    key: str = field(default_factory=lambda: get_config().storage.ledger_key)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> List[Location]:
        """Load the stored ledger.

        Returns:
            Locations in stored order, first occurrence of each name
            kept. Empty if nothing is stored or the data is corrupt.
        """
        try:
            return self._load()
        except PersistenceReadError as e:
            self._logger.warning(
                "Failed to parse saved locations, starting empty",
                extra={"key": self.key, "error": str(e)},
            )
            return []

    def _load(self) -> List[Location]:
        raw = self.store.get(self.key)
        if raw is None:
            self._logger.debug("No saved locations", extra={"key": self.key})
            return []

        try:
            records = _RECORDS.validate_json(raw)
            locations = [record.to_location() for record in records]
        except (ValidationError, ValueError) as e:
            raise PersistenceReadError(
                "Saved locations do not match the expected schema",
                key=self.key,
                cause=e,
            )

        seen: set[str] = set()
        unique: List[Location] = []
        for location in locations:
            if location.name in seen:
                continue
            seen.add(location.name)
            unique.append(location)

        if len(unique) != len(locations):
            self._logger.warning(
                "Dropped duplicate saved locations",
                extra={"key": self.key, "dropped": len(locations) - len(unique)},
            )

        self._logger.debug(
            "Loaded saved locations",
            extra={"key": self.key, "count": len(unique)},
        )
        return unique

    def save(self, locations: Sequence[Location]) -> None:
        """Replace the stored ledger with the given locations.

        Raises:
            PersistenceWriteError: If the store rejects the write.
        """
        records = [LocationRecord.from_location(loc) for loc in locations]
        payload = _RECORDS.dump_json(records, exclude_none=True).decode("utf-8")

        try:
            self.store.set(self.key, payload)
        except PersistenceWriteError:
            raise
        except OSError as e:
            raise PersistenceWriteError(
                "Failed to save locations", key=self.key, cause=e
            )

        self._logger.debug(
            "Saved locations",
            extra={"key": self.key, "count": len(records)},
        )
