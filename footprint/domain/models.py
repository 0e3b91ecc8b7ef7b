"""Immutable domain models for the footprint ledger.

All models are frozen dataclasses with slots. They have no external
dependencies and carry the invariants of the ledger's value types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Mapping, Optional


class LocationKind(Enum):
    """Kind of a resolved location.

    Values match the ``type`` field of the persisted records.
    """

    CITY = "city"
    PROVINCE = "province"


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    def as_pair(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Location:
    """A resolved city or province.

    Two locations are duplicates in the ledger iff their names are equal.

    Attributes:
        name: Display name (user query for cities, canonical short
            name for provinces)
        kind: City or province
        coordinates: Present for cities, absent for provinces
        province: Containing province, present for cities
    """

    name: str
    kind: LocationKind
    coordinates: Optional[Coordinates] = None
    province: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Location name must not be empty")
        if self.kind is LocationKind.CITY and self.coordinates is None:
            raise ValueError(f"City '{self.name}' requires coordinates")
        if self.kind is LocationKind.PROVINCE and self.coordinates is not None:
            raise ValueError(f"Province '{self.name}' must not carry coordinates")

    @classmethod
    def city(
        cls, name: str, latitude: float, longitude: float, province: str
    ) -> Location:
        return cls(
            name=name,
            kind=LocationKind.CITY,
            coordinates=Coordinates(latitude=latitude, longitude=longitude),
            province=province,
        )

    @classmethod
    def province_named(cls, name: str) -> Location:
        return cls(name=name, kind=LocationKind.PROVINCE)

    @property
    def is_city(self) -> bool:
        return self.kind is LocationKind.CITY


@dataclass(frozen=True, slots=True)
class LedgerStats:
    """Summary of the visited ledger.

    Attributes:
        cities: Number of city entries
        provinces: Number of province entries
        provinces_touched: Provinces added directly or containing an
            added city, sorted
    """

    cities: int = 0
    provinces: int = 0
    provinces_touched: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return self.cities + self.provinces


@dataclass(frozen=True, slots=True)
class ErrorEvent:
    """A user-facing error message with a display deadline.

    The UI decides whether to honour the deadline; the core only
    timestamps the event.

    Attributes:
        kind: Error class name (e.g. 'LocationNotFoundError')
        message: Message to show
        query: The input that triggered the error
        occurred_at: When the error was produced (UTC)
        display_seconds: How long the message should stay visible
    """

    kind: str
    message: str
    query: str = ""
    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    display_seconds: float = 3.0

    @property
    def expires_at(self) -> datetime:
        return self.occurred_at + timedelta(seconds=self.display_seconds)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check whether the message should no longer be displayed."""
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at


@dataclass(frozen=True, slots=True)
class BoundaryDataset:
    """Geographic boundary document (a GeoJSON FeatureCollection).

    Attributes:
        features: GeoJSON feature objects
        source_url: Where the document was fetched from
    """

    features: tuple[Mapping[str, Any], ...]
    source_url: str = ""

    @classmethod
    def from_geojson(cls, document: Any, source_url: str = "") -> BoundaryDataset:
        """Build a dataset from a decoded GeoJSON document.

        Raises:
            ValueError: If the document is not a FeatureCollection.
        """
        if not isinstance(document, Mapping):
            raise ValueError("Boundary document must be a JSON object")
        if document.get("type") != "FeatureCollection":
            raise ValueError(
                f"Expected a FeatureCollection, got {document.get('type')!r}"
            )
        features = document.get("features")
        if not isinstance(features, list):
            raise ValueError("FeatureCollection has no 'features' list")
        for index, feature in enumerate(features):
            if not isinstance(feature, Mapping):
                raise ValueError(f"Feature {index} is not a JSON object")
        return cls(features=tuple(features), source_url=source_url)

    def feature_names(self) -> list[str]:
        """Return the ``properties.name`` of each named feature."""
        names = []
        for feature in self.features:
            properties = feature.get("properties")
            if not isinstance(properties, Mapping):
                continue
            name = properties.get("name")
            if name:
                names.append(str(name))
        return names

    def __len__(self) -> int:
        return len(self.features)
