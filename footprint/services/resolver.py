"""Location resolver - Turns a typed name into a City or Province.

Matching order (first match wins):
1. The query itself in the city table
2. The query without its 市 suffix in the city table
3. The query as a province: an alias key, a canonical short name, or
   a canonical short name once its admin suffix is removed

City names shadow identical province names: 北京 and 吉林 resolve
as cities, 吉林省 as a province.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional

from ..data.gazetteer import CITY_COORDINATES, PROVINCE_ALIASES, CityEntry
from ..domain.errors import LocationNotFoundError
from ..domain.models import Location
from ..domain.names import strip_admin_suffix, strip_suffix


@dataclass
class LocationResolver:
    """Table-driven, network-free resolver.

    Attributes:
        cities: City name -> coordinates and containing province
        province_aliases: Province spelling -> canonical short name
    """

    cities: Mapping[str, CityEntry] = field(default_factory=lambda: CITY_COORDINATES)
    province_aliases: Mapping[str, str] = field(
        default_factory=lambda: PROVINCE_ALIASES
    )

    _canonical: FrozenSet[str] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._canonical = frozenset(self.province_aliases.values())
        self._logger = logging.getLogger(__name__)

    def resolve(self, query: str) -> Location:
        """Resolve a user query.

        Args:
            query: The name as typed (callers trim whitespace).

        Returns:
            A City location named after the query, or a Province
            location named after the canonical short name.

        Raises:
            LocationNotFoundError: If nothing matches.
        """
        if not query or not query.strip():
            raise LocationNotFoundError("Please enter a city name", query=query)

        city = self._match_city(query)
        if city is not None:
            return city

        province = self._match_province(query)
        if province is not None:
            return province

        self._logger.info("No location matched", extra={"query": query})
        raise LocationNotFoundError(
            f"City '{query}' not found. Please try a major city.",
            query=query,
        )

    def _match_city(self, query: str) -> Optional[Location]:
        entry = self.cities.get(query)
        if entry is None:
            entry = self.cities.get(strip_suffix(query))
        if entry is None:
            return None

        latitude, longitude = entry["coordinates"]
        self._logger.debug(
            "Resolved city",
            extra={"query": query, "province": entry["province"]},
        )
        return Location.city(
            name=query,
            latitude=latitude,
            longitude=longitude,
            province=entry["province"],
        )

    def _match_province(self, query: str) -> Optional[Location]:
        stripped = strip_admin_suffix(query)

        if query in self.province_aliases:
            canonical = self.province_aliases[query]
        elif query in self._canonical:
            canonical = query
        elif stripped in self._canonical:
            canonical = stripped
        else:
            return None

        self._logger.debug(
            "Resolved province",
            extra={"query": query, "canonical": canonical},
        )
        return Location.province_named(canonical)

    def is_known(self, query: str) -> bool:
        """Check whether a query would resolve, without raising."""
        try:
            self.resolve(query)
        except LocationNotFoundError:
            return False
        return True
