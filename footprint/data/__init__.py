"""Static reference data (city coordinates and province aliases)."""

from .gazetteer import CITY_COORDINATES, PROVINCE_ALIASES, CityEntry

__all__ = ["CITY_COORDINATES", "PROVINCE_ALIASES", "CityEntry"]
