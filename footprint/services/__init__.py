"""Services layer - Application orchestration.

Available services:
- LocationResolver: Name -> City/Province against the static tables
- VisitedLedger: Ordered, de-duplicated, write-through visited list
- BoundaryDataCache: Once-per-process boundary dataset
- FootprintService: The add/clear flow used by front ends
"""

from .boundary import BoundaryDataCache
from .footprint import FootprintService
from .ledger import VisitedLedger
from .resolver import LocationResolver

__all__ = [
    "BoundaryDataCache",
    "FootprintService",
    "LocationResolver",
    "VisitedLedger",
]
