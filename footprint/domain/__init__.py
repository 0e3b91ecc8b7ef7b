"""Domain layer - Core models, errors and name transforms.

No external dependencies.
"""

from .errors import (
    BoundaryFetchError,
    ConfigurationError,
    DuplicateLocationError,
    FootprintError,
    LocationNotFoundError,
    PersistenceReadError,
    PersistenceWriteError,
)
from .models import (
    BoundaryDataset,
    Coordinates,
    ErrorEvent,
    LedgerStats,
    Location,
    LocationKind,
)
from .names import strip_admin_suffix, strip_suffix

__all__ = [
    # Models
    "Coordinates",
    "Location",
    "LocationKind",
    "LedgerStats",
    "ErrorEvent",
    "BoundaryDataset",
    # Names
    "strip_suffix",
    "strip_admin_suffix",
    # Errors
    "FootprintError",
    "LocationNotFoundError",
    "DuplicateLocationError",
    "PersistenceReadError",
    "PersistenceWriteError",
    "BoundaryFetchError",
    "ConfigurationError",
]
