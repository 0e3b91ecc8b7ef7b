"""Typed domain errors for the footprint ledger.

All errors inherit from FootprintError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class FootprintError(Exception):
    """Base error for the footprint domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class LocationNotFoundError(FootprintError):
    """No city, province or alias matched the query.

    Attributes:
        query: The original user query, kept for display
    """

    query: str = ""


@dataclass
class DuplicateLocationError(FootprintError):
    """A location with the same name is already in the ledger.

    Attributes:
        name: The duplicated location name
    """

    name: str = ""


@dataclass
class PersistenceReadError(FootprintError):
    """Stored ledger state is unreadable or does not match the schema.

    Never surfaced to callers: the repository logs it and falls back
    to an empty ledger.

    Attributes:
        key: Store key that was being read
    """

    key: str = ""


@dataclass
class PersistenceWriteError(FootprintError):
    """The ledger could not be written to the store.

    Attributes:
        key: Store key that was being written
    """

    key: str = ""


@dataclass
class BoundaryFetchError(FootprintError):
    """Fetching or parsing the boundary dataset failed.

    Attributes:
        url: The dataset URL
        status_code: HTTP status if a response was received
    """

    url: str = ""
    status_code: Optional[int] = None


@dataclass
class ConfigurationError(FootprintError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected value or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
