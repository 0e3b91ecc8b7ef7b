"""Footprint service - Main orchestrator for the visited-places flow.

submit(name): duplicate pre-check -> resolve -> guarded add.
clear(confirmed): wipe the ledger only after explicit confirmation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import DuplicateLocationError, FootprintError
from ..domain.models import ErrorEvent, LedgerStats, Location
from .ledger import VisitedLedger
from .resolver import LocationResolver


@dataclass
class FootprintService:
    """Service behind the "add a city" and "clear history" actions.

    Attributes:
        resolver: Name -> Location
        ledger: Visited locations
        error_display_seconds: Display time attached to error events
    """

    resolver: LocationResolver
    ledger: VisitedLedger
    error_display_seconds: float = 3.0

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def submit(self, name: str) -> Location:
        """Resolve a typed name and record it as visited.

        If the resolved location's name is already present (for
        example 广东省 after 广东), the ledger is left unchanged and
        no error is raised.

        Args:
            name: The name as typed by the user.

        Returns:
            The recorded (or already present) location.

        Raises:
            DuplicateLocationError: If the typed name is already in
                the ledger.
            LocationNotFoundError: If the name does not resolve.
        """
        query = name.strip()
        self._logger.info("Location submitted", extra={"query": query})

        if self.ledger.contains(query):
            raise DuplicateLocationError(
                f"City {query} is already added!",
                name=query,
            )

        location = self.resolver.resolve(query)
        self.ledger.add_if_absent(location)
        return location

    def submit_safe(
        self, name: str
    ) -> tuple[Optional[Location], Optional[ErrorEvent]]:
        """Submit a name, returning an error event instead of raising.

        Returns:
            Tuple of (Location or None, ErrorEvent or None).
        """
        try:
            return self.submit(name), None
        except FootprintError as e:
            self._logger.info(
                "Location rejected",
                extra={"query": name, "error": type(e).__name__},
            )
            return None, self._error_event(e, name)

    def clear(self, confirmed: bool) -> bool:
        """Clear the visited history.

        Args:
            confirmed: Whether the user confirmed the destructive action.

        Returns:
            True if the ledger was cleared.
        """
        if not confirmed:
            self._logger.debug("Clear not confirmed, ignored")
            return False
        self.ledger.clear()
        return True

    def visited(self) -> tuple[Location, ...]:
        return self.ledger.list()

    def stats(self) -> LedgerStats:
        return self.ledger.stats()

    def _error_event(self, error: FootprintError, query: str) -> ErrorEvent:
        return ErrorEvent(
            kind=type(error).__name__,
            message=error.message,
            query=query.strip(),
            display_seconds=self.error_display_seconds,
        )
