"""Boundary port - Source of the geographic boundary dataset."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import BoundaryDataset


class BoundarySourcePort(Protocol):
    """Port for fetching the boundary dataset.

    Implementation: adapters/boundary/http_source.py

    Sources do no caching; BoundaryDataCache memoizes their result.
    """

    @property
    def source_id(self) -> str:
        """Identifier of the dataset (used as cache key)."""
        ...

    def fetch(self) -> BoundaryDataset:
        """Fetch and parse the dataset.

        Raises:
            BoundaryFetchError: If the fetch or parse fails.
        """
        ...
