"""Boundary data cache - Fetch the boundary dataset at most once.

One instance is created per process by the container and injected
into whatever needs the dataset.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..adapters.cache.memory_cache import InMemoryCache
from ..domain.errors import BoundaryFetchError
from ..domain.models import BoundaryDataset
from ..ports.boundary import BoundarySourcePort
from ..ports.cache import CachePort


@dataclass
class BoundaryDataCache:
    """Memoizes the boundary dataset for the process lifetime.

    - Success is cached and never refreshed.
    - Failure is not cached: the next get() fetches again.
    - Concurrent get() calls share one in-flight fetch and all see the
      same dataset or the same BoundaryFetchError.

    Attributes:
        source: Where the dataset comes from
        cache: Backing cache (single-flight)
    """

    source: BoundarySourcePort
    cache: CachePort[BoundaryDataset] = field(
        default_factory=lambda: InMemoryCache(name="boundary")
    )

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def get(self) -> BoundaryDataset:
        """Return the dataset, fetching it on first use.

        Raises:
            BoundaryFetchError: If the fetch fails.
        """
        try:
            return self.cache.get_or_compute(self.source.source_id, self.source.fetch)
        except BoundaryFetchError:
            raise
        except Exception as e:
            self._logger.exception("Unexpected error fetching boundary data")
            raise BoundaryFetchError(
                "Failed to load map data",
                url=self.source.source_id,
                cause=e,
            )

    @property
    def is_loaded(self) -> bool:
        return self.cache.get(self.source.source_id) is not None
