"""HTTP boundary dataset source.

Fetches the boundary GeoJSON document with requests and turns every
failure mode (connection error, timeout, non-2xx status, invalid JSON,
wrong document shape) into a BoundaryFetchError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import requests

from ...config import BoundaryConfig, get_config
from ...domain.errors import BoundaryFetchError
from ...domain.models import BoundaryDataset


@dataclass
class HttpBoundarySource:
    """Boundary source backed by a single GET request.

    Implements BoundarySourcePort. No caching happens here.

    Attributes:
        config: Boundary configuration (URL, timeout, user agent)
        session: Optional requests session (injected in tests)
    """

    config: BoundaryConfig = field(default_factory=lambda: get_config().boundary)
    session: Optional[requests.Session] = field(default=None, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def source_id(self) -> str:
        return self.config.url

    def _get_session(self) -> requests.Session:
        if self.session is None:
            self.session = requests.Session()
            self.session.headers["User-Agent"] = self.config.user_agent
        return self.session

    def fetch(self) -> BoundaryDataset:
        """Download and parse the boundary dataset.

        Returns:
            The parsed dataset.

        Raises:
            BoundaryFetchError: On any network, status or parse failure.
        """
        url = self.config.url
        self._logger.info("Fetching boundary dataset", extra={"url": url})

        try:
            response = self._get_session().get(
                url, timeout=self.config.timeout_seconds
            )
        except requests.RequestException as e:
            self._logger.error(
                "Boundary fetch failed",
                extra={"url": url, "error": str(e)},
            )
            raise BoundaryFetchError("Failed to load map data", url=url, cause=e)

        if not response.ok:
            self._logger.error(
                "Boundary fetch returned error status",
                extra={"url": url, "status": response.status_code},
            )
            raise BoundaryFetchError(
                f"Failed to load map data (HTTP {response.status_code})",
                url=url,
                status_code=response.status_code,
            )

        try:
            dataset = BoundaryDataset.from_geojson(response.json(), source_url=url)
        except ValueError as e:
            # requests' JSONDecodeError is a ValueError too
            raise BoundaryFetchError(
                "Map data is not a valid GeoJSON FeatureCollection",
                url=url,
                status_code=response.status_code,
                cause=e,
            )

        self._logger.info(
            "Boundary dataset loaded",
            extra={"url": url, "features": len(dataset)},
        )
        return dataset
