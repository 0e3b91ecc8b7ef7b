"""Boundary adapters - Implementations of BoundarySourcePort.

Available implementations:
- HttpBoundarySource: Fetches the GeoJSON document over HTTP
"""

from .http_source import HttpBoundarySource

__all__ = ["HttpBoundarySource"]
