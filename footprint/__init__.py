"""Top-level package for the footprint ledger.

Resolves typed Chinese city and province names against a static
gazetteer, keeps an ordered, de-duplicated list of visited places and
persists it across sessions. The boundary dataset used by map front
ends is fetched once per process and shared.
"""

__version__ = "0.1.0"
