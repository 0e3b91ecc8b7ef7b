"""Shared fixtures for the footprint test suite."""

import pytest

from footprint.adapters.storage import InMemoryStore, LedgerRepository
from footprint.config import AppConfig, BoundaryConfig, StorageConfig
from footprint.services import FootprintService, LocationResolver, VisitedLedger

LEDGER_KEY = "test_visited_cities"


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def repository(store):
    return LedgerRepository(store=store, key=LEDGER_KEY)


@pytest.fixture
def ledger(repository):
    return VisitedLedger(repository=repository)


@pytest.fixture
def resolver():
    return LocationResolver()


@pytest.fixture
def service(resolver, ledger):
    return FootprintService(resolver=resolver, ledger=ledger, error_display_seconds=3.0)


@pytest.fixture
def app_config(tmp_path):
    """Configuration pointing every file at a temporary directory."""
    return AppConfig(
        storage=StorageConfig(data_dir=tmp_path, ledger_key=LEDGER_KEY),
        boundary=BoundaryConfig(url="https://example.test/china.json"),
    )
