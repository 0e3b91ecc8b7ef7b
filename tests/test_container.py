"""Tests for the dependency injection container."""

from unittest.mock import MagicMock

import pytest

from footprint.adapters.storage import InMemoryStore
from footprint.container import Container, get_container, reset_container
from footprint.ports.boundary import BoundarySourcePort
from footprint.ports.storage import KeyValueStorePort
from footprint.services import BoundaryDataCache, FootprintService, VisitedLedger


def test_default_wiring_shares_singletons(app_config):
    container = Container.create_default(app_config)

    service = container.resolve(FootprintService)
    assert service is container.resolve(FootprintService)
    assert service.ledger is container.resolve(VisitedLedger)
    assert container.resolve(BoundaryDataCache) is container.resolve(BoundaryDataCache)


def test_default_wiring_uses_configured_paths(app_config):
    container = Container.create_default(app_config)
    container.resolve(FootprintService).submit("成都")

    assert app_config.storage.store_path.exists()

    # A fresh container over the same directory sees the saved entry
    again = Container.create_default(app_config)
    assert [loc.name for loc in again.resolve(FootprintService).visited()] == ["成都"]


def test_overriding_a_port(app_config):
    container = Container.create_default(app_config)
    memory = InMemoryStore()
    container.register(KeyValueStorePort, lambda: memory)

    container.resolve(FootprintService).submit("广东")

    assert memory.writes == 1
    assert not app_config.storage.store_path.exists()


def test_boundary_cache_uses_registered_source(app_config):
    container = Container.create_default(app_config)
    source = MagicMock()
    source.source_id = "fake"
    source.fetch.return_value = "dataset"
    container.register(BoundarySourcePort, lambda: source)

    cache = container.resolve(BoundaryDataCache)
    assert cache.get() == "dataset"
    assert cache.get() == "dataset"
    source.fetch.assert_called_once()


def test_non_singleton_registration():
    container = Container()
    container.register(list, list, singleton=False)
    assert container.resolve(list) is not container.resolve(list)


def test_unregistered_type_raises():
    with pytest.raises(KeyError):
        Container().resolve(dict)


def test_global_container_reset(monkeypatch, app_config):
    monkeypatch.setattr("footprint.container.get_config", lambda: app_config)
    reset_container()
    first = get_container()
    assert get_container() is first
    reset_container()
    assert get_container() is not first
    reset_container()


def test_clear_all_drops_registrations(app_config):
    container = Container.create_default(app_config)
    container.clear_all()
    with pytest.raises(KeyError):
        container.resolve(FootprintService)
