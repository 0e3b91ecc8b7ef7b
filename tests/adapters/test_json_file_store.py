"""Tests for the JSON file key-value store."""

import json

import pytest

from footprint.adapters.storage import JsonFileStore, LedgerRepository
from footprint.config import StorageConfig
from footprint.domain.errors import PersistenceReadError, PersistenceWriteError
from footprint.domain.models import Location
from footprint.services.ledger import VisitedLedger


@pytest.fixture
def config(tmp_path):
    return StorageConfig(data_dir=tmp_path / "nested", store_file="store.json")


@pytest.fixture
def file_store(config):
    return JsonFileStore(config)


class TestJsonFileStore:
    def test_missing_file_reads_none(self, file_store):
        assert file_store.get("anything") is None

    def test_set_creates_directory_and_file(self, file_store, config):
        file_store.set("k", "v")
        assert config.store_path.exists()
        assert json.loads(config.store_path.read_text(encoding="utf-8")) == {"k": "v"}

    def test_set_keeps_other_keys(self, file_store):
        file_store.set("a", "1")
        file_store.set("b", "2")
        file_store.set("a", "3")
        assert file_store.get("a") == "3"
        assert file_store.get("b") == "2"

    def test_non_ascii_is_stored_verbatim(self, file_store, config):
        file_store.set("k", "北京")
        assert "北京" in config.store_path.read_text(encoding="utf-8")

    def test_delete(self, file_store):
        file_store.set("k", "v")
        assert file_store.delete("k") is True
        assert file_store.delete("k") is False
        assert file_store.get("k") is None

    def test_corrupt_file_raises_on_read(self, file_store, config):
        config.store_path.parent.mkdir(parents=True)
        config.store_path.write_text("{broken", encoding="utf-8")
        with pytest.raises(PersistenceReadError):
            file_store.get("k")

    def test_non_object_file_raises_on_read(self, file_store, config):
        config.store_path.parent.mkdir(parents=True)
        config.store_path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(PersistenceReadError):
            file_store.get("k")

    def test_non_string_value_raises_on_read(self, file_store, config):
        config.store_path.parent.mkdir(parents=True)
        config.store_path.write_text('{"k": 42}', encoding="utf-8")
        with pytest.raises(PersistenceReadError):
            file_store.get("k")

    def test_corrupt_file_is_replaced_on_write(self, file_store, config):
        config.store_path.parent.mkdir(parents=True)
        config.store_path.write_text("{broken", encoding="utf-8")
        file_store.set("k", "v")
        assert file_store.get("k") == "v"

    def test_no_temp_files_left_behind(self, file_store, config):
        file_store.set("k", "v")
        file_store.set("k", "w")
        assert [p.name for p in config.store_path.parent.iterdir()] == ["store.json"]

    def test_unwritable_location_raises_write_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = JsonFileStore(StorageConfig(data_dir=blocker / "sub"))
        with pytest.raises(PersistenceWriteError):
            store.set("k", "v")


def test_ledger_survives_restart(config):
    """A new ledger over the same file sees what the previous one saved."""
    first = VisitedLedger(repository=LedgerRepository(JsonFileStore(config), key="visited"))
    first.add(Location.city("成都", 30.5728, 104.0668, "四川"))
    first.add(Location.province_named("广东"))

    second = VisitedLedger(repository=LedgerRepository(JsonFileStore(config), key="visited"))
    assert second.list() == first.list()


def test_corrupt_file_starts_empty_ledger(config):
    config.store_path.parent.mkdir(parents=True)
    config.store_path.write_text("{broken", encoding="utf-8")
    ledger = VisitedLedger(repository=LedgerRepository(JsonFileStore(config), key="visited"))
    assert ledger.list() == ()


def test_undecodable_file_raises_read_error(file_store, config):
    config.store_path.parent.mkdir(parents=True)
    config.store_path.write_bytes(b"\xff\xfe")
    with pytest.raises(PersistenceReadError):
        file_store.get("k")


@pytest.mark.parametrize("payload", [b"\xff\xfe", b'{"visited": "\xff\xfe broken"}'])
def test_undecodable_file_starts_empty_ledger_and_accepts_adds(config, payload):
    config.store_path.parent.mkdir(parents=True)
    config.store_path.write_bytes(payload)

    ledger = VisitedLedger(repository=LedgerRepository(JsonFileStore(config), key="visited"))
    assert ledger.list() == ()

    ledger.add(Location.province_named("广东"))

    reloaded = VisitedLedger(repository=LedgerRepository(JsonFileStore(config), key="visited"))
    assert [loc.name for loc in reloaded.list()] == ["广东"]
