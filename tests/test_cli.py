"""Tests for the command-line front end."""

from unittest.mock import MagicMock

import pytest

from footprint.cli import main
from footprint.container import Container
from footprint.domain.errors import BoundaryFetchError
from footprint.domain.models import BoundaryDataset
from footprint.ports.boundary import BoundarySourcePort


@pytest.fixture
def container(app_config):
    return Container.create_default(app_config)


def test_add_and_list(container, capsys):
    assert main(["add", "北京市", "广东省"], container=container) == 0
    assert main(["list"], container=container) == 0

    out = capsys.readouterr().out
    assert "北京市 (北京)" in out
    assert "广东 (province)" in out
    assert "  1. 北京市" in out
    assert "  2. 广东" in out


def test_add_unknown_returns_error_code(container, capsys):
    assert main(["add", "Atlantis"], container=container) == 1
    assert "Atlantis" in capsys.readouterr().err


def test_list_when_empty(container, capsys):
    main(["list"], container=container)
    assert "No places visited yet." in capsys.readouterr().out


def test_stats(container, capsys):
    main(["add", "成都", "广东"], container=container)
    main(["stats"], container=container)
    out = capsys.readouterr().out
    assert "Cities:    1" in out
    assert "Provinces: 1" in out
    assert "四川、广东" in out


def test_clear_with_yes(container, capsys):
    main(["add", "成都"], container=container)
    assert main(["clear", "--yes"], container=container) == 0
    assert "Travel history cleared." in capsys.readouterr().out
    main(["list"], container=container)
    assert "No places visited yet." in capsys.readouterr().out


def test_clear_prompt_declined(container, capsys, monkeypatch):
    main(["add", "成都"], container=container)
    monkeypatch.setattr("builtins.input", lambda prompt: "n")
    main(["clear"], container=container)
    assert "Nothing cleared." in capsys.readouterr().out
    main(["list"], container=container)
    assert "成都" in capsys.readouterr().out


def test_boundary_success(container, capsys):
    source = MagicMock()
    source.source_id = "memory://china"
    source.fetch.return_value = BoundaryDataset(
        features=({"properties": {"name": "四川省"}},),
        source_url="memory://china",
    )
    container.register(BoundarySourcePort, lambda: source)

    assert main(["boundary"], container=container) == 0
    out = capsys.readouterr().out
    assert "1 features from memory://china" in out
    assert "四川省" in out


def test_boundary_failure(container, capsys):
    source = MagicMock()
    source.source_id = "memory://china"
    source.fetch.side_effect = BoundaryFetchError("Failed to load map data", url="memory://china")
    container.register(BoundarySourcePort, lambda: source)

    assert main(["boundary"], container=container) == 1
    assert "Failed to load map data" in capsys.readouterr().err
