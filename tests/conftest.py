"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from unittest.mock import MagicMock

import pytest
from winkit.models.catalog import Catalog, CatalogEntry
from winkit.operators.base import Operator
from winkit.probers.base import Prober
from winkit.utils.shell import CommandResult


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Point the config directory at an empty temporary directory."""
    config_home = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "winkit"


@pytest.fixture
def sample_catalog() -> Catalog:
    """Small catalog for planning and orchestration tests."""
    return Catalog(
        [
            CatalogEntry("chrome", "Google.Chrome", "Google Chrome"),
            CatalogEntry("firefox", "Mozilla.Firefox", "Mozilla Firefox"),
            CatalogEntry("steam", "Valve.Steam", "Steam"),
            CatalogEntry("vlc", "VideoLAN.VLC", "VLC media player"),
        ]
    )


@pytest.fixture
def mock_prober() -> MagicMock:
    """Prober that reports every package as not installed."""
    prober = MagicMock(spec=Prober)
    prober.is_installed.return_value = False
    return prober


@pytest.fixture
def mock_operator() -> MagicMock:
    """Available operator whose commands all exit with 0."""
    operator = MagicMock(spec=Operator)
    operator.name = "winget"
    operator.is_available.return_value = True
    operator.install.return_value = CommandResult(stdout="", stderr="", returncode=0)
    operator.upgrade_all.return_value = CommandResult(stdout="", stderr="", returncode=0)
    return operator


@pytest.fixture
def winget_list_hit() -> str:
    """winget list output where the queried id starts a result row."""
    return """Google.Chrome  131.0.6778.86  winget
"""


@pytest.fixture
def winget_list_table() -> str:
    """Tabular winget list output (Name, Id, Version, Available, Source)."""
    return """Name           Id             Version        Available      Source
-----------------------------------------------------------------------
Google Chrome  Google.Chrome  131.0.6778.86  131.0.6778.109 winget"""


@pytest.fixture
def winget_list_miss() -> str:
    """winget list output when nothing matches."""
    return "No installed package found matching input criteria."
