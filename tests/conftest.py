"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from orphyctl.classifier.index import InstalledSoftwareIndex


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Fake home directory with ~/.config and ~/.local/share.

    ``Path.home()`` is patched and XDG overrides are cleared so every
    path helper resolves inside ``tmp_path``.
    """
    home_dir = tmp_path / "home"
    (home_dir / ".config").mkdir(parents=True)
    (home_dir / ".local" / "share").mkdir(parents=True)

    for var in ("XDG_CONFIG_HOME", "XDG_DATA_HOME"):
        monkeypatch.delenv(var, raising=False)

    with patch("pathlib.Path.home", return_value=home_dir):
        yield home_dir


@pytest.fixture
def mock_pacman_output() -> str:
    """Sample pacman -Qq output for testing."""
    return """firefox
htop
foo-bar-utils
python-pillow
code"""


@pytest.fixture
def mock_flatpak_output() -> str:
    """Sample flatpak list --columns=application output for testing."""
    return """com.spotify.Client
org.mozilla.Thunderbird
org.gnome.Calculator
com.obsproject.Studio"""


@pytest.fixture
def empty_index() -> InstalledSoftwareIndex:
    """Index with no installed software and no executables on PATH."""
    return InstalledSoftwareIndex.from_names(is_executable=lambda _name: False)
