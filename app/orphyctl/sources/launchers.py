"""Launcher directory sources.

Derives installed application names from desktop entry files and from
AppImage bundles kept in the user's applications directory. Both only
look at the top level of their directories.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from orphyctl.core.paths import expand_home
from orphyctl.sources.base import DataSourceUnavailable, NameSource

logger = logging.getLogger(__name__)


def _list_files(directory: Path) -> list[Path]:
    """List regular files directly inside ``directory``, sorted.

    Raises:
        DataSourceUnavailable: If the directory is missing or unreadable.
    """
    if not directory.is_dir():
        msg = f"Directory does not exist: {directory}"
        raise DataSourceUnavailable(msg)

    try:
        return sorted(entry for entry in directory.iterdir() if entry.is_file())
    except OSError as e:
        msg = f"Cannot list {directory}: {e}"
        raise DataSourceUnavailable(msg) from e


class DesktopEntrySource(NameSource):
    """Source for ``*.desktop`` launchers in one or more directories.

    Names are the file basenames without the ``.desktop`` suffix, e.g.
    ``org.gnome.Nautilus``. A missing directory contributes nothing.
    """

    def __init__(self, directories: Sequence[str]) -> None:
        self._directories = [Path(expand_home(d)) for d in directories]

    @property
    def name(self) -> str:
        """Return the source identifier."""
        return "desktop-entries"

    def is_available(self) -> bool:
        """Check if at least one launcher directory exists."""
        return any(d.is_dir() for d in self._directories)

    def list_names(self) -> list[str]:
        """List desktop entry names across all directories.

        Raises:
            DataSourceUnavailable: If none of the directories exist.
        """
        if not self.is_available():
            msg = "No desktop entry directory found"
            raise DataSourceUnavailable(msg)

        names: list[str] = []
        for directory in self._directories:
            try:
                files = _list_files(directory)
            except DataSourceUnavailable as e:
                logger.debug("Skipping desktop directory: %s", e)
                continue
            names.extend(f.name.removesuffix(".desktop") for f in files if f.suffix == ".desktop")
        return names


class PortableBundleSource(NameSource):
    """Source for AppImage bundles in the user's applications directory.

    Matches ``*.AppImage`` case-insensitively and strips the extension,
    e.g. ``Obsidian-1.5.3.AppImage`` becomes ``Obsidian-1.5.3``.
    """

    def __init__(self, directory: str) -> None:
        self._directory = Path(expand_home(directory))

    @property
    def name(self) -> str:
        """Return the source identifier."""
        return "appimages"

    def is_available(self) -> bool:
        """Check if the applications directory exists."""
        return self._directory.is_dir()

    def list_names(self) -> list[str]:
        """List AppImage names without extension.

        Raises:
            DataSourceUnavailable: If the directory is missing.
        """
        return [f.stem for f in _list_files(self._directory) if f.suffix.lower() == ".appimage"]


def list_desktop_entries(directories: Sequence[str]) -> list[str]:
    """List desktop entry names, or an empty list if no directory exists."""
    return DesktopEntrySource(directories).list_names_or_empty()


def list_portable_bundles(directory: str) -> list[str]:
    """List AppImage names, or an empty list if the directory is missing."""
    return PortableBundleSource(directory).list_names_or_empty()
