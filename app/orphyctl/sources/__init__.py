"""Installed-software data sources.

This module exports the adapters queried when building the
installed-software index.
"""

from orphyctl.sources.base import DataSourceUnavailable, NameSource
from orphyctl.sources.flatpak import FlatpakSource, list_sandbox_apps
from orphyctl.sources.launchers import (
    DesktopEntrySource,
    PortableBundleSource,
    list_desktop_entries,
    list_portable_bundles,
)
from orphyctl.sources.packages import (
    DpkgSource,
    PacmanSource,
    RpmSource,
    list_installed_packages,
)

__all__ = [
    "DataSourceUnavailable",
    "DesktopEntrySource",
    "DpkgSource",
    "FlatpakSource",
    "NameSource",
    "PacmanSource",
    "PortableBundleSource",
    "RpmSource",
    "list_desktop_entries",
    "list_installed_packages",
    "list_portable_bundles",
    "list_sandbox_apps",
]
