"""Installed-software index.

Holds the normalized names of everything installed on the system,
gathered once per run from the data sources and shared read-only by
every classification.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from orphyctl.classifier.normalize import normalize
from orphyctl.sources.base import DataSourceUnavailable
from orphyctl.sources.flatpak import FlatpakSource
from orphyctl.sources.launchers import DesktopEntrySource, PortableBundleSource
from orphyctl.sources.packages import list_installed_packages
from orphyctl.utils.shell import command_exists

logger = logging.getLogger(__name__)


def _normalized(names: Iterable[str]) -> tuple[str, ...]:
    """Normalize and deduplicate names, keeping first-seen order."""
    return tuple(dict.fromkeys(normalize(n) for n in names if n))


@dataclass(frozen=True, slots=True)
class InstalledSoftwareIndex:
    """Immutable collections of normalized installed-software names.

    Attributes:
        packages: Package names for exact lookup.
        package_names: Package names for substring search.
        sandbox_apps: Flatpak app ids.
        desktop_entries: Desktop launcher names.
        portable_bundles: AppImage names.
        is_executable: Reports whether a name is a runnable command on PATH.
    """

    packages: frozenset[str] = frozenset()
    package_names: tuple[str, ...] = ()
    sandbox_apps: tuple[str, ...] = ()
    desktop_entries: tuple[str, ...] = ()
    portable_bundles: tuple[str, ...] = ()
    is_executable: Callable[[str], bool] = command_exists

    @classmethod
    def from_names(
        cls,
        *,
        packages: Iterable[str] = (),
        sandbox_apps: Iterable[str] = (),
        desktop_entries: Iterable[str] = (),
        portable_bundles: Iterable[str] = (),
        is_executable: Callable[[str], bool] = command_exists,
    ) -> "InstalledSoftwareIndex":
        """Build an index from raw (un-normalized) names.

        Args:
            packages: Installed package names.
            sandbox_apps: Installed Flatpak app ids.
            desktop_entries: Desktop launcher names.
            portable_bundles: AppImage names.
            is_executable: PATH lookup used by the executable rule.

        Returns:
            InstalledSoftwareIndex with every name normalized.
        """
        package_names = _normalized(packages)
        return cls(
            packages=frozenset(package_names),
            package_names=package_names,
            sandbox_apps=_normalized(sandbox_apps),
            desktop_entries=_normalized(desktop_entries),
            portable_bundles=_normalized(portable_bundles),
            is_executable=is_executable,
        )

    def sizes(self) -> dict[str, int]:
        """Return the number of names per collection."""
        return {
            "packages": len(self.package_names),
            "sandbox_apps": len(self.sandbox_apps),
            "desktop_entries": len(self.desktop_entries),
            "portable_bundles": len(self.portable_bundles),
        }


def _load(name: str, loader: Callable[[], list[str]]) -> list[str]:
    """Run one loader, degrading an unavailable source to an empty list."""
    try:
        names = loader()
    except DataSourceUnavailable as e:
        logger.warning("Data source %s unavailable: %s", name, e)
        return []
    logger.debug("Data source %s returned %d names", name, len(names))
    return names


def build_index(
    desktop_dirs: Sequence[str],
    portable_dir: str,
    *,
    max_workers: int = 4,
) -> InstalledSoftwareIndex:
    """Query every data source and build the installed-software index.

    The sources are independent, so they are queried concurrently. The
    index is only returned once every source has finished or failed.

    Args:
        desktop_dirs: Directories holding ``*.desktop`` launchers.
        portable_dir: Directory holding AppImage bundles.
        max_workers: Number of concurrent source queries.

    Returns:
        Fully built InstalledSoftwareIndex.
    """
    loaders: dict[str, Callable[[], list[str]]] = {
        "packages": list_installed_packages,
        "flatpak": FlatpakSource().list_names,
        "desktop-entries": DesktopEntrySource(desktop_dirs).list_names,
        "appimages": PortableBundleSource(portable_dir).list_names,
    }

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {name: executor.submit(_load, name, loader) for name, loader in loaders.items()}
        results = {name: future.result() for name, future in futures.items()}

    return InstalledSoftwareIndex.from_names(
        packages=results["packages"],
        sandbox_apps=results["flatpak"],
        desktop_entries=results["desktop-entries"],
        portable_bundles=results["appimages"],
    )
