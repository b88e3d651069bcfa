"""System package manager sources.

Queries the installed package names from pacman, dpkg or rpm. The first
package manager present on the system is used.
"""

import logging
import subprocess

from orphyctl.sources.base import DataSourceUnavailable, NameSource
from orphyctl.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class CommandPackageSource(NameSource):
    """Package source backed by a single listing command.

    Subclasses set ``_EXECUTABLE`` and ``_COMMAND``; the command must
    print one package name per line.
    """

    _EXECUTABLE: str = ""
    _COMMAND: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        """Return the package manager executable name."""
        return self._EXECUTABLE

    def is_available(self) -> bool:
        """Check if the package manager executable is on PATH."""
        return command_exists(self._EXECUTABLE)

    def list_names(self) -> list[str]:
        """List installed package names.

        Raises:
            DataSourceUnavailable: If the package manager is absent or fails.
        """
        if not self.is_available():
            msg = f"{self._EXECUTABLE} is not available on this system"
            raise DataSourceUnavailable(msg)

        try:
            result = run_command(list(self._COMMAND), timeout=30.0)
        except (FileNotFoundError, OSError, ValueError, subprocess.TimeoutExpired) as e:
            msg = f"{self._EXECUTABLE} query failed: {e}"
            raise DataSourceUnavailable(msg) from e

        if not result.success:
            msg = f"{self._EXECUTABLE} query failed: {result.stderr.strip()}"
            raise DataSourceUnavailable(msg)

        return result.lines()


class PacmanSource(CommandPackageSource):
    """Installed packages on Arch-based systems (official and AUR)."""

    _EXECUTABLE = "pacman"
    _COMMAND = ("pacman", "-Qq")


class DpkgSource(CommandPackageSource):
    """Installed packages on Debian-based systems."""

    _EXECUTABLE = "dpkg-query"
    _COMMAND = ("dpkg-query", "-W", "-f", "${Package}\\n")


class RpmSource(CommandPackageSource):
    """Installed packages on RPM-based systems."""

    _EXECUTABLE = "rpm"
    _COMMAND = ("rpm", "-qa", "--qf", "%{NAME}\\n")


def get_package_sources() -> list[CommandPackageSource]:
    """Get package sources in order of preference."""
    return [PacmanSource(), DpkgSource(), RpmSource()]


def list_installed_packages() -> list[str]:
    """List installed package names from the first available package manager.

    Returns:
        Package names as reported by the package manager.

    Raises:
        DataSourceUnavailable: If no supported package manager is present.
    """
    for source in get_package_sources():
        if source.is_available():
            logger.debug("Querying installed packages with %s", source.name)
            return source.list_names()

    msg = "No supported package manager found (pacman, dpkg-query, rpm)"
    raise DataSourceUnavailable(msg)
