"""Flatpak application source.

Lists installed Flatpak application ids using the flatpak CLI.
"""

import subprocess

from orphyctl.sources.base import DataSourceUnavailable, NameSource
from orphyctl.utils.shell import command_exists, run_command


class FlatpakSource(NameSource):
    """Source for installed Flatpak applications.

    Only applications are listed, not runtimes; runtimes never own a
    per-application config folder.
    """

    @property
    def name(self) -> str:
        """Return the source identifier."""
        return "flatpak"

    def is_available(self) -> bool:
        """Check if flatpak CLI is available."""
        return command_exists("flatpak")

    def list_names(self) -> list[str]:
        """List installed Flatpak app ids (e.g. ``org.mozilla.firefox``).

        Raises:
            DataSourceUnavailable: If flatpak is absent or the query fails.
        """
        if not self.is_available():
            msg = "Flatpak is not available on this system"
            raise DataSourceUnavailable(msg)

        try:
            result = run_command(
                ["flatpak", "list", "--app", "--columns=application"],
                timeout=15.0,
            )
        except (FileNotFoundError, OSError, ValueError, subprocess.TimeoutExpired) as e:
            msg = f"flatpak list failed: {e}"
            raise DataSourceUnavailable(msg) from e

        if not result.success:
            msg = f"flatpak list failed: {result.stderr.strip()}"
            raise DataSourceUnavailable(msg)

        return result.lines()


def list_sandbox_apps() -> list[str]:
    """List installed Flatpak app ids, or an empty list if Flatpak is absent."""
    return FlatpakSource().list_names_or_empty()
