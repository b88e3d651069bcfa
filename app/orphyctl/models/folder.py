"""Folder classification models.

This module defines the fixed label set a candidate folder can receive
and the result object the scanner returns in place of a shared global
accumulator.
"""

from dataclasses import dataclass, field
from enum import Enum


class Label(str, Enum):
    """Classification label for a scanned folder.

    Attributes:
        PACKAGE_MATCH: Name equals an installed package.
        EXECUTABLE_FOUND: Name is a runnable command on PATH.
        PARTIAL_PACKAGE: Name is contained in an installed package name.
        SANDBOX_APP: Name is contained in an installed Flatpak app id.
        DESKTOP_ENTRY: Name is contained in a desktop launcher name.
        PORTABLE_BUNDLE: Name is contained in an AppImage name.
        ORPHANED: No installed-software signal found.
    """

    PACKAGE_MATCH = "installed-package-match"
    EXECUTABLE_FOUND = "installed-executable-found"
    PARTIAL_PACKAGE = "maybe-installed-partial-package"
    SANDBOX_APP = "installed-sandbox-app"
    DESKTOP_ENTRY = "installed-desktop-entry"
    PORTABLE_BUNDLE = "installed-portable-bundle"
    ORPHANED = "orphaned"

    @property
    def heading(self) -> str:
        """Human-readable section title."""
        return _TITLES[self]

    @property
    def style(self) -> str:
        """Theme style name used when rendering this label."""
        if self == Label.ORPHANED:
            return "orphaned"
        if self == Label.PARTIAL_PACKAGE:
            return "maybe"
        return "installed"


_TITLES: dict[Label, str] = {
    Label.PACKAGE_MATCH: "Installed (package match)",
    Label.EXECUTABLE_FOUND: "Installed (executable found)",
    Label.SANDBOX_APP: "Installed (Flatpak)",
    Label.DESKTOP_ENTRY: "Installed (desktop file match)",
    Label.PORTABLE_BUNDLE: "Installed (AppImage)",
    Label.PARTIAL_PACKAGE: "Maybe Installed (partial package name match)",
    Label.ORPHANED: "Orphaned",
}

# Order in which groups are reported.
REPORT_ORDER: tuple[Label, ...] = tuple(_TITLES)


@dataclass(frozen=True, slots=True)
class ClassifiedFolder:
    """A candidate folder tagged with exactly one label.

    Attributes:
        path: Absolute path to the folder.
        name: Comparison name the folder was matched with.
        label: Classification label.
    """

    path: str
    name: str
    label: Label

    def __post_init__(self) -> None:
        """Validate classified folder data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)


@dataclass(slots=True)
class ScanResult:
    """Classified folders grouped by label.

    Paths keep insertion order per label; ``paths()`` returns them
    sorted for display. A path is recorded at most once.
    """

    _groups: dict[Label, list[str]] = field(default_factory=lambda: {label: [] for label in Label})
    _seen: set[str] = field(default_factory=set)

    def add(self, folder: ClassifiedFolder) -> bool:
        """Record a classified folder.

        Args:
            folder: Folder to record.

        Returns:
            True if recorded, False if the path was already present.
        """
        if folder.path in self._seen:
            return False
        self._seen.add(folder.path)
        self._groups[folder.label].append(folder.path)
        return True

    def __contains__(self, path: object) -> bool:
        return path in self._seen

    def paths(self, label: Label) -> list[str]:
        """Return the paths with ``label``, sorted lexicographically."""
        return sorted(self._groups[label])

    def count(self, label: Label) -> int:
        """Return the number of paths with ``label``."""
        return len(self._groups[label])

    def counts(self) -> dict[Label, int]:
        """Return the per-label counts in report order."""
        return {label: self.count(label) for label in REPORT_ORDER}

    @property
    def orphaned(self) -> list[str]:
        """Orphaned folder paths, sorted."""
        return self.paths(Label.ORPHANED)

    @property
    def total(self) -> int:
        """Total number of classified folders."""
        return len(self._seen)
