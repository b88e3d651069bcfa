"""Ordered matching rules for folder classification.

Each rule pairs a label with a predicate over the comparison name and
the installed-software index. Rules are evaluated in order and the
first one that holds decides the label; each successive rule is weaker
evidence of installation than the one before it.

Substring rules test "installed name contains comparison name", so a
folder ``foo-bar`` matches the package ``foo-bar-utils`` but a folder
``foo-bar-utils`` does not match the package ``foo-bar``.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from orphyctl.classifier.index import InstalledSoftwareIndex
from orphyctl.models.folder import Label

Predicate = Callable[[str, InstalledSoftwareIndex], bool]


@dataclass(frozen=True, slots=True)
class MatchRule:
    """A classification rule.

    Attributes:
        label: Label assigned when the predicate holds.
        predicate: Test over (comparison name, index).
    """

    label: Label
    predicate: Predicate

    def matches(self, name: str, index: InstalledSoftwareIndex) -> bool:
        """Check whether this rule applies to ``name``."""
        return self.predicate(name, index)


def _contained_in(name: str, candidates: Iterable[str]) -> bool:
    """Check whether any candidate contains ``name``.

    An empty name never matches, since it is contained in everything.
    """
    if not name:
        return False
    return any(name in candidate for candidate in candidates)


def exact_package(name: str, index: InstalledSoftwareIndex) -> bool:
    """Name equals an installed package."""
    return name in index.packages


def executable_on_path(name: str, index: InstalledSoftwareIndex) -> bool:
    """Name is a runnable command on PATH."""
    return bool(name) and index.is_executable(name)


def partial_package(name: str, index: InstalledSoftwareIndex) -> bool:
    """Name is contained in an installed package name."""
    return _contained_in(name, index.package_names)


def sandbox_app(name: str, index: InstalledSoftwareIndex) -> bool:
    """Name is contained in a Flatpak app id."""
    return _contained_in(name, index.sandbox_apps)


def desktop_entry(name: str, index: InstalledSoftwareIndex) -> bool:
    """Name is contained in a desktop launcher name."""
    return _contained_in(name, index.desktop_entries)


def portable_bundle(name: str, index: InstalledSoftwareIndex) -> bool:
    """Name is contained in an AppImage name."""
    return _contained_in(name, index.portable_bundles)


DEFAULT_RULES: tuple[MatchRule, ...] = (
    MatchRule(Label.PACKAGE_MATCH, exact_package),
    MatchRule(Label.EXECUTABLE_FOUND, executable_on_path),
    MatchRule(Label.PARTIAL_PACKAGE, partial_package),
    MatchRule(Label.SANDBOX_APP, sandbox_app),
    MatchRule(Label.DESKTOP_ENTRY, desktop_entry),
    MatchRule(Label.PORTABLE_BUNDLE, portable_bundle),
)
