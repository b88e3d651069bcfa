"""Unit tests for the individual matching rules."""

from orphyctl.classifier.index import InstalledSoftwareIndex
from orphyctl.classifier.rules import (
    DEFAULT_RULES,
    desktop_entry,
    exact_package,
    executable_on_path,
    partial_package,
    portable_bundle,
    sandbox_app,
)
from orphyctl.models.folder import Label


def _index(**kwargs: object) -> InstalledSoftwareIndex:
    kwargs.setdefault("is_executable", lambda _name: False)
    return InstalledSoftwareIndex.from_names(**kwargs)  # type: ignore[arg-type]


class TestRuleOrder:
    """Tests for the rule list ordering."""

    def test_labels_in_precedence_order(self) -> None:
        """Rules run from strongest to weakest evidence."""
        assert [rule.label for rule in DEFAULT_RULES] == [
            Label.PACKAGE_MATCH,
            Label.EXECUTABLE_FOUND,
            Label.PARTIAL_PACKAGE,
            Label.SANDBOX_APP,
            Label.DESKTOP_ENTRY,
            Label.PORTABLE_BUNDLE,
        ]

    def test_orphaned_has_no_rule(self) -> None:
        """Orphaned is the fall-through, not a rule."""
        assert Label.ORPHANED not in {rule.label for rule in DEFAULT_RULES}


class TestExactPackage:
    """Tests for the exact package rule."""

    def test_equal_name_matches(self) -> None:
        assert exact_package("htop", _index(packages=["htop"])) is True

    def test_substring_does_not_match(self) -> None:
        assert exact_package("foo", _index(packages=["foo-bar"])) is False


class TestExecutableOnPath:
    """Tests for the executable rule."""

    def test_uses_index_lookup(self) -> None:
        index = _index(is_executable=lambda name: name == "nvim")
        assert executable_on_path("nvim", index) is True
        assert executable_on_path("vim", index) is False

    def test_empty_name_never_looked_up(self) -> None:
        calls: list[str] = []
        index = _index(is_executable=lambda name: calls.append(name) or True)
        assert executable_on_path("", index) is False
        assert calls == []


class TestSubstringRules:
    """Tests for the substring rules."""

    def test_package_contains_name(self) -> None:
        """Direction is installed name contains folder name."""
        index = _index(packages=["foo-bar-utils"])
        assert partial_package("foo-bar", index) is True
        assert partial_package("foo-bar-utils-extra", index) is False

    def test_sandbox_app(self) -> None:
        assert sandbox_app("spotify", _index(sandbox_apps=["com.spotify.Client"])) is True

    def test_desktop_entry(self) -> None:
        assert desktop_entry("nautilus", _index(desktop_entries=["org.gnome.Nautilus"])) is True

    def test_portable_bundle(self) -> None:
        assert portable_bundle("obsidian", _index(portable_bundles=["Obsidian-1.5.3"])) is True

    def test_empty_name_never_matches(self) -> None:
        """An empty name is not treated as contained in everything."""
        index = _index(packages=["htop"], sandbox_apps=["a"], desktop_entries=["b"])
        assert partial_package("", index) is False
        assert sandbox_app("", index) is False
        assert desktop_entry("", index) is False

    def test_empty_collections_never_match(self) -> None:
        index = _index()
        assert partial_package("x", index) is False
        assert portable_bundle("x", index) is False
