"""Unit tests for the ignore filter."""

from pathlib import Path

from orphyctl.classifier.ignore import DEFAULT_IGNORED_PATHS, is_ignored


class TestIsIgnored:
    """Tests for is_ignored function."""

    def test_exact_match(self) -> None:
        """A path equal to an entry is ignored."""
        assert is_ignored("/home/u/.cache", ["/home/u/.cache"]) is True

    def test_descendant(self) -> None:
        """A path nested under an entry is ignored."""
        assert is_ignored("/home/u/.cache/thumbnails", ["/home/u/.cache"]) is True

    def test_sibling_with_common_prefix_not_ignored(self) -> None:
        """Matching is on whole path segments, not substrings."""
        assert is_ignored("/home/u/.cachex", ["/home/u/.cache"]) is False

    def test_parent_not_ignored(self) -> None:
        """An ancestor of an entry is not ignored."""
        assert is_ignored("/home/u/.mozilla", ["/home/u/.mozilla/cache"]) is False

    def test_trailing_slash_in_entry(self) -> None:
        """Trailing slashes in entries do not matter."""
        assert is_ignored("/home/u/.npm", ["/home/u/.npm/"]) is True

    def test_empty_list(self) -> None:
        """Nothing is ignored with an empty list."""
        assert is_ignored("/home/u/.cache", []) is False

    def test_tilde_expands_to_home(self, home: Path) -> None:
        """Entries starting with ~ are expanded to the home directory."""
        assert is_ignored(str(home / ".cache" / "thumbnails"), ["~/.cache"]) is True
        assert is_ignored(str(home / ".config" / "vlc"), ["~/.cache"]) is False

    def test_default_list(self, home: Path) -> None:
        """Built-in list covers caches, trash and credential stores."""
        assert is_ignored(str(home / ".local" / "share" / "Trash"), DEFAULT_IGNORED_PATHS)
        assert is_ignored(str(home / ".local" / "share" / "keyrings"), DEFAULT_IGNORED_PATHS)
        assert is_ignored(str(home / ".config" / "pulse"), DEFAULT_IGNORED_PATHS)
        assert not is_ignored(str(home / ".config" / "htop"), DEFAULT_IGNORED_PATHS)
