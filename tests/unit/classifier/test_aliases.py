"""Unit tests for alias resolution."""

from orphyctl.classifier.aliases import DEFAULT_ALIASES, resolve_name


class TestResolveName:
    """Tests for resolve_name function."""

    def test_alias_hit_is_returned_verbatim(self) -> None:
        """An exact alias key returns its canonical name unchanged."""
        assert resolve_name(".mozilla", DEFAULT_ALIASES) == "mozilla"
        assert resolve_name("Code - OSS", DEFAULT_ALIASES) == "code-oss"

    def test_alias_value_is_not_normalized(self) -> None:
        """Alias targets are used as-is, even if not normalized."""
        assert resolve_name(".Weird", {".Weird": "Some_App"}) == "Some_App"

    def test_alias_lookup_is_case_sensitive(self) -> None:
        """Alias keys match the literal basename only."""
        assert resolve_name(".synologydrive", DEFAULT_ALIASES) == "synologydrive"

    def test_leading_dot_stripped(self) -> None:
        """A single leading dot is stripped before normalization."""
        assert resolve_name(".Audacity_Data", {}) == "audacity-data"

    def test_only_one_leading_dot_stripped(self) -> None:
        """Only the first leading dot is removed."""
        assert resolve_name("..hidden", {}) == "-hidden"

    def test_plain_name_normalized(self) -> None:
        """Names without a dot are normalized."""
        assert resolve_name("Foo Bar", {}) == "foo-bar"

    def test_default_aliases_include_irregular_folders(self) -> None:
        """Built-in table covers the known irregular folder names."""
        assert DEFAULT_ALIASES[".SynologyDrive"] == "synology-drive"
        assert DEFAULT_ALIASES[".eID_klient"] == "eidklient"
        assert DEFAULT_ALIASES[".audacity-data"] == "audacity"
