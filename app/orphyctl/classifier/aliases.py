"""Known irregular folder names and their canonical application names.

Keys are literal folder basenames (leading dot included). Values are
used as comparison names verbatim, so they must already be normalized.
"""

from collections.abc import Mapping

from orphyctl.classifier.normalize import normalize

DEFAULT_ALIASES: Mapping[str, str] = {
    ".audacity-data": "audacity",
    ".SynologyDrive": "synology-drive",
    "Code - OSS": "code-oss",
    ".eID_klient": "eidklient",
    ".mozilla": "mozilla",
}


def resolve_name(basename: str, aliases: Mapping[str, str]) -> str:
    """Derive the comparison name for a folder basename.

    An exact alias hit wins and is returned unchanged. Otherwise a single
    leading ``.`` is stripped and the remainder normalized.

    Args:
        basename: Folder basename as found on disk.
        aliases: Alias table (basename -> canonical name).

    Returns:
        Name to compare against the installed-software index.
    """
    alias = aliases.get(basename)
    if alias is not None:
        return alias
    if basename.startswith("."):
        basename = basename[1:]
    return normalize(basename)
