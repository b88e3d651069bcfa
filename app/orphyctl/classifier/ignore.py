"""Path prefixes excluded from scanning entirely.

These are well-known cache, trash, credential and runtime locations
that never belong to a single application. Entries starting with ``~``
are expanded to the user's home directory before matching.
"""

from collections.abc import Iterable
from pathlib import PurePath

from orphyctl.core.paths import expand_home

DEFAULT_IGNORED_PATHS: tuple[str, ...] = (
    "~/.local/share/applications",
    "~/.local/share/backgrounds",
    "~/.local/share/keyrings",
    "~/.local/share/sounds",
    "~/.local/share/Trash",
    "~/.cache",
    "~/.mozilla/cache",
    "~/.thumbnails",
    "~/.npm",
    "~/.config/pulse",
    "~/.local/share/flatpak/runtime",
)


def is_ignored(path: str, ignore_list: Iterable[str]) -> bool:
    """Check if a path is equal to, or nested under, an ignore-list entry.

    Matching is done on whole path segments: ``~/.cache`` ignores
    ``~/.cache/thumbnails`` but not ``~/.cachex``.

    Args:
        path: Absolute path to check.
        ignore_list: Ignore-list entries (absolute or ``~``-relative).

    Returns:
        True if the path must be excluded from scanning.
    """
    candidate = PurePath(path)
    for entry in ignore_list:
        ignored = PurePath(expand_home(entry))
        if candidate == ignored or ignored in candidate.parents:
            return True
    return False
