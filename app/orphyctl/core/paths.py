"""XDG-compliant path management for orphyctl.

This module resolves the user directories that orphyctl scans and the
location of its own configuration, following the XDG Base Directory
Specification.

XDG defaults:
- Config home: ~/.config/
- Data home: ~/.local/share/
- orphyctl config: ~/.config/orphyctl/config.toml
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "orphyctl"

# Directory holding user-installed AppImages
PORTABLE_APPS_DIR = "~/Applications"

# System-wide desktop entry directory
SYSTEM_DESKTOP_DIR = "/usr/share/applications"


def _get_xdg_home(env_var: str, default_subdir: str) -> Path:
    """Get an XDG base directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the XDG base directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base)
    return Path.home() / default_subdir


def get_user_config_home() -> Path:
    """Get the user's configuration base directory.

    Returns:
        Path to ~/.config/ (or XDG_CONFIG_HOME).
    """
    return _get_xdg_home("XDG_CONFIG_HOME", ".config")


def get_user_data_home() -> Path:
    """Get the user's data base directory.

    Returns:
        Path to ~/.local/share/ (or XDG_DATA_HOME).
    """
    return _get_xdg_home("XDG_DATA_HOME", ".local/share")


def get_scan_roots() -> tuple[Path, ...]:
    """Get the directories whose immediate children are scanned.

    Returns:
        Tuple of (config home, data home).
    """
    return (get_user_config_home(), get_user_data_home())


def get_config_dir() -> Path:
    """Get the orphyctl configuration directory path.

    Returns:
        Path to ~/.config/orphyctl/ (or XDG_CONFIG_HOME/orphyctl/).
    """
    return get_user_config_home() / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/orphyctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/orphyctl/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def expand_home(path: str) -> str:
    """Expand a leading ``~`` to the current home directory.

    Uses ``Path.home()`` rather than ``os.path.expanduser`` so the home
    directory can be substituted in tests.

    Args:
        path: Path string, possibly starting with ``~``.

    Returns:
        Absolute path string.
    """
    if path == "~":
        return str(Path.home())
    if path.startswith("~/"):
        return str(Path.home() / path[2:])
    return path
