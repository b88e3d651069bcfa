"""orphyctl - Find and clean orphaned application config folders.

Classifies per-application folders under ~/.config, ~/.local/share and
hidden home directories against installed packages, Flatpak apps,
desktop entries, AppImages and executables on PATH.
"""

__version__ = "0.1.0"
