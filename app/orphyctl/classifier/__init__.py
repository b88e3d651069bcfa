"""Folder classification engine.

This module provides name normalization, alias resolution, the
installed-software index, the ordered matching rules, the ignore
filter and the folder scanner.
"""

from orphyctl.classifier.aliases import DEFAULT_ALIASES, resolve_name
from orphyctl.classifier.classifier import Classifier, classify
from orphyctl.classifier.ignore import DEFAULT_IGNORED_PATHS, is_ignored
from orphyctl.classifier.index import InstalledSoftwareIndex, build_index
from orphyctl.classifier.normalize import normalize
from orphyctl.classifier.rules import DEFAULT_RULES, MatchRule
from orphyctl.classifier.scanner import FolderScanner, scan

__all__ = [
    "DEFAULT_ALIASES",
    "DEFAULT_IGNORED_PATHS",
    "DEFAULT_RULES",
    "Classifier",
    "FolderScanner",
    "InstalledSoftwareIndex",
    "MatchRule",
    "build_index",
    "classify",
    "is_ignored",
    "normalize",
    "resolve_name",
    "scan",
]
