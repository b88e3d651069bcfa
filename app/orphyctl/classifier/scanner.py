"""Folder scanner for per-application configuration directories.

Enumerates the top-level entries of the user's config and data
directories plus hidden directories directly under home, drops ignored
paths, and classifies the rest. Only one level is inspected per root.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path

from orphyctl.classifier.classifier import Classifier
from orphyctl.classifier.ignore import DEFAULT_IGNORED_PATHS, is_ignored
from orphyctl.core.paths import get_scan_roots
from orphyctl.models.folder import ScanResult

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, str], None]


class FolderScanner:
    """Scans candidate folders and groups them by classification label.

    Attributes:
        _classifier: Classifier applied to each surviving folder.
        _ignore_list: Path prefixes excluded from scanning.
        _roots: Directories whose immediate subdirectories are scanned.
        _home: Home directory searched for hidden top-level folders.
    """

    def __init__(
        self,
        classifier: Classifier,
        ignore_list: Sequence[str] = DEFAULT_IGNORED_PATHS,
        *,
        roots: Sequence[Path] | None = None,
        home: Path | None = None,
    ) -> None:
        """Initialize the FolderScanner.

        Args:
            classifier: Classifier applied to each candidate folder.
            ignore_list: Ignore-list entries (absolute or ``~``-relative).
            roots: Scan roots. Defaults to the XDG config and data homes.
            home: Home directory. Defaults to ``Path.home()``.
        """
        self._classifier = classifier
        self._ignore_list = tuple(ignore_list)
        self._roots = tuple(roots) if roots is not None else get_scan_roots()
        self._home = home if home is not None else Path.home()

    def scan(self, on_progress: ProgressCallback | None = None) -> ScanResult:
        """Classify every candidate folder.

        Args:
            on_progress: Called with (running count, path) before each
                folder is classified.

        Returns:
            ScanResult grouping each folder under exactly one label.
        """
        result = ScanResult()
        counter = 0

        for folder in self.candidates():
            path = str(folder)
            if path in result:
                continue
            if is_ignored(path, self._ignore_list):
                logger.debug("Ignoring %s", path)
                continue

            counter += 1
            if on_progress is not None:
                on_progress(counter, path)
            result.add(self._classifier.classify(path))

        return result

    def candidates(self) -> Iterator[Path]:
        """Yield candidate directories in scan order.

        Yields:
            Subdirectories of each root, then hidden home directories
            that are not a root or an ancestor of one.
        """
        for root in self._roots:
            yield from self._subdirectories(root)
        yield from self._hidden_home_directories()

    def _hidden_home_directories(self) -> Iterator[Path]:
        """Yield hidden directories directly under home, excluding the roots."""
        for entry in self._subdirectories(self._home):
            if not entry.name.startswith("."):
                continue
            if self._contains_root(entry):
                continue
            yield entry

    def _contains_root(self, entry: Path) -> bool:
        """Check whether ``entry`` is a scan root or an ancestor of one."""
        return any(entry == root or entry in root.parents for root in self._roots)

    def _subdirectories(self, directory: Path) -> Iterator[Path]:
        """Yield immediate subdirectories of ``directory``, sorted.

        Missing or unreadable directories yield nothing. Non-directory
        entries are skipped silently.
        """
        if not directory.is_dir():
            return

        try:
            entries = sorted(directory.iterdir())
        except PermissionError:
            logger.warning("Permission denied scanning directory: %s", directory)
            return
        except OSError as e:
            logger.warning("Cannot scan directory %s: %s", directory, e)
            return

        for entry in entries:
            try:
                if entry.is_dir():
                    yield entry
            except OSError as e:
                logger.warning("Cannot access %s: %s", entry, e)


def scan(
    roots: Iterable[Path],
    classifier: Classifier,
    ignore_list: Sequence[str] = DEFAULT_IGNORED_PATHS,
    home: Path | None = None,
) -> ScanResult:
    """Scan ``roots`` and hidden home directories and classify each folder."""
    return FolderScanner(classifier, ignore_list, roots=list(roots), home=home).scan()
