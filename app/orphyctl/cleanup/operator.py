"""Folder deletion operator.

Permanently deletes orphaned folders. There is no backup and no undo:
a successful deletion is final.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of a single folder deletion.

    Attributes:
        path: Absolute path that was operated on.
        success: Whether the folder was removed.
        error: Error message if the deletion failed, None otherwise.
    """

    path: str
    success: bool
    error: str | None = None


class FolderOperator:
    """Deletes folders recursively.

    Symlinks are unlinked rather than followed, so a linked folder never
    has its target's contents removed.
    """

    def delete(self, path: str) -> DeletionResult:
        """Delete a folder and everything below it.

        Args:
            path: Absolute path of the folder to delete.

        Returns:
            DeletionResult indicating success or failure. Filesystem
            errors are reported in the result, never raised.
        """
        target = Path(path)

        if not target.exists() and not target.is_symlink():
            return DeletionResult(path=path, success=False, error=f"Path does not exist: {path}")

        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(path)
            else:
                target.unlink()
        except OSError as e:
            logger.warning("Deletion failed for %s: %s", path, e)
            return DeletionResult(path=path, success=False, error=str(e))

        logger.info("Deleted %s", path)
        return DeletionResult(path=path, success=True)
