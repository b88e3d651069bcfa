"""Disposition models for the interactive cleanup loop."""

from dataclasses import dataclass, field
from enum import Enum


class DispositionAction(str, Enum):
    """Action chosen for an orphaned folder.

    Attributes:
        KEEP: Leave the folder in place.
        DELETE: Recursively and permanently delete the folder.
        SKIP: Leave the folder in place without deciding.
        QUIT: Stop the loop; remaining folders are left untouched.
    """

    KEEP = "k"
    DELETE = "d"
    SKIP = "s"
    QUIT = "q"

    @classmethod
    def parse(cls, raw: str) -> "DispositionAction | None":
        """Parse user input into an action.

        Input is case-insensitive and surrounding whitespace is ignored.

        Args:
            raw: Raw input line.

        Returns:
            The matching action, or None for invalid input.
        """
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(slots=True)
class DispositionSummary:
    """Outcome counters for a disposition run.

    Attributes:
        kept: Folders the user chose to keep.
        deleted: Folders successfully deleted.
        skipped: Folders the user skipped.
        failed: Paths whose deletion failed (credited to no counter).
        quit: Whether the run was ended by the user.
    """

    kept: int = 0
    deleted: int = 0
    skipped: int = 0
    failed: list[str] = field(default_factory=list)
    quit: bool = False

    @property
    def total(self) -> int:
        """Total number of counted outcomes."""
        return self.kept + self.deleted + self.skipped
