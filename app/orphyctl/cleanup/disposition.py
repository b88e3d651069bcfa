"""Interactive disposition loop for orphaned folders.

Walks the orphaned folders one at a time and asks whether to keep,
delete or skip each one, or to quit the run. Deletion is immediate and
irreversible.
"""

import logging
from collections.abc import Callable, Iterable

from rich.markup import escape

from orphyctl.cleanup.operator import FolderOperator
from orphyctl.models.disposition import DispositionAction, DispositionSummary
from orphyctl.utils.formatting import console, display_path

logger = logging.getLogger(__name__)

INVALID_OPTION_MESSAGE = "Invalid option. Please choose K, D, S, or Q."

PromptFunc = Callable[[str], str]
EchoFunc = Callable[[str], None]


def prompt_text(path: str) -> str:
    """Return the prompt shown for one folder."""
    return f"Action for: {display_path(path)} [K/D/S/Q]:"


def _console_echo(message: str) -> None:
    console.print(message)


class DispositionLoop:
    """Prompts for and executes an action on each orphaned folder.

    Invalid input re-prompts for the same folder. Quit ends the loop
    immediately; folders not yet visited are left untouched and receive
    no outcome. A failed deletion is reported and credited to no counter.

    Example:
        >>> loop = DispositionLoop(prompt=input)
        >>> summary = loop.run(["/home/me/.config/old-app"])
    """

    def __init__(
        self,
        prompt: PromptFunc,
        echo: EchoFunc = _console_echo,
        operator: FolderOperator | None = None,
    ) -> None:
        """Initialize the DispositionLoop.

        Args:
            prompt: Reads one answer for the given prompt text. Raising
                EOFError is treated as quit.
            echo: Writes one line of Rich markup to the user.
            operator: Performs deletions. Defaults to FolderOperator().
        """
        self._prompt = prompt
        self._echo = echo
        self._operator = operator or FolderOperator()

    def run(self, folders: Iterable[str]) -> DispositionSummary:
        """Process folders in sorted order.

        Args:
            folders: Orphaned folder paths.

        Returns:
            DispositionSummary with outcome counters; ``quit`` is set if
            the user ended the run early.
        """
        summary = DispositionSummary()

        for folder in sorted(folders):
            action = self._ask(folder)
            if action == DispositionAction.QUIT:
                self._echo("[warning]Quitting.[/]")
                summary.quit = True
                logger.debug("Disposition quit before %s", folder)
                break
            self._apply(action, folder, summary)

        return summary

    def _ask(self, folder: str) -> DispositionAction:
        """Prompt until a valid action is entered."""
        while True:
            try:
                raw = self._prompt(prompt_text(folder))
            except EOFError:
                return DispositionAction.QUIT

            action = DispositionAction.parse(raw)
            if action is not None:
                return action
            self._echo(f"[warning]{INVALID_OPTION_MESSAGE}[/]")

    def _apply(self, action: DispositionAction, folder: str, summary: DispositionSummary) -> None:
        """Execute a non-quit action and update the counters."""
        shown = escape(display_path(folder))

        if action == DispositionAction.KEEP:
            summary.kept += 1
            self._echo(f"Keeping {shown}.")
        elif action == DispositionAction.SKIP:
            summary.skipped += 1
            self._echo(f"[muted]Skipped {shown}.[/]")
        elif action == DispositionAction.DELETE:
            result = self._operator.delete(folder)
            if result.success:
                summary.deleted += 1
                self._echo(f"[success]Deleted {shown}.[/]")
            else:
                summary.failed.append(folder)
                reason = display_path(result.error or "unknown error")
                self._echo(f"[error]could not delete: {escape(reason)}[/]")
