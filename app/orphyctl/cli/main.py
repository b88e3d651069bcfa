"""Main CLI application entry point.

Defines the Typer application, global options and the default
scan-report-cleanup run executed when no subcommand is given.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler
from rich.markup import escape

from orphyctl import __version__
from orphyctl.classifier.classifier import Classifier
from orphyctl.classifier.index import build_index
from orphyctl.classifier.scanner import FolderScanner
from orphyctl.cleanup.disposition import DispositionLoop
from orphyctl.cli.commands import config
from orphyctl.cli.display import create_summary_table, print_disposition_summary, print_report
from orphyctl.core.config import CleanerConfig, ConfigError, load_config
from orphyctl.models.folder import ScanResult
from orphyctl.utils.formatting import (
    console,
    display_path,
    err_console,
    print_error,
    print_info,
    print_success,
)

logger = logging.getLogger(__name__)

# Create main Typer app
app = typer.Typer(
    name="orphyctl",
    help="Find and clean orphaned application config folders.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"orphyctl version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose (debug) logging.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to an alternate config file.",
        ),
    ] = None,
    report_only: Annotated[
        bool,
        typer.Option(
            "--report-only",
            help="Classify and report without the interactive cleanup.",
        ),
    ] = False,
) -> None:
    """orphyctl - Find and clean orphaned application config folders.

    Scans ~/.config, ~/.local/share and hidden folders in your home
    directory, matches each against installed packages, Flatpak apps,
    desktop entries, AppImages and executables, then lets you keep,
    delete or skip every orphaned folder.

    [bold]Deleted folders cannot be recovered.[/bold]
    """
    configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is not None:
        return

    try:
        cleaner_config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    run(cleaner_config, report_only=report_only)


def run(cleaner_config: CleanerConfig, *, report_only: bool = False) -> None:
    """Build the index, scan, report and run the disposition loop.

    Args:
        cleaner_config: Effective configuration for this run.
        report_only: Stop after the report.

    Raises:
        typer.Exit: With code 0 when the user quits the cleanup.
    """
    with console.status("Collecting installed software..."):
        index = build_index(cleaner_config.desktop_dirs, cleaner_config.portable_dir)
    logger.debug("Index sizes: %s", index.sizes())

    result = scan_folders(cleaner_config, Classifier(index, cleaner_config.effective_aliases))

    print_report(result)
    console.print()
    console.print(create_summary_table(result))

    if report_only:
        return

    orphans = result.orphaned
    if not orphans:
        print_success("No orphaned folders found.")
        return

    console.print("\n[bold_header]Interactive cleanup of orphaned folders.[/]")
    console.print("You can choose to [K]eep, [D]elete, [S]kip, or [Q]uit.", markup=False)
    console.print("[warning]Deletion is permanent and cannot be undone.[/]")

    summary = DispositionLoop(prompt=_prompt).run(orphans)
    print_disposition_summary(summary)

    if summary.quit:
        raise typer.Exit(code=0)


def scan_folders(cleaner_config: CleanerConfig, classifier: Classifier) -> ScanResult:
    """Scan candidate folders while showing the folder being classified.

    On a terminal the progress line replaces itself in a spinner; when
    stdout is redirected each line is printed so it reaches the output.
    """
    print_info("Scanning folders, please wait...")
    scanner = FolderScanner(classifier, cleaner_config.effective_ignored_paths)

    with console.status("Scanning folders...") as status:

        def on_progress(counter: int, path: str) -> None:
            line = f"Processing folder #{counter}: {escape(display_path(path))}"
            if console.is_terminal:
                status.update(line)
            else:
                console.print(line, style="muted", highlight=False)

        return scanner.scan(on_progress=on_progress)


def _prompt(text: str) -> str:
    """Read one answer from the terminal.

    End of input and Ctrl+C end the cleanup like quit.
    """
    try:
        return typer.prompt(text, prompt_suffix=" ", default="", show_default=False)
    except typer.Abort:
        console.print()
        raise EOFError from None


# Register commands
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
