"""Rich display functions for scan results and disposition summaries.

Provides the grouped results report, the per-label summary table and
the cleanup summary printed after the disposition loop.
"""

from rich.markup import escape
from rich.table import Table

from orphyctl.models.disposition import DispositionSummary
from orphyctl.models.folder import REPORT_ORDER, ScanResult
from orphyctl.utils.formatting import console, display_path, print_warning


def print_report(result: ScanResult) -> None:
    """Print one section per label with its folders sorted.

    Empty groups print ``None found.``.

    Args:
        result: Scan result to report.
    """
    console.print("\n[bold_header]===== RESULTS =====[/]")

    for label in REPORT_ORDER:
        console.print(f"\n[bold_header]== {label.heading} ==[/]")
        paths = result.paths(label)
        if not paths:
            console.print("[muted]None found.[/]")
            continue
        for path in paths:
            console.print(f"[{label.style}]{escape(display_path(path))}[/]")


def create_summary_table(result: ScanResult) -> Table:
    """Create a Rich table with the folder count per label.

    Args:
        result: Scan result to summarize.

    Returns:
        Rich Table with Category and Folders columns.
    """
    table = Table(
        title="Summary",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Category")
    table.add_column("Folders", justify="right")

    for label, count in result.counts().items():
        table.add_row(f"[{label.style}]{label.heading}[/]", str(count))

    table.add_row("[bold]Total[/]", f"[bold]{result.total}[/]")
    return table


def print_disposition_summary(summary: DispositionSummary) -> None:
    """Print the kept/deleted/skipped counters.

    A run ended by quit is labelled as partial. Failed deletions are
    listed separately since they credit no counter.

    Args:
        summary: Outcome counters from the disposition loop.
    """
    title = "Partial summary (quit)" if summary.quit else "Cleanup summary"
    console.print(f"\n[bold_header]{title}[/]")
    console.print(
        f"[info]Kept:[/] {summary.kept}  "
        f"[success]Deleted:[/] {summary.deleted}  "
        f"[muted]Skipped:[/] {summary.skipped}"
    )

    if summary.failed:
        print_warning(f"{len(summary.failed)} folder(s) could not be deleted:")
        for path in summary.failed:
            console.print(f"  [error]{escape(display_path(path))}[/]")
