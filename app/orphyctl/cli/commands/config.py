"""Configuration commands.

Provides commands to inspect the effective alias table and ignore list,
and to write a starter config file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from orphyctl.core.config import CleanerConfig, ConfigError, load_config, save_config
from orphyctl.core.paths import get_config_path
from orphyctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the orphyctl configuration.",
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    """Return the --config path from the root command, or the default."""
    obj = ctx.obj or {}
    return obj.get("config_path") or get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective alias table, ignore list and source locations."""
    path = _config_path(ctx)
    try:
        cleaner_config = load_config(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = str(path) if path.exists() else f"{path} (not found, using defaults)"
    print_info(f"Config file: {source}")

    aliases = Table(title="Aliases", header_style="bold_header", border_style="border")
    aliases.add_column("Folder", no_wrap=True)
    aliases.add_column("Matches as")
    for folder, name in sorted(cleaner_config.effective_aliases.items()):
        aliases.add_row(escape(folder), escape(name))
    console.print(aliases)

    ignored = Table(title="Ignored paths", header_style="bold_header", border_style="border")
    ignored.add_column("Path prefix")
    for entry in cleaner_config.effective_ignored_paths:
        ignored.add_row(escape(entry))
    console.print(ignored)

    console.print(f"[muted]Desktop entry dirs:[/] {escape(', '.join(cleaner_config.desktop_dirs))}")
    console.print(f"[muted]AppImage dir:[/] {escape(cleaner_config.portable_dir)}")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default config file to extend aliases and ignored paths."""
    path = _config_path(ctx)

    if path.exists() and not force:
        print_error(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(CleanerConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
