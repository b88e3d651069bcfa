"""CLI package for orphyctl.

This package contains the Typer application and all subcommands.
"""

from orphyctl.cli.main import app

__all__ = ["app"]
