"""Utility modules for orphyctl.

This module exports commonly used utility functions.
"""

from orphyctl.utils.formatting import (
    console,
    display_path,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from orphyctl.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "display_path",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
