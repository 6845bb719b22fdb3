"""Utility modules for winkit.

This module exports commonly used utility functions.
"""

from winkit.utils.formatting import (
    console,
    err_console,
    format_bytes,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from winkit.utils.shell import CommandResult, command_exists, format_exit_code, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "format_bytes",
    "format_exit_code",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
