"""Utility modules for muse-outdated.

This module exports commonly used utility functions.
"""

from muse_outdated.utils.formatting import (
    err_console,
    print_error,
    print_warning,
    setup_logging,
)
from muse_outdated.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "err_console",
    "print_error",
    "print_warning",
    "run_command",
    "setup_logging",
]
