"""Rich console formatting utilities.

stdout belongs to Muse, so diagnostics go to the stderr console.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

_THEME = Theme(
    {
        "warning": "#f5b332",
        "error": "bold #f53263",
    }
)

# Shared console instance
err_console = Console(theme=_THEME, stderr=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def setup_logging(verbose: bool = False) -> None:
    """Send log records to the stderr console.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose)],
        force=True,
    )
