"""Applicable command implementation.

Tells Muse whether the analyzer applies to the project in the current
directory: it does when a Cargo lockfile is present.
"""

import logging
from pathlib import Path

import typer

from muse_outdated.scanners.base import Scanner

logger = logging.getLogger(__name__)


def check_applicable(scanner: Scanner, directory: Path | None = None) -> bool:
    """Print 'true' or 'false' depending on whether the lockfile exists.

    Args:
        scanner: Scanner that knows the lockfile name.
        directory: Project directory. If None, uses the current directory.

    Returns:
        The printed answer.
    """
    project_dir = directory or Path.cwd()
    applicable = scanner.is_available(project_dir)
    logger.debug("%s in %s: %s", scanner.lockfile_name, project_dir, applicable)

    typer.echo("true" if applicable else "false")
    return applicable
