"""Version command implementation.

Reports the analyzer protocol version to Muse.
"""

import typer

from muse_outdated import ANALYZER_API_VERSION


def show_version() -> None:
    """Print the analyzer protocol version."""
    typer.echo(str(ANALYZER_API_VERSION))
