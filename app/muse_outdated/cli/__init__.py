"""CLI package for muse-outdated.

This package contains the Typer application and the analyzer commands.
"""

from muse_outdated.cli.main import app

__all__ = ["app"]
