"""CLI commands for muse-outdated.

This package contains the implementation of each analyzer command.
"""

from muse_outdated.cli.commands import applicable, run, version

__all__ = ["applicable", "run", "version"]
