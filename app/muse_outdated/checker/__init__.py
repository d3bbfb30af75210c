"""Dependency staleness checkers.

This module exports the checker that runs cargo-outdated.
"""

from muse_outdated.checker.outdated import OutdatedChecker

__all__ = ["OutdatedChecker"]
