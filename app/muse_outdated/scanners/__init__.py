"""Manifest scanners for project dependency files.

This module exports the scanner classes for reading declared dependencies.
"""

from muse_outdated.scanners.base import Scanner
from muse_outdated.scanners.cargo import CargoManifestScanner

__all__ = ["CargoManifestScanner", "Scanner"]
