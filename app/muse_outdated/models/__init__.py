"""Data models for muse-outdated.

This module exports the core data structures used throughout the application.
"""

from muse_outdated.models.finding import NO_FILE, Finding, FindingType
from muse_outdated.models.outdated import DependencyKind, OutdatedDependency, OutdatedReport
from muse_outdated.models.package import DeclaredPackage

__all__ = [
    "NO_FILE",
    "DeclaredPackage",
    "DependencyKind",
    "Finding",
    "FindingType",
    "OutdatedDependency",
    "OutdatedReport",
]
