"""Abstract base class for manifest scanners.

This module defines the Scanner interface that all project manifest
scanners must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from muse_outdated.models.package import DeclaredPackage


class Scanner(ABC):
    """Abstract base class for all manifest scanners.

    Scanners read a project manifest and return the dependencies it
    declares, together with the line each one is declared on.

    Example:
        >>> scanner = CargoManifestScanner()
        >>> if scanner.is_available(Path(".")):
        ...     for pkg in scanner.scan(Path("Cargo.toml")):
        ...         print(f"{pkg.name}: {pkg.version} (line {pkg.line})")
    """

    @property
    @abstractmethod
    def manifest_name(self) -> str:
        """Return the manifest file name this scanner reads (e.g., 'Cargo.toml')."""

    @property
    @abstractmethod
    def lockfile_name(self) -> str:
        """Return the lockfile name whose presence makes the analyzer applicable."""

    @abstractmethod
    def scan(self, path: Path) -> list[DeclaredPackage]:
        """Scan a manifest file and return its declared dependencies.

        Args:
            path: Path to the manifest file.

        Returns:
            DeclaredPackage instances in manifest order.

        Raises:
            OSError: If the manifest cannot be opened or read.
        """

    def is_available(self, directory: Path) -> bool:
        """Check if the project in a directory has a lockfile.

        Args:
            directory: Project directory to inspect.

        Returns:
            True if the lockfile exists, False otherwise (including on OS errors).
        """
        try:
            return (directory / self.lockfile_name).exists()
        except OSError:
            return False
