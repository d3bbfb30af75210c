"""Cargo manifest scanner implementation.

Reads Cargo.toml line by line and records each `name = "version"`
declaration in the [dependencies] section with its line number.

This is a line scanner, not a TOML parser: inline tables and other
multi-'=' lines are skipped, and only the first [dependencies] section
is read. Line numbers must line up with what Muse shows for the file,
so the narrow matching is kept on purpose.
"""

import logging
from pathlib import Path

from muse_outdated.models.package import DeclaredPackage
from muse_outdated.scanners.base import Scanner

logger = logging.getLogger(__name__)


class CargoManifestScanner(Scanner):
    """Scanner for Cargo.toml dependency declarations."""

    DEPENDENCIES_HEADER = "[dependencies]"

    def __init__(
        self,
        manifest_name: str = "Cargo.toml",
        lockfile_name: str = "Cargo.lock",
    ) -> None:
        self._manifest_name = manifest_name
        self._lockfile_name = lockfile_name

    @property
    def manifest_name(self) -> str:
        """Return the Cargo manifest file name."""
        return self._manifest_name

    @property
    def lockfile_name(self) -> str:
        """Return the Cargo lockfile name."""
        return self._lockfile_name

    def scan(self, path: Path) -> list[DeclaredPackage]:
        """Scan the [dependencies] section of a Cargo manifest.

        Args:
            path: Path to Cargo.toml.

        Returns:
            DeclaredPackage for each accepted declaration, in file order.
            Empty if the manifest has no [dependencies] section.

        Raises:
            OSError: If the manifest cannot be opened or read.
        """
        packages: list[DeclaredPackage] = []
        in_section = False
        section_closed = False

        with open(path, encoding="utf-8") as f:
            for line_number, raw_line in enumerate(f):
                line = raw_line.rstrip("\r\n")

                if not in_section:
                    if line.strip() == self.DEPENDENCIES_HEADER:
                        in_section = True
                    continue

                if section_closed:
                    continue

                if line.startswith("[") and line.endswith("]"):
                    section_closed = True
                    continue

                if "=" in line:
                    package = self._parse_declaration(line, line_number)
                    if package is not None:
                        packages.append(package)

        logger.debug("Found %d declared packages in %s", len(packages), path)
        return packages

    def _parse_declaration(self, line: str, line_number: int) -> DeclaredPackage | None:
        """Parse a single `name = "version"` line.

        Args:
            line: Manifest line containing at least one '='.
            line_number: 0-based line number of the line.

        Returns:
            DeclaredPackage if the line splits into exactly two parts, None otherwise.
        """
        parts = line.split("=")
        if len(parts) != 2:
            logger.debug(
                "Skipping declaration on line %d (parts=%d): %r",
                line_number,
                len(parts),
                line[:100],
            )
            return None

        return DeclaredPackage(
            name=parts[0].strip(),
            version=parts[1].strip().replace('"', ""),
            line=line_number,
        )
