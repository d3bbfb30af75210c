"""Declared package model.

This module defines the record produced by manifest scanning: one
dependency as it is written in the project manifest.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeclaredPackage:
    """A dependency declared in the project manifest.

    Attributes:
        name: Package name as written before the '=' (e.g., 'serde_json').
        version: Declared version string with quotes removed (e.g., '1.0').
        line: 0-based line number of the declaration in the manifest.
    """

    name: str
    version: str
    line: int

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if self.line < 0:
            msg = f"Line number cannot be negative, got {self.line}"
            raise ValueError(msg)

    def matches(self, name: str, version: str) -> bool:
        """Check whether this declaration has exactly the given name and version."""
        return self.name == name and self.version == version
