"""Muse finding model.

A finding is one record in the JSON array the analyzer prints for the
``run`` command. Muse expects exactly four keys: type, message, file, line.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# File value used when a finding is not tied to a file
NO_FILE = "N/A"


class FindingType(str, Enum):
    """Finding type tags understood by Muse."""

    STDERR = "stderr"
    OUT_OF_DATE = "Out of date"


@dataclass(frozen=True, slots=True)
class Finding:
    """A single Muse finding.

    Attributes:
        type: Finding type tag.
        message: Markdown message shown to the reviewer.
        file: File the finding refers to, or NO_FILE.
        line: 0-based line in the file, 0 when unknown.
    """

    type: FindingType
    message: str
    file: str = NO_FILE
    line: int = 0

    def __post_init__(self) -> None:
        """Validate finding data after initialization."""
        if self.line < 0:
            msg = f"Line number cannot be negative, got {self.line}"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": self.type.value,
            "message": self.message,
            "file": self.file,
            "line": self.line,
        }
