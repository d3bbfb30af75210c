"""Shell execution utilities.

Provides subprocess execution that captures raw output bytes.
"""

import shutil
import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Raw standard output from the command.
        stderr: Raw standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: bytes
    stderr: bytes
    returncode: int

    @property
    def has_stderr(self) -> bool:
        """Check if the command wrote anything to stderr."""
        return len(self.stderr) > 0

    @property
    def stderr_text(self) -> str:
        """Return stderr decoded as UTF-8, replacing invalid bytes."""
        return self.stderr.decode("utf-8", errors="replace")


def run_command(
    args: list[str],
    *,
    timeout: float | None = None,
) -> CommandResult:
    """Execute a shell command and return the result.

    Both output streams are read in full; the call blocks until the
    command exits.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command. None waits forever.

    Returns:
        CommandResult with raw stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        check=False,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name or path to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None
