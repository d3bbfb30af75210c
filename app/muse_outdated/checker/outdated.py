"""cargo-outdated invocation.

Runs `cargo outdated -R --format json` and hands back the raw output
streams without interpreting them.
"""

import logging
import subprocess

from muse_outdated.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

DEFAULT_CARGO = "cargo"
DEFAULT_OUTDATED_ARGS = ("outdated", "-R", "--format", "json")


class OutdatedChecker:
    """Runs cargo-outdated for the project in the current directory.

    Example:
        >>> result = OutdatedChecker().invoke()
        >>> if not result.has_stderr:
        ...     print(result.stdout.decode())
    """

    def __init__(
        self,
        cargo_path: str = DEFAULT_CARGO,
        args: list[str] | tuple[str, ...] = DEFAULT_OUTDATED_ARGS,
        timeout: float | None = None,
    ) -> None:
        self.cargo_path = cargo_path
        self.args = list(args)
        self.timeout = timeout

    @property
    def command(self) -> list[str]:
        """Return the full command line."""
        return [self.cargo_path, *self.args]

    def is_available(self) -> bool:
        """Check if the cargo executable can be found."""
        return command_exists(self.cargo_path)

    def invoke(self) -> CommandResult:
        """Run cargo-outdated and capture both output streams.

        A launch failure is not raised. Its message is returned in the
        stdout slot with empty stderr, so it fails later as unparseable
        JSON rather than being reported as a stderr finding. A configured
        timeout that expires is reported in the stderr slot.

        Returns:
            CommandResult with the raw stdout and stderr bytes.
        """
        logger.debug("Running %s", " ".join(self.command))
        try:
            result = run_command(self.command, timeout=self.timeout)
        except OSError as e:
            logger.warning("Failed to launch %s: %s", self.cargo_path, e)
            return CommandResult(stdout=str(e).encode("utf-8"), stderr=b"", returncode=-1)
        except subprocess.TimeoutExpired:
            msg = f"{' '.join(self.command)} timed out after {self.timeout} seconds"
            logger.warning(msg)
            return CommandResult(stdout=b"", stderr=msg.encode("utf-8"), returncode=-1)

        logger.debug(
            "cargo-outdated exited with %d (stdout=%d bytes, stderr=%d bytes)",
            result.returncode,
            len(result.stdout),
            len(result.stderr),
        )
        return result
