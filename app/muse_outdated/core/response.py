"""Muse response building.

Turns the captured cargo-outdated output into Muse findings, using the
declared packages from the manifest to locate each dependency.
"""

import logging

from pydantic import ValidationError

from muse_outdated.models.finding import NO_FILE, Finding, FindingType
from muse_outdated.models.outdated import OutdatedDependency, OutdatedReport
from muse_outdated.models.package import DeclaredPackage
from muse_outdated.utils.shell import CommandResult

logger = logging.getLogger(__name__)


class OutdatedParseError(ValueError):
    """Raised when cargo-outdated output does not match the expected schema."""


def parse_outdated(stdout: bytes | str) -> OutdatedReport:
    """Parse cargo-outdated JSON output.

    Args:
        stdout: Raw JSON output.

    Returns:
        Validated OutdatedReport.

    Raises:
        OutdatedParseError: If the output is not valid JSON, is not UTF-8,
            or does not match the report schema (including unknown kinds).
    """
    try:
        return OutdatedReport.model_validate_json(stdout)
    except (ValidationError, UnicodeDecodeError) as e:
        raise OutdatedParseError(f"Invalid cargo-outdated output: {e}") from e


def find_line_number(dependency: OutdatedDependency, packages: list[DeclaredPackage]) -> int:
    """Find the manifest line a dependency is declared on.

    Matches on exact name and version string. If several declarations
    match, the last one wins.

    Returns:
        0-based line number, or 0 if nothing matches.
    """
    line = 0
    for pkg in packages:
        if pkg.matches(dependency.name, dependency.current_version):
            line = pkg.line
    return line


def build_message(dependency: OutdatedDependency) -> str:
    """Build the Markdown message for an out-of-date dependency."""
    return (
        f"### {dependency.name}\n"
        f"Version is at {dependency.current_version} "
        f"but could be upgrade to {dependency.latest_version}"
    )


def build_findings(
    result: CommandResult,
    packages: list[DeclaredPackage],
    manifest_name: str = "Cargo.toml",
) -> list[Finding]:
    """Build Muse findings from a cargo-outdated run.

    Any stderr output short-circuits: a single stderr finding is returned
    and stdout is not parsed.

    Args:
        result: Captured cargo-outdated output.
        packages: Declared packages from the manifest.
        manifest_name: File name reported on each finding.

    Returns:
        Findings in the order cargo-outdated reported the dependencies.

    Raises:
        OutdatedParseError: If stdout cannot be parsed.
    """
    if result.has_stderr:
        logger.debug("cargo-outdated wrote to stderr, reporting it as a finding")
        return [Finding(type=FindingType.STDERR, message=result.stderr_text, file=NO_FILE, line=0)]

    report = parse_outdated(result.stdout)
    logger.debug(
        "cargo-outdated reported %d dependencies for %s",
        len(report.dependencies),
        report.crate_name,
    )

    return [
        Finding(
            type=FindingType.OUT_OF_DATE,
            message=build_message(dependency),
            file=manifest_name,
            line=find_line_number(dependency, packages),
        )
        for dependency in report.dependencies
    ]
